from enum import IntEnum


class OrganizationMemberRole(IntEnum):
    unknown = 0
    owner = 1
    member = 2


class DeletionStatus(IntEnum):
    unknown = 0
    active = 1
    requested = 2
    done = 3
