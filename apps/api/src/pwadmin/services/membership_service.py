from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from pwadmin.db.models.organization import Organization
from pwadmin.db.models.organization_member import OrganizationMember
from pwadmin.domain.enums import OrganizationMemberRole

logger = logging.getLogger(__name__)


def create_membership(
    db: Session,
    *,
    user_id: int,
    organization_id: int,
    role: OrganizationMemberRole = OrganizationMemberRole.member,
) -> OrganizationMember:
    member = OrganizationMember(user_id=user_id, organization_id=organization_id, role=role)
    db.add(member)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(
            "create_membership: rejected user_id=%s organization_id=%s", user_id, organization_id
        )
        raise
    db.refresh(member)
    logger.info(
        "create_membership: user_id=%s organization_id=%s role=%s",
        user_id,
        organization_id,
        int(role),
    )
    return member


def get_membership(db: Session, member_id: int) -> OrganizationMember | None:
    return (
        db.query(OrganizationMember)
        .options(joinedload(OrganizationMember.user), joinedload(OrganizationMember.organization))
        .filter(OrganizationMember.id == member_id)
        .first()
    )


def list_memberships(
    db: Session,
    *,
    user_id: int | None = None,
    organization_id: int | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> list[OrganizationMember]:
    query = db.query(OrganizationMember).options(
        joinedload(OrganizationMember.user), joinedload(OrganizationMember.organization)
    )
    if user_id is not None:
        query = query.filter(OrganizationMember.user_id == user_id)
    if organization_id is not None:
        query = query.filter(OrganizationMember.organization_id == organization_id)
    query = query.order_by(OrganizationMember.id).offset(offset)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def update_role(
    db: Session, member_id: int, role: OrganizationMemberRole
) -> OrganizationMember | None:
    member = get_membership(db, member_id)
    if member is None:
        return None
    member.role = role
    db.commit()
    db.refresh(member)
    return member


def delete_membership(db: Session, member_id: int) -> bool:
    member = db.get(OrganizationMember, member_id)
    if member is None:
        return False
    db.delete(member)
    db.commit()
    logger.info("delete_membership: id=%s", member_id)
    return True


def user_belongs_to_organization(db: Session, user_id: int, organization_id: int) -> bool:
    return (
        db.query(OrganizationMember)
        .filter(
            OrganizationMember.user_id == user_id,
            OrganizationMember.organization_id == organization_id,
        )
        .first()
        is not None
    )


def list_user_organizations(db: Session, user_id: int) -> list[Organization]:
    return (
        db.query(Organization)
        .join(OrganizationMember, OrganizationMember.organization_id == Organization.id)
        .filter(OrganizationMember.user_id == user_id)
        .order_by(Organization.id)
        .all()
    )
