import pytest
from sqlalchemy.exc import IntegrityError

from pwadmin.db.models.organization import Organization
from pwadmin.db.models.organization_member import OrganizationMember
from pwadmin.db.models.user import User
from pwadmin.domain.enums import DeletionStatus, OrganizationMemberRole
from pwadmin.services.membership_service import (
    create_membership,
    delete_membership,
    get_membership,
    list_memberships,
    list_user_organizations,
    update_role,
    user_belongs_to_organization,
)
from pwadmin.services.user_service import gravatar_url, register_user


class TestMembershipService:
    def test_create_and_get(self, db, seed_member, other_user):
        _, org, _ = seed_member
        member = create_membership(db, user_id=other_user.id, organization_id=org.id)

        loaded = get_membership(db, member.id)
        assert loaded.role == OrganizationMemberRole.member
        assert loaded.user.username == "bob"
        assert loaded.organization.name == "Staff"

    def test_create_duplicate_raises_and_rolls_back(self, db, seed_member):
        user, org, _ = seed_member
        with pytest.raises(IntegrityError):
            create_membership(db, user_id=user.id, organization_id=org.id)
        assert db.query(OrganizationMember).count() == 1

    def test_get_missing(self, db):
        assert get_membership(db, 999) is None

    def test_list_filters(self, db, seed_member, other_user):
        alice, staff, _ = seed_member
        other_org = Organization(name="Guests")
        db.add(other_org)
        db.commit()
        create_membership(db, user_id=other_user.id, organization_id=staff.id)
        create_membership(db, user_id=other_user.id, organization_id=other_org.id)

        assert len(list_memberships(db)) == 3
        assert {m.organization_id for m in list_memberships(db, user_id=other_user.id)} == {
            staff.id,
            other_org.id,
        }
        assert {m.user_id for m in list_memberships(db, organization_id=staff.id)} == {
            alice.id,
            other_user.id,
        }
        assert len(list_memberships(db, limit=1, offset=2)) == 1

    def test_update_role(self, db, seed_member):
        _, _, member = seed_member
        updated = update_role(db, member.id, OrganizationMemberRole.member)
        assert updated.role == OrganizationMemberRole.member

    def test_update_role_missing(self, db):
        assert update_role(db, 999, OrganizationMemberRole.owner) is None

    def test_delete(self, db, seed_member):
        user, org, member = seed_member
        assert delete_membership(db, member.id) is True
        assert delete_membership(db, member.id) is False
        assert not user_belongs_to_organization(db, user.id, org.id)
        # the associated rows are untouched
        assert db.get(User, user.id) is not None
        assert db.get(Organization, org.id) is not None

    def test_user_belongs_to_organization(self, db, seed_member, other_user):
        user, org, _ = seed_member
        assert user_belongs_to_organization(db, user.id, org.id)
        assert not user_belongs_to_organization(db, other_user.id, org.id)

    def test_list_user_organizations(self, db, seed_member, other_user):
        user, org, _ = seed_member
        assert [o.id for o in list_user_organizations(db, user.id)] == [org.id]
        assert list_user_organizations(db, other_user.id) == []


class TestRegisterUser:
    def test_creates_solo_organization_owned_by_user(self, db):
        user = register_user(db, username="neo", email="neo@pathwar.local", oauth_subject="sub-1")

        assert user.deletion_status == DeletionStatus.active
        memberships = list_memberships(db, user_id=user.id)
        assert len(memberships) == 1
        member = memberships[0]
        assert member.role == OrganizationMemberRole.owner
        assert member.organization.name == "neo"
        assert member.organization.solo_season is True

    def test_gravatar(self, db):
        user = register_user(db, username="neo", email="Neo@Pathwar.local")
        assert user.gravatar_url == gravatar_url("neo@pathwar.local")
        assert user.gravatar_url.startswith("https://www.gravatar.com/avatar/")

    def test_duplicate_username_persists_nothing(self, db):
        register_user(db, username="neo", email="neo@pathwar.local")
        with pytest.raises(IntegrityError):
            register_user(db, username="neo", email="other@pathwar.local")

        assert db.query(User).count() == 1
        assert db.query(Organization).count() == 1
        assert db.query(OrganizationMember).count() == 1
