from __future__ import annotations

import hashlib
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pwadmin.core.config import settings
from pwadmin.db.models.organization import Organization
from pwadmin.db.models.organization_member import OrganizationMember
from pwadmin.db.models.user import User
from pwadmin.domain.enums import DeletionStatus, OrganizationMemberRole

logger = logging.getLogger(__name__)


def gravatar_url(email: str) -> str:
    digest = hashlib.md5(email.strip().lower().encode()).hexdigest()
    return settings.GRAVATAR_URL_TEMPLATE.format(digest=digest)


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def get_organization(db: Session, organization_id: int) -> Organization | None:
    return db.get(Organization, organization_id)


def register_user(
    db: Session,
    *,
    username: str,
    email: str,
    oauth_subject: str | None = None,
) -> User:
    """Create a user together with its solo organization, owned by the user.

    The three rows are committed together; on a constraint violation nothing
    is persisted and the ``IntegrityError`` propagates.
    """
    avatar = gravatar_url(email)
    user = User(
        username=username,
        email=email,
        gravatar_url=avatar,
        oauth_subject=oauth_subject,
        deletion_status=DeletionStatus.active,
    )
    organization = Organization(
        name=username,
        gravatar_url=avatar,
        solo_season=True,
        deletion_status=DeletionStatus.active,
    )
    db.add(
        OrganizationMember(user=user, organization=organization, role=OrganizationMemberRole.owner)
    )
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("register_user: username=%s rejected", username)
        raise
    db.refresh(user)
    logger.info("register_user: user_id=%s organization_id=%s", user.id, organization.id)
    return user
