from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pwadmin.db.base import Base
from pwadmin.domain.enums import OrganizationMemberRole

if TYPE_CHECKING:
    from pwadmin.db.models.organization import Organization
    from pwadmin.db.models.user import User


class OrganizationMember(Base):
    """Join entity: one user's role inside one organization."""

    __tablename__ = "organization_member"
    __table_args__ = (UniqueConstraint("user_id", "organization_id"),)

    role: Mapped[int | None] = mapped_column(
        Integer, default=OrganizationMemberRole.member, nullable=True
    )
    user_id: Mapped[int] = mapped_column(ForeignKey("user.id"), index=True)
    organization_id: Mapped[int] = mapped_column(ForeignKey("organization.id"), index=True)

    user: Mapped[User] = relationship(back_populates="organization_memberships")
    organization: Mapped[Organization] = relationship(back_populates="members")
