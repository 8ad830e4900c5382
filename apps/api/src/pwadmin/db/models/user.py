from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pwadmin.db.base import Base
from pwadmin.domain.enums import DeletionStatus

if TYPE_CHECKING:
    from pwadmin.db.models.organization_member import OrganizationMember


class User(Base):
    __tablename__ = "user"

    username: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    email: Mapped[str | None] = mapped_column(String(320), default=None)
    gravatar_url: Mapped[str | None] = mapped_column(String(255), default=None)
    oauth_subject: Mapped[str | None] = mapped_column(String(255), unique=True, default=None)
    deletion_status: Mapped[int] = mapped_column(Integer, default=DeletionStatus.active)

    organization_memberships: Mapped[list[OrganizationMember]] = relationship(
        back_populates="user"
    )
