from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pwadmin.db.base import Base
from pwadmin.domain.enums import DeletionStatus

if TYPE_CHECKING:
    from pwadmin.db.models.organization_member import OrganizationMember


class Organization(Base):
    __tablename__ = "organization"

    name: Mapped[str] = mapped_column(String(255), index=True)
    gravatar_url: Mapped[str | None] = mapped_column(String(255), default=None)
    solo_season: Mapped[bool] = mapped_column(default=False)
    deletion_status: Mapped[int] = mapped_column(Integer, default=DeletionStatus.active)

    members: Mapped[list[OrganizationMember]] = relationship(back_populates="organization")
