from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ba.db.base import Base
from ba.domain.enums import MemberRole, MembershipStatus

if TYPE_CHECKING:
    from ba.db.models.container import Container
    from ba.db.models.user import User


class Membership(Base):
    __tablename__ = "memberships"
    __table_args__ = (UniqueConstraint("container_id", "user_id"),)

    container_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("containers.id"), index=True)
    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"), index=True)
    role: Mapped[str] = mapped_column(String(20), default=MemberRole.member)
    status: Mapped[str] = mapped_column(String(20), default=MembershipStatus.invited)

    container: Mapped[Container] = relationship(back_populates="memberships")
    user: Mapped[User] = relationship(back_populates="memberships")
