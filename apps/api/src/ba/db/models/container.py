from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ba.db.base import Base

if TYPE_CHECKING:
    from ba.db.models.membership import Membership


class Container(Base):
    """A board or a space. Both share one table and differ only by ``kind``."""

    __tablename__ = "containers"

    kind: Mapped[str] = mapped_column(String(20), index=True)
    name: Mapped[str] = mapped_column(String(255))
    owner_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"), index=True)

    memberships: Mapped[list[Membership]] = relationship(back_populates="container")
