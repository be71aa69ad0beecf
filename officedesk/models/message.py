from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from officedesk.database.base import Base, IntegerPrimaryKeyMixin

if TYPE_CHECKING:
    from officedesk.models.staff import Staff


class Message(IntegerPrimaryKeyMixin, Base):
    __tablename__ = "messages"

    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    is_private: Mapped[bool] = mapped_column(Boolean, server_default="false", nullable=False)
    staff_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("staff.id", ondelete="SET NULL")
    )

    staff: Mapped[Staff | None] = relationship("Staff")
