from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from officedesk.database.base import Base, IntegerPrimaryKeyMixin, TimestampMixin
from officedesk.models.enums import OfficeCategory
from officedesk.models.staff import staff_offices

if TYPE_CHECKING:
    from officedesk.models.staff import Staff


class Office(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "offices"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    category: Mapped[OfficeCategory] = mapped_column(nullable=False)
    is_external: Mapped[bool] = mapped_column(Boolean, server_default="false", nullable=False)

    members: Mapped[list[Staff]] = relationship(
        "Staff", secondary=staff_offices, back_populates="offices"
    )

    __table_args__ = (Index("ix_offices_category_external", "category", "is_external"),)
