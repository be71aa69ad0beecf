from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Index, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from officedesk.database.base import Base, IntegerPrimaryKeyMixin, TimestampMixin
from officedesk.models.enums import StaffRole

if TYPE_CHECKING:
    from officedesk.models.office import Office

staff_offices = Table(
    "staff_offices",
    Base.metadata,
    Column("staff_id", ForeignKey("staff.id", ondelete="CASCADE"), primary_key=True),
    Column("office_id", ForeignKey("offices.id", ondelete="CASCADE"), primary_key=True),
)


class Staff(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "staff"

    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    surname: Mapped[str] = mapped_column(String(100), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[StaffRole] = mapped_column(nullable=False)

    offices: Mapped[list[Office]] = relationship(
        "Office", secondary=staff_offices, back_populates="members"
    )

    __table_args__ = (Index("ix_staff_role", "role"),)
