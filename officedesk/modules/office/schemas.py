"""Pydantic response schemas for the office module."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from officedesk.models.enums import OfficeCategory
from officedesk.modules.staff.schemas import StaffResponse

if TYPE_CHECKING:
    from officedesk.models.office import Office


class OfficeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str | None = None
    category: OfficeCategory
    is_external: bool = Field(False, alias="isExternal")
    members: list[StaffResponse] | None = None

    @classmethod
    def from_model(cls, office: Office) -> OfficeResponse:
        members = [StaffResponse.from_model(member) for member in office.members or []]
        return cls(
            name=office.name,
            description=office.description,
            category=office.category,
            is_external=office.is_external,
            members=members or None,
        )
