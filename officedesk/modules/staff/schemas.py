"""Pydantic request/response schemas for the staff module."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

from officedesk.models.enums import StaffRole

if TYPE_CHECKING:
    from officedesk.models.staff import Staff


class StaffResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str
    name: str
    surname: str
    role: StaffRole
    office_names: list[str] | None = Field(None, alias="officeNames")

    @classmethod
    def from_model(cls, staff: Staff) -> StaffResponse:
        office_names = [office.name for office in staff.offices or []]
        return cls(
            username=staff.username,
            name=staff.name,
            surname=staff.surname,
            role=staff.role,
            # Empty lists are dropped from the wire shape
            office_names=office_names or None,
        )


class UpdateStaffOfficesRequest(BaseModel):
    """Exactly one of ``offices`` (replace), ``add`` or ``remove`` must be given."""

    offices: list[str] | None = None
    add: str | None = None
    remove: str | None = None

    @model_validator(mode="after")
    def _exactly_one_operation(self) -> UpdateStaffOfficesRequest:
        given = [value for value in (self.offices, self.add, self.remove) if value is not None]
        if len(given) != 1:
            raise ValueError(
                "PATCH must contain { offices: [...] } or { add: 'officeName' } or { remove: 'officeName' }"
            )
        return self
