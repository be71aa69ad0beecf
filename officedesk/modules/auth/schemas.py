"""Pydantic request/response schemas for the auth module."""

from pydantic import BaseModel, ConfigDict, Field

from officedesk.models.enums import PrincipalType, StaffRole


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    username: str
    type: PrincipalType
    role: StaffRole | None = None


class PrincipalResponse(BaseModel):
    username: str
    type: PrincipalType
    role: StaffRole | None = None


class RegisterMunicipalityRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=100)
    surname: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
    # Enum member name, e.g. "TOSM"
    role: str
    office_names: list[str] = Field(default_factory=list, alias="officeNames")
