"""Transport shape for log/message records exchanged with clients."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from officedesk.models.message import Message


class MessageDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    timestamp: str
    message: str
    staff_username: str | None = Field(None, alias="staffUsername")
    is_private: bool = Field(False, alias="isPrivate")

    def to_wire(self) -> dict:
        """Serialize with camelCase keys, leaving out unset attribution."""
        return self.model_dump(by_alias=True, exclude_none=True)


def to_message_dto(message: Message) -> MessageDTO:
    return MessageDTO(
        timestamp=message.timestamp.isoformat(),
        message=message.message,
        staff_username=message.staff.username if message.staff is not None else None,
        is_private=message.is_private,
    )
