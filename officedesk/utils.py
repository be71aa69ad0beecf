"""Small lookup and validation helpers shared by routers and services."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from officedesk.exceptions import BadRequestException, ConflictException, NotFoundException
from officedesk.models.enums import OfficeCategory

T = TypeVar("T")


def validate_office_category(value: str) -> OfficeCategory:
    """Parse an office category given by enum name (any case) or by value.

    Raises BadRequestException for anything else.
    """
    candidate = value.strip()
    member = OfficeCategory.__members__.get(candidate.upper())
    if member is not None:
        return member
    for category in OfficeCategory:
        if category.value.lower() == candidate.lower():
            return category
    raise BadRequestException(
        f"Invalid office category: {value}",
        details=[{"field": "category", "allowed": list(OfficeCategory.__members__)}],
    )


def find_or_throw_not_found(items: Iterable[T], predicate: Callable[[T], bool], error_message: str) -> T:
    for item in items:
        if predicate(item):
            return item
    raise NotFoundException(error_message)


def throw_conflict_if_found(items: Iterable[T], predicate: Callable[[T], bool], error_message: str) -> None:
    if any(predicate(item) for item in items):
        raise ConflictException(error_message)
