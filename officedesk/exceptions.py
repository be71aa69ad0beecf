"""Domain exception hierarchy for structured error responses."""

from __future__ import annotations


class AppException(Exception):
    """Base exception for all domain errors.

    Subclasses set ``code`` and ``status_code`` at the class level; callers
    provide ``message`` and an optional ``details`` list. The boundary layer in
    ``officedesk.app`` is the only place these are turned into responses.
    """

    code: str = "AppError"
    status_code: int = 500

    def __init__(self, message: str, details: list[dict] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []


class BadRequestException(AppException):
    code = "BadRequestError"
    status_code = 400


class UnauthorizedException(AppException):
    code = "UnauthorizedError"
    status_code = 401


class ForbiddenException(AppException):
    code = "ForbiddenError"
    status_code = 403


class NotFoundException(AppException):
    code = "NotFoundError"
    status_code = 404


class ConflictException(AppException):
    code = "ConflictError"
    status_code = 409


class ValidationException(AppException):
    code = "ValidationError"
    status_code = 422


class RateLimitException(AppException):
    code = "RateLimitError"
    status_code = 429


class InternalServerError(AppException):
    code = "InternalServerError"
    status_code = 500
