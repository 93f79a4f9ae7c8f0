"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
entire domain layer. All domain exceptions should inherit from DomainException
so that callers can handle every failure category in one place.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public contract. Should not be changed.
    """

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    REQUIRED_FIELD = "REQUIRED_FIELD"
    INVALID_USERNAME = "INVALID_USERNAME"
    INVALID_NICKNAME = "INVALID_NICKNAME"
    INVALID_STATUS = "INVALID_STATUS"
    PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    PROFILE_LOCKED = "PROFILE_LOCKED"

    # Not Found Errors
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Conflict Errors
    CONFLICT = "CONFLICT"
    USERNAME_TAKEN = "USERNAME_TAKEN"

    # Credential Errors
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INCORRECT_OLD_PASSWORD = "INCORRECT_OLD_PASSWORD"
    INVALID_RESET_TOKEN = "INVALID_RESET_TOKEN"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input is malformed or missing."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class NotFoundError(DomainException):
    """Raised when a caller requires an entity that cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class CredentialError(DomainException):
    """Raised when a presented secret (password, token) is not accepted."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_CREDENTIALS,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


@dataclass(frozen=True)
class FieldError:
    """A failure scoped to one input field."""

    field: str
    error: DomainException

    @property
    def message(self) -> str:
        return self.error.message


@dataclass(frozen=True)
class ValidationResult:
    """Field-scoped failures collected from a multi-field check.

    Lets a form be redisplayed with every failing field marked instead of
    stopping at the first problem.
    """

    errors: tuple[FieldError, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]

    def errors_for(self, field_name: str) -> list[DomainException]:
        return [e.error for e in self.errors if e.field == field_name]

    def raise_for_errors(self) -> None:
        """Raise the first collected error, listing every failing field."""
        if self.is_valid:
            return
        first = self.errors[0].error
        first.details.setdefault(
            "fields",
            {e.field: e.message for e in self.errors},
        )
        raise first
