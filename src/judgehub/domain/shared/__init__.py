"""Shared domain components.

This module exports shared exceptions and time helpers used across
domain boundaries.
"""

from judgehub.domain.shared.exceptions import (
    ConflictError,
    CredentialError,
    DomainException,
    ErrorCode,
    FieldError,
    NotFoundError,
    ValidationError,
    ValidationResult,
)
from judgehub.domain.shared.time import ensure_tz_aware, unix_now, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ConflictError",
    "CredentialError",
    "NotFoundError",
    "ValidationError",
    # Field-scoped validation
    "FieldError",
    "ValidationResult",
    # Utilities
    "ensure_tz_aware",
    "unix_now",
    "utc_now",
]
