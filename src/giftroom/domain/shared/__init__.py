"""Shared domain components.

This module exports the result type, the validation failure taxonomy and
time helpers used across domain boundaries.
"""

from giftroom.domain.shared.result import Failure, Result, Success
from giftroom.domain.shared.time import ensure_tz_aware, utc_now
from giftroom.domain.shared.validation import (
    IDENTITY_FIELD,
    USER_CODE_FIELD,
    USER_ID_FIELD,
    BadRequestError,
    FieldError,
    NotAuthorizedError,
    NotFoundError,
    ValidationErrorKind,
    ValidationResult,
)

__all__ = [
    # Result
    "Failure",
    "Result",
    "Success",
    # Validation failures
    "BadRequestError",
    "FieldError",
    "NotAuthorizedError",
    "NotFoundError",
    "ValidationErrorKind",
    "ValidationResult",
    # Request field names
    "IDENTITY_FIELD",
    "USER_CODE_FIELD",
    "USER_ID_FIELD",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
