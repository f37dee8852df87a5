"""Validation failure taxonomy.

Failures are plain values carried by ``Failure`` results, not exceptions.
Each one has a stable kind (used by the presentation layer to pick a status
code) and a list of field errors naming the offending request field.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterable


class ValidationErrorKind(str, Enum):
    """Stable failure kinds for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    NOT_FOUND = "NOT_FOUND"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"
    BAD_REQUEST = "BAD_REQUEST"


# Request field names that failures point at, as the web client spells them
USER_CODE_FIELD = "userCode"
USER_ID_FIELD = "userId"
IDENTITY_FIELD = "id"


@dataclass(frozen=True)
class FieldError:
    """A single failed check on a named request field."""

    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Base class for classified validation failures."""

    kind: ClassVar[ValidationErrorKind]

    errors: tuple[FieldError, ...] = field(default_factory=tuple)

    @classmethod
    def for_field(cls, field_name: str, message: str) -> "ValidationResult":
        """Build a failure with a single field error."""
        return cls(errors=(FieldError(field_name, message),))

    @classmethod
    def from_errors(cls, errors: Iterable[FieldError]) -> "ValidationResult":
        return cls(errors=tuple(errors))

    @property
    def message(self) -> str:
        """All field messages joined into one human-readable string."""
        return "; ".join(e.message for e in self.errors)

    def has_error_for(self, field_name: str) -> bool:
        return any(e.field == field_name for e in self.errors)


@dataclass(frozen=True)
class NotFoundError(ValidationResult):
    """A referenced room or user does not exist."""

    kind: ClassVar[ValidationErrorKind] = ValidationErrorKind.NOT_FOUND


@dataclass(frozen=True)
class NotAuthorizedError(ValidationResult):
    """The acting user may not perform the operation."""

    kind: ClassVar[ValidationErrorKind] = ValidationErrorKind.NOT_AUTHORIZED


@dataclass(frozen=True)
class BadRequestError(ValidationResult):
    """The request itself is invalid or was rejected downstream."""

    kind: ClassVar[ValidationErrorKind] = ValidationErrorKind.BAD_REQUEST
