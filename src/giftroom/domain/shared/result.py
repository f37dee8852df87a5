"""Two-variant outcome type used across the domain and application layers.

Operations that have expected failure modes return ``Result`` values instead
of raising, so that callers inspect each step explicitly and the first
failure short-circuits the rest.

Examples
--------
>>> result = Success(42)
>>> result.is_success
True
>>> Failure("boom").error
'boom'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying an error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True


Result = Union[Success[T], Failure[E]]
