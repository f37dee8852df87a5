"""Read-only user repository interface."""

from abc import ABC, abstractmethod

from giftroom.domain.room.entities import User
from giftroom.domain.shared.result import Result
from giftroom.domain.shared.validation import ValidationResult


class UserReadRepository(ABC):
    """Read access to room participants outside of their aggregate."""

    @abstractmethod
    async def get_by_id(
        self,
        user_id: int,
        include_room: bool = False,
    ) -> Result[User, ValidationResult]:
        """Load a user by id, optionally with a reference to its room."""
