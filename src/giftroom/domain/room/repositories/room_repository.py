"""Room repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from giftroom.domain.room.aggregates.room import Room
from giftroom.domain.shared.result import Result
from giftroom.domain.shared.validation import ValidationResult


class RoomRepository(ABC):
    """Repository interface for Room aggregates."""

    @abstractmethod
    async def get_by_user_code(
        self,
        user_code: str,
    ) -> Result[Optional[Room], ValidationResult]:
        """Load the room containing the user with this access code.

        Success with ``None`` means the lookup ran but matched no room.
        """

    @abstractmethod
    async def update(self, room: Room) -> Result[None, str]:
        """Persist the room's current state; failures carry a message."""
