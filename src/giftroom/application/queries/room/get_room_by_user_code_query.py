"""Query to load the room a participant belongs to."""

from __future__ import annotations

from typing import TYPE_CHECKING

from giftroom.domain.room import Room, RoomRepository
from giftroom.domain.shared import (
    USER_CODE_FIELD,
    BadRequestError,
    Failure,
    NotFoundError,
    Result,
    Success,
    ValidationResult,
)

if TYPE_CHECKING:
    from giftroom.application.factories import RepositoryFactory


class GetRoomByUserCodeQuery:
    """Resolve a participant's access code to its room and members."""

    def __init__(self, room_repository: RoomRepository):
        self._room_repo = room_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetRoomByUserCodeQuery:
        return cls(room_repository=factory.room_repository())

    async def execute(self, user_code: str) -> Result[Room, ValidationResult]:
        if not user_code or not user_code.strip():
            return Failure(
                BadRequestError.for_field(USER_CODE_FIELD, "UserCode must be provided.")
            )

        result = await self._room_repo.get_by_user_code(user_code)
        if result.is_failure:
            return result

        if result.value is None:
            return Failure(
                NotFoundError.for_field(
                    USER_CODE_FIELD,
                    "Room with such user code not found.",
                )
            )

        return Success(result.value)
