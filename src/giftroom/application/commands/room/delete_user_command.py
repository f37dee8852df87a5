"""Command to remove a participant from a room."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from giftroom.domain.room import Room, RoomRepository, UserReadRepository
from giftroom.domain.shared import (
    IDENTITY_FIELD,
    USER_CODE_FIELD,
    USER_ID_FIELD,
    BadRequestError,
    Failure,
    NotAuthorizedError,
    NotFoundError,
    Result,
    ValidationResult,
)

if TYPE_CHECKING:
    from giftroom.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteUserRequest:
    """Remove ``user_id`` from the room of the admin holding ``user_code``."""

    user_code: str
    user_id: Optional[int]


class DeleteUserCommand:
    """
    Remove a participant from a room on behalf of the room's admin.

    The acting user is resolved from the access code. Checks run in a fixed
    order and the first failing one is returned; nothing is written unless
    every check passed. On success the room is re-read from the repository,
    so callers see the persisted state rather than the in-memory copy.
    """

    def __init__(
        self,
        room_repository: RoomRepository,
        user_repository: UserReadRepository,
    ):
        self._room_repo = room_repository
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteUserCommand:
        """Create command from repository factory."""
        return cls(
            room_repository=factory.room_repository(),
            user_repository=factory.user_read_repository(),
        )

    async def execute(  # NOQA: PLR0911
        self,
        request: DeleteUserRequest,
    ) -> Result[Room, ValidationResult]:
        room_result = await self._room_repo.get_by_user_code(request.user_code)
        if room_result.is_failure:
            return self._reject(request, room_result)

        room = room_result.value
        if room is None:
            return self._reject(
                request,
                Failure(
                    NotFoundError.for_field(
                        USER_CODE_FIELD,
                        "Room with such user code not found.",
                    )
                ),
            )

        actor = room.find_user_by_auth_code(request.user_code)
        if actor is None:
            return self._reject(
                request,
                Failure(
                    NotFoundError.for_field(
                        USER_CODE_FIELD,
                        "User with such code not found.",
                    )
                ),
            )

        if not actor.is_admin:
            return self._reject(
                request,
                Failure(
                    NotAuthorizedError.for_field(
                        USER_CODE_FIELD,
                        "User with userCode is not administrator.",
                    )
                ),
            )

        if request.user_id is None:
            return self._reject(
                request,
                Failure(
                    BadRequestError.for_field(
                        USER_ID_FIELD,
                        "UserId must be provided.",
                    )
                ),
            )

        if actor.id == request.user_id:
            return self._reject(
                request,
                Failure(
                    BadRequestError.for_field(
                        USER_ID_FIELD,
                        "User with userCode and id is the same user.",
                    )
                ),
            )

        target_result = await self._user_repo.get_by_id(
            request.user_id,
            include_room=True,
        )
        if target_result.is_failure:
            return self._reject(request, target_result)

        # Compared against the actor's room, not the loaded aggregate's id
        if target_result.value.room_id != actor.room_id:
            return self._reject(
                request,
                Failure(
                    NotAuthorizedError.for_field(
                        IDENTITY_FIELD,
                        "User with userCode and user with Id belong to "
                        "different rooms.",
                    )
                ),
            )

        delete_result = room.delete_user(request.user_id)
        if delete_result.is_failure:
            return self._reject(request, delete_result)

        update_result = await self._room_repo.update(room)
        if update_result.is_failure:
            return self._reject(
                request,
                Failure(BadRequestError.for_field("", update_result.error)),
            )

        logger.info(
            "Admin %s removed user %s from room %s",
            actor.id,
            request.user_id,
            room.id,
        )
        return await self._room_repo.get_by_user_code(request.user_code)

    @staticmethod
    def _reject(
        request: DeleteUserRequest,
        failure: Failure[ValidationResult],
    ) -> Failure[ValidationResult]:
        logger.info(
            "Rejected removal of user %s: %s (%s)",
            request.user_id,
            failure.error.kind.value,
            failure.error.message,
        )
        return failure
