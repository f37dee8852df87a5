"""Participant management endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from giftroom.application.commands import DeleteUserCommand, DeleteUserRequest
from giftroom.domain.shared import USER_CODE_FIELD, NotFoundError
from giftroom.presentation.api.dependencies import RepoFactory
from giftroom.presentation.api.exception_handlers import ValidationFailedError
from giftroom.presentation.api.schemas import ErrorResponse, RoomResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users")


@router.delete(
    "/{user_id}",
    summary="Remove a participant from a room",
    responses={
        200: {"description": "Participant removed, updated room returned"},
        400: {"model": ErrorResponse, "description": "Invalid request"},
        403: {"model": ErrorResponse, "description": "Admin of the room required"},
        404: {"model": ErrorResponse, "description": "Room or user not found"},
    },
)
async def delete_user(
    user_id: int,
    user_code: Annotated[str, Query(alias="userCode", min_length=1)],
    factory: RepoFactory,
) -> RoomResponse:
    """Remove a participant; ``userCode`` must belong to the room's admin."""
    command = DeleteUserCommand.from_factory(factory)
    result = await command.execute(
        DeleteUserRequest(user_code=user_code, user_id=user_id)
    )

    if result.is_failure:
        await factory.session.rollback()
        raise ValidationFailedError(result.error)

    await factory.session.commit()

    room = result.value
    if room is None:
        raise ValidationFailedError(
            NotFoundError.for_field(
                USER_CODE_FIELD,
                "Room with such user code not found.",
            )
        )

    logger.info("Room %s now has %d participants", room.id, len(room.users))
    return RoomResponse.from_domain(room, user_code)
