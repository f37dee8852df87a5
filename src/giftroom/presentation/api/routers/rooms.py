"""Room read endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from giftroom.application.queries import GetRoomByUserCodeQuery
from giftroom.presentation.api.dependencies import RepoFactory
from giftroom.presentation.api.exception_handlers import ValidationFailedError
from giftroom.presentation.api.schemas import ErrorResponse, RoomResponse

router = APIRouter(prefix="/rooms")


@router.get(
    "",
    summary="Get the room of a participant",
    responses={
        200: {"description": "Room with its participants"},
        400: {"model": ErrorResponse, "description": "Missing user code"},
        404: {"model": ErrorResponse, "description": "Room not found"},
    },
)
async def get_room(
    user_code: Annotated[str, Query(alias="userCode")],
    factory: RepoFactory,
) -> RoomResponse:
    """Return the room that ``userCode`` belongs to."""
    result = await GetRoomByUserCodeQuery.from_factory(factory).execute(user_code)
    if result.is_failure:
        raise ValidationFailedError(result.error)
    return RoomResponse.from_domain(result.value, user_code)
