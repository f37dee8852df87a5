"""SQLAlchemy implementation of RoomRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from giftroom.domain.room import Room, RoomRepository
from giftroom.domain.shared import (
    USER_CODE_FIELD,
    BadRequestError,
    Failure,
    Result,
    Success,
    ValidationResult,
)
from giftroom.infrastructure.persistence.sqlalchemy.models import RoomModel, UserModel
from giftroom.infrastructure.persistence.sqlalchemy.repositories._mapping import (
    room_to_domain,
)

logger = logging.getLogger(__name__)


class RoomRepositorySQLAlchemy(RoomRepository):
    """SQLAlchemy implementation of the RoomRepository interface.

    Writes are flushed, never committed: the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user_code(
        self,
        user_code: str,
    ) -> Result[Optional[Room], ValidationResult]:
        stmt = (
            select(RoomModel)
            .join(UserModel, UserModel.room_id == RoomModel.id)
            .where(UserModel.auth_code == user_code)
            .options(selectinload(RoomModel.users))
        )
        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError:
            logger.exception("Room lookup by user code failed")
            return Failure(
                BadRequestError.for_field(USER_CODE_FIELD, "Room lookup failed.")
            )

        if model is None:
            return Success(None)

        return Success(room_to_domain(model))

    async def update(self, room: Room) -> Result[None, str]:
        try:
            model = await self._find_model_by_id(room.id)
            if model is None:
                return Failure(f"Room with id {room.id} not found.")

            member_ids = {u.id for u in room.users}
            removed = [u.id for u in model.users if u.id not in member_ids]

            # delete-orphan cascade removes the dropped rows on flush
            model.users = [u for u in model.users if u.id in member_ids]
            model.name = room.name
            model.updated_at = room.updated_at

            await self._session.flush()
        except SQLAlchemyError:
            logger.exception("Failed to update room %s", room.id)
            return Failure(f"Failed to update room {room.id}.")

        if removed:
            logger.info("Removed users %s from room %s", removed, room.id)
        else:
            logger.debug("Updated room: %s", room.id)
        return Success(None)

    async def _find_model_by_id(self, room_id: int) -> Optional[RoomModel]:
        stmt = (
            select(RoomModel)
            .where(RoomModel.id == room_id)
            .options(selectinload(RoomModel.users))
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
