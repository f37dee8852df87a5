"""SQLAlchemy implementation of UserReadRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from giftroom.domain.room import User, UserReadRepository
from giftroom.domain.shared import (
    IDENTITY_FIELD,
    BadRequestError,
    Failure,
    NotFoundError,
    Result,
    Success,
    ValidationResult,
)
from giftroom.infrastructure.persistence.sqlalchemy.models import UserModel
from giftroom.infrastructure.persistence.sqlalchemy.repositories._mapping import (
    user_to_domain,
)

logger = logging.getLogger(__name__)


class UserReadRepositorySQLAlchemy(UserReadRepository):
    """SQLAlchemy implementation of the UserReadRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(
        self,
        user_id: int,
        include_room: bool = False,
    ) -> Result[User, ValidationResult]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        if include_room:
            stmt = stmt.options(joinedload(UserModel.room))

        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError:
            logger.exception("User lookup failed: %s", user_id)
            return Failure(
                BadRequestError.for_field(IDENTITY_FIELD, "User lookup failed.")
            )

        if model is None:
            return Failure(
                NotFoundError.for_field(IDENTITY_FIELD, "User with such id not found.")
            )

        return Success(user_to_domain(model, include_room=include_room))
