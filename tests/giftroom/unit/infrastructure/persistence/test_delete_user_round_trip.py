"""DeleteUserCommand against the SQLAlchemy repositories."""

import pytest

from giftroom.application.commands import DeleteUserCommand, DeleteUserRequest
from giftroom.domain.shared import NotAuthorizedError, NotFoundError
from giftroom.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from tests.shared.fixtures.factories import TestRoomFactory as F


async def _delete(session_maker, user_code: str, user_id: int):
    async with session_maker() as session:
        factory = SQLAlchemyRepositoryFactory(session)
        result = await DeleteUserCommand.from_factory(factory).execute(
            DeleteUserRequest(user_code=user_code, user_id=user_id)
        )
        if result.is_success:
            await session.commit()
        else:
            await session.rollback()
        return result


class TestDeleteUserRoundTrip:
    @pytest.mark.asyncio
    async def test_success_returns_persisted_room(self, seeded_session_maker):
        result = await _delete(seeded_session_maker, F.ADMIN_CODE, F.TARGET_ID)

        assert result.is_success
        assert [u.id for u in result.value.users] == [F.ADMIN_ID, F.MEMBER_ID]

        async with seeded_session_maker() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            reread = await factory.room_repository().get_by_user_code(F.ADMIN_CODE)
        assert [u.id for u in reread.value.users] == [F.ADMIN_ID, F.MEMBER_ID]

    @pytest.mark.asyncio
    async def test_repeat_is_not_found(self, seeded_session_maker):
        await _delete(seeded_session_maker, F.ADMIN_CODE, F.TARGET_ID)

        result = await _delete(seeded_session_maker, F.ADMIN_CODE, F.TARGET_ID)

        assert result.is_failure
        assert isinstance(result.error, NotFoundError)
        assert result.error.has_error_for("id")

    @pytest.mark.asyncio
    async def test_cross_room_target_is_not_authorized(self, seeded_session_maker):
        result = await _delete(seeded_session_maker, F.ADMIN_CODE, F.STRANGER_ID)

        assert isinstance(result.error, NotAuthorizedError)
        assert result.error.has_error_for("id")

    @pytest.mark.asyncio
    async def test_removed_participant_code_no_longer_resolves(
        self, seeded_session_maker
    ):
        await _delete(seeded_session_maker, F.ADMIN_CODE, F.TARGET_ID)

        async with seeded_session_maker() as session:
            repo = SQLAlchemyRepositoryFactory(session).room_repository()
            result = await repo.get_by_user_code(F.TARGET_CODE)

        assert result.value is None
