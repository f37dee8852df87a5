"""Tests for demo room seeding."""

import pytest

from giftroom.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from giftroom_demo.data import DEMO_PARTICIPANTS, DEMO_ROOM_NAME
from giftroom_demo.seed import create_demo_room, generate_user_code
from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    db_session,
    session_maker,
)


def test_generated_codes_are_unique():
    codes = {generate_user_code() for _ in range(50)}

    assert len(codes) == 50


@pytest.mark.asyncio
async def test_demo_room_has_one_admin_and_all_participants(db_session):
    stats = await create_demo_room(db_session)

    room_repo = SQLAlchemyRepositoryFactory(db_session).room_repository()
    room = (await room_repo.get_by_user_code(stats.admin_code)).value

    assert room.id == stats.room_id
    assert room.name == DEMO_ROOM_NAME
    assert len(room.users) == len(DEMO_PARTICIPANTS)
    assert [u.is_admin for u in room.users].count(True) == 1
    assert room.admin.auth_code == stats.admin_code
    assert set(stats.participant_codes.values()) == {u.auth_code for u in room.users}
