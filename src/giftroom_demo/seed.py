"""Demo data seeding for GiftRoom.

Creates one room with an admin and a few participants and prints every
participant's personal user code.

Usage:
    giftroom seed-demo
    # or
    python -m giftroom_demo.seed
"""

import asyncio
import logging
import secrets
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from giftroom.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    display_database_url,
)
from giftroom.infrastructure.persistence.sqlalchemy.models import RoomModel, UserModel
from giftroom.presentation.api.dependencies import get_engine, get_session_maker
from giftroom_config.logging_setup import configure_logging
from giftroom_config.settings import get_settings
from giftroom_demo.data import DEMO_PARTICIPANTS, DEMO_ROOM_NAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedStats:
    """Summary of what the seeder created."""

    room_id: int
    admin_code: str
    participant_codes: dict[int, str]


def generate_user_code() -> str:
    """Random personal access code for a participant link."""
    return secrets.token_urlsafe(16)


async def create_demo_room(session: AsyncSession) -> SeedStats:
    room = RoomModel(name=DEMO_ROOM_NAME)
    room.users = [
        UserModel(
            auth_code=generate_user_code(),
            is_admin=p.is_admin,
            first_name=p.first_name,
            last_name=p.last_name,
            phone=p.phone,
            email=p.email,
            delivery_info=p.delivery_info,
            wish_list=p.wish_list,
        )
        for p in DEMO_PARTICIPANTS
    ]
    session.add(room)
    await session.flush()

    admin = next(u for u in room.users if u.is_admin)
    return SeedStats(
        room_id=room.id,
        admin_code=admin.auth_code,
        participant_codes={u.id: u.auth_code for u in room.users},
    )


async def seed_demo_data() -> SeedStats:
    engine = get_engine()
    try:
        await create_tables(engine)
        async with get_session_maker()() as session:
            stats = await create_demo_room(session)
            await session.commit()
    finally:
        await engine.dispose()

    logger.info("=" * 50)
    logger.info("Demo room created: %s (id=%s)", DEMO_ROOM_NAME, stats.room_id)
    logger.info("  Admin code: %s", stats.admin_code)
    for user_id, code in stats.participant_codes.items():
        logger.info("  User %s code: %s", user_id, code)
    logger.info("=" * 50)
    return stats


def main() -> None:
    """CLI entry point."""
    configure_logging()
    logger.info("GiftRoom Demo Data Seeder")
    logger.info(
        "Database: %s",
        display_database_url(get_settings().database_url),
    )
    asyncio.run(seed_demo_data())


if __name__ == "__main__":
    main()
