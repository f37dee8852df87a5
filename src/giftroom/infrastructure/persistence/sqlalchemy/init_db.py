"""Schema management for the rooms and users tables."""

import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Registers RoomModel and UserModel on Base.metadata
import giftroom.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from giftroom.infrastructure.persistence.sqlalchemy.models.base import Base
from giftroom_config.settings import get_settings

logger = logging.getLogger(__name__)


def create_engine_from_settings() -> AsyncEngine:
    """Standalone engine for scripts and tests that bypass the API's cache."""
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create missing tables; existing tables and rows are left untouched."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop every GiftRoom table, deleting all rooms and participants."""
    logger.warning("Dropping tables: %s", ", ".join(sorted(Base.metadata.tables)))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


def display_database_url(database_url: str) -> str:
    """URL safe for printing: the password is masked."""
    return make_url(database_url).render_as_string(hide_password=True)
