"""
Fixtures for SQLAlchemy repository tests.

Uses an in-memory SQLite database per test; never connects to the
configured database.
"""

import pytest_asyncio

from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    db_session,
    seed_default_rooms,
    session_maker,
)


@pytest_asyncio.fixture
async def seeded_session_maker(session_maker):
    """Session maker over a database holding the default rooms."""
    await seed_default_rooms(session_maker)
    return session_maker


@pytest_asyncio.fixture
async def seeded_session(seeded_session_maker):
    async with seeded_session_maker() as session:
        yield session
        await session.rollback()
