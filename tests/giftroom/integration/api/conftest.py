"""
Fixtures for API tests.

The app runs in-process through httpx's ASGI transport. The database
session dependency is overridden with sessions over an in-memory SQLite
database seeded with the default rooms; the app lifespan is not run.
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from giftroom.presentation.api.app import create_app
from giftroom.presentation.api.dependencies import get_db_session
from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    seed_default_rooms,
    session_maker,
)

BASE_URL = "http://testserver"


@pytest_asyncio.fixture
async def api_app(session_maker):
    await seed_default_rooms(session_maker)

    async def _override_get_db_session():
        async with session_maker() as session:
            yield session

    app = create_app()
    app.dependency_overrides[get_db_session] = _override_get_db_session
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(api_app):
    transport = ASGITransport(app=api_app)
    async with AsyncClient(transport=transport, base_url=BASE_URL) as ac:
        yield ac
