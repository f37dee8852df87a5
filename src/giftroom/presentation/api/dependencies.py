"""Request-scoped dependencies for the GiftRoom API.

One engine and one session maker exist per process; each request gets its
own ``AsyncSession`` and a repository factory bound to it. The CLI and the
demo seeder reuse the same cached engine.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from giftroom.infrastructure.persistence.sqlalchemy.init_db import display_database_url
from giftroom.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from giftroom_config.settings import get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """Configured database URL; creates the parent directory of a SQLite file."""
    url = get_settings().database_url
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database:
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return url


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    url = get_database_url()
    logger.debug("Creating engine for %s", display_database_url(url))
    return create_async_engine(
        url,
        echo=get_settings().database_echo,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Session for one request.

    Routes decide whether to commit; anything left uncommitted is rolled
    back when the session closes.
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(session)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
