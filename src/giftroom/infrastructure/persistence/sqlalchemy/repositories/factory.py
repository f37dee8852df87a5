"""SQLAlchemy repository factory bound to one session."""

from sqlalchemy.ext.asyncio import AsyncSession

from giftroom.infrastructure.persistence.sqlalchemy.repositories.room_repository import (  # NOQA: E501
    RoomRepositorySQLAlchemy,
)
from giftroom.infrastructure.persistence.sqlalchemy.repositories.user_read_repository import (  # NOQA: E501
    UserReadRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._room_repo: RoomRepositorySQLAlchemy | None = None
        self._user_repo: UserReadRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def room_repository(self) -> RoomRepositorySQLAlchemy:
        if self._room_repo is None:
            self._room_repo = RoomRepositorySQLAlchemy(self._session)
        return self._room_repo

    def user_read_repository(self) -> UserReadRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserReadRepositorySQLAlchemy(self._session)
        return self._user_repo
