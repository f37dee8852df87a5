from giftroom.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from giftroom.infrastructure.persistence.sqlalchemy.repositories.room_repository import (  # NOQA: E501
    RoomRepositorySQLAlchemy,
)
from giftroom.infrastructure.persistence.sqlalchemy.repositories.user_read_repository import (  # NOQA: E501
    UserReadRepositorySQLAlchemy,
)

__all__ = [
    "RoomRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserReadRepositorySQLAlchemy",
]
