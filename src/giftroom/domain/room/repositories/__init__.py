from giftroom.domain.room.repositories.room_repository import RoomRepository
from giftroom.domain.room.repositories.user_read_repository import (
    UserReadRepository,
)

__all__ = ["RoomRepository", "UserReadRepository"]
