"""Room domain manages rooms and their participants.

This domain handles:
- Room aggregate (ordered membership, member removal)
- User entity (participant identity, admin flag, contact details)
- Repository contracts for loading and persisting rooms
"""

from giftroom.domain.room.aggregates import Room
from giftroom.domain.room.entities import User
from giftroom.domain.room.repositories import RoomRepository, UserReadRepository
from giftroom.domain.room.value_objects import RoomReference

__all__ = [
    "Room",
    "RoomReference",
    "RoomRepository",
    "User",
    "UserReadRepository",
]
