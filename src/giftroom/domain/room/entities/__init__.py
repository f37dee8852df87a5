from giftroom.domain.room.entities.user import User

__all__ = ["User"]
