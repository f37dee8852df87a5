from giftroom.domain.room.aggregates.room import Room

__all__ = ["Room"]
