"""Value objects for the room domain."""

from giftroom.domain.room.value_objects.room_reference import RoomReference

__all__ = ["RoomReference"]
