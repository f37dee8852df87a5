"""Query layer - read operations that never mutate state."""

from giftroom.application.queries.room import GetRoomByUserCodeQuery

__all__ = ["GetRoomByUserCodeQuery"]
