from giftroom.application.queries.room.get_room_by_user_code_query import (
    GetRoomByUserCodeQuery,
)

__all__ = ["GetRoomByUserCodeQuery"]
