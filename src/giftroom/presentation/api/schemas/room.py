"""Room and participant response schemas.

Field names are serialized in camelCase to match the web client.
``userCode`` is only filled in for the requester, or for every member when
the requester is the room admin.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from giftroom.domain.room import Room, User


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ParticipantResponse(_CamelModel):
    """A room participant as shown in the participant list."""

    id: int
    room_id: int
    user_code: Optional[str] = None
    is_admin: bool
    first_name: str
    last_name: str
    phone: str
    email: Optional[str] = None
    delivery_info: str
    wish_list: Optional[str] = None

    @classmethod
    def from_domain(
        cls,
        user: User,
        include_code: bool = False,
    ) -> "ParticipantResponse":
        return cls(
            id=user.id,
            room_id=user.room_id,
            user_code=user.auth_code if include_code else None,
            is_admin=user.is_admin,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            email=user.email,
            delivery_info=user.delivery_info,
            wish_list=user.wish_list,
        )


class RoomResponse(_CamelModel):
    """A room with its participants in insertion order."""

    id: int
    name: str
    users: list[ParticipantResponse]

    @classmethod
    def from_domain(cls, room: Room, requester_code: str) -> "RoomResponse":
        """Room as seen by the participant holding ``requester_code``."""
        requester = room.find_user_by_auth_code(requester_code)
        sees_all_codes = requester is not None and requester.is_admin
        return cls(
            id=room.id,
            name=room.name,
            users=[
                ParticipantResponse.from_domain(
                    u,
                    include_code=sees_all_codes or u.auth_code == requester_code,
                )
                for u in room.users
            ],
        )
