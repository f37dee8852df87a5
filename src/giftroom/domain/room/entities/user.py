"""User entity: a participant of exactly one room."""

from datetime import datetime
from typing import Optional

from giftroom.domain.room.value_objects import RoomReference
from giftroom.domain.shared.time import utc_now


class User:
    """
    Room participant.

    Identity (id, room_id, auth_code) is fixed at creation. Contact and
    delivery attributes are carried for presentation only.
    """

    def __init__(  # NOQA: PLR0913
        self,
        id: int,
        room_id: int,
        auth_code: str,
        first_name: str,
        last_name: str,
        phone: str = "",
        email: Optional[str] = None,
        delivery_info: str = "",
        wish_list: Optional[str] = None,
        is_admin: bool = False,
        room: Optional[RoomReference] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        if room is not None and room.id != room_id:
            msg = f"Room reference {room.id} does not match room_id {room_id}"
            raise ValueError(msg)

        self._id = id
        self._room_id = room_id
        self._auth_code = auth_code
        self._first_name = first_name
        self._last_name = last_name
        self._phone = phone
        self._email = email
        self._delivery_info = delivery_info
        self._wish_list = wish_list
        self._is_admin = is_admin
        self._room = room
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> int:
        return self._id

    @property
    def room_id(self) -> int:
        return self._room_id

    @property
    def auth_code(self) -> str:
        return self._auth_code

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}".strip()

    @property
    def phone(self) -> str:
        return self._phone

    @property
    def email(self) -> Optional[str]:
        return self._email

    @property
    def delivery_info(self) -> str:
        return self._delivery_info

    @property
    def wish_list(self) -> Optional[str]:
        return self._wish_list

    @property
    def is_admin(self) -> bool:
        return self._is_admin

    @property
    def room(self) -> Optional[RoomReference]:
        """Owning room, only present when loaded with ``include_room``."""
        return self._room

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"User(id={self._id}, room_id={self._room_id}, "
            f"is_admin={self._is_admin})"
        )
