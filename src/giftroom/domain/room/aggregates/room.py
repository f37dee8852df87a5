"""Room aggregate root."""

from datetime import datetime
from typing import Iterable, Optional

from giftroom.domain.room.entities import User
from giftroom.domain.room.value_objects import RoomReference
from giftroom.domain.shared.result import Failure, Result, Success
from giftroom.domain.shared.time import utc_now
from giftroom.domain.shared.validation import (
    USER_ID_FIELD,
    NotFoundError,
    ValidationResult,
)


class Room:
    """
    Group of participants sharing one gift exchange.

    The room owns the membership of its users: the collection is kept in
    insertion order and only methods of this class change it. Callers get a
    read-only tuple through ``users``.
    """

    def __init__(
        self,
        id: int,
        name: str,
        users: Optional[Iterable[User]] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        members = list(users or [])
        for user in members:
            if user.room_id != id:
                msg = f"User {user.id} belongs to room {user.room_id}, not {id}"
                raise ValueError(msg)

        self._id = id
        self._name = name
        self._users: list[User] = members
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def users(self) -> tuple[User, ...]:
        return tuple(self._users)

    @property
    def admin(self) -> Optional[User]:
        return next((u for u in self._users if u.is_admin), None)

    @property
    def reference(self) -> RoomReference:
        return RoomReference(id=self._id, name=self._name)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def find_user(self, user_id: Optional[int]) -> Optional[User]:
        return next((u for u in self._users if u.id == user_id), None)

    def find_user_by_auth_code(self, auth_code: str) -> Optional[User]:
        return next((u for u in self._users if u.auth_code == auth_code), None)

    def delete_user(self, user_id: Optional[int]) -> Result["Room", ValidationResult]:
        """Remove the member with ``user_id`` from the room.

        The order of the remaining members is preserved.

        Returns
        -------
        ``Success(self)`` after removal, or a ``NotFoundError`` failure when
        no member has that id.
        """
        if self.find_user(user_id) is None:
            return Failure(
                NotFoundError.for_field(
                    USER_ID_FIELD,
                    "User with such id not found in room.",
                )
            )

        self._users = [u for u in self._users if u.id != user_id]
        self._updated_at = utc_now()
        return Success(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Room(id={self._id}, name={self._name!r}, users={len(self._users)})"
