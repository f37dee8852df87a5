"""Lightweight reference from a user to its owning room."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RoomReference:
    """Identity and name of a room, without its members.

    Users point at their room through this value object (or just the id),
    never through the aggregate itself.
    """

    id: int
    name: str
