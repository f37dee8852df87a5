"""Repository factory protocol for application layer."""

from typing import Any, Protocol

from giftroom.domain.room.repositories import RoomRepository, UserReadRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def room_repository(self) -> RoomRepository:
        """Get room repository."""
        ...

    def user_read_repository(self) -> UserReadRepository:
        """Get read-only user repository."""
        ...
