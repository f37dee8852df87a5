"""SQLAlchemy models.

Importing this package registers every table with ``Base.metadata``.
"""

from giftroom.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from giftroom.infrastructure.persistence.sqlalchemy.models.room_model import (
    RoomModel,
)
from giftroom.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = ["Base", "RoomModel", "TimestampMixin", "UserModel"]
