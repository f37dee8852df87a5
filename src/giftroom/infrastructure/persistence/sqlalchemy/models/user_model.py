"""SQLAlchemy model for room participants."""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from giftroom.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from giftroom.infrastructure.persistence.sqlalchemy.models.room_model import (
        RoomModel,
    )


class UserModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting room participants.

    auth_code is the participant's personal access token and is unique
    across all rooms.

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    room_id: Mapped[int] = mapped_column(
        ForeignKey("rooms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    auth_code: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        index=True,
    )
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Contact and delivery details
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(32), default="", nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    delivery_info: Mapped[str] = mapped_column(Text, default="", nullable=False)
    wish_list: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    room: Mapped["RoomModel"] = relationship(back_populates="users")

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, room_id={self.room_id})>"
