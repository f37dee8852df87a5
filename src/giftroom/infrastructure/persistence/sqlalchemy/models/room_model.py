"""SQLAlchemy model for Room aggregates."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from giftroom.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from giftroom.infrastructure.persistence.sqlalchemy.models.user_model import (
        UserModel,
    )


class RoomModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting Room aggregates.

    Members are ordered by user id, which is their insertion order.
    Removing a user from ``users`` deletes its row on flush.

    Table: rooms
    """

    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    users: Mapped[list["UserModel"]] = relationship(
        back_populates="room",
        order_by="UserModel.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<RoomModel(id={self.id}, name={self.name})>"
