"""Declarative base and shared columns for GiftRoom tables."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from giftroom.domain.shared.time import utc_now


class Base(DeclarativeBase):
    pass


def _utc_timestamp(*, refresh_on_update: bool = False) -> Mapped[datetime]:
    return mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now if refresh_on_update else None,
        nullable=False,
    )


class TimestampMixin:
    """``created_at`` set on insert, ``updated_at`` refreshed on every update."""

    created_at: Mapped[datetime] = _utc_timestamp()
    updated_at: Mapped[datetime] = _utc_timestamp(refresh_on_update=True)
