"""Clock helpers. Domain timestamps are always UTC and timezone-aware."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Treat a naive timestamp (as SQLite returns them) as UTC."""
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)
