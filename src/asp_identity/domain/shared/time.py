"""Time utilities for the identity domain."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC.

    SQLite drops the offset of ``DateTime(timezone=True)`` columns, so values
    read back from it are naive.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
