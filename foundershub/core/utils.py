"""General utility functions."""
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC timezone."""
    if dt.tzinfo is None:
        # SQLite hands back naive datetimes; they were stored as UTC
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def page_offset(page: int, page_size: int) -> int:
    """Translate a 1-based page number into a row offset."""
    if page < 1:
        raise ValueError("Page must be a positive integer")
    return (page - 1) * page_size
