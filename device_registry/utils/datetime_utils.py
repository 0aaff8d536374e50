"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the device registry.
All persisted timestamps are timezone-aware UTC.

Functions:
- utc_now(): Returns the current timezone-aware UTC datetime
- ensure_utc(): Normalize naive/aware datetimes into aware UTC
- truncate_to_millis(): Drop sub-millisecond precision (BSON Date resolution)
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def truncate_to_millis(dt: datetime) -> datetime:
    """Drop microseconds below millisecond resolution, as MongoDB does on write."""
    return dt.replace(microsecond=(dt.microsecond // 1000) * 1000)

