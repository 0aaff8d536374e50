"""Utility modules for the device registry."""

from .datetime_utils import ensure_utc, truncate_to_millis, utc_now

__all__ = [
    "ensure_utc",
    "truncate_to_millis",
    "utc_now",
]
