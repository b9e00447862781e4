"""Utility helpers for reusable functionality."""

from .datetime import (
    from_storage_datetime,
    get_app_timezone,
    now_in_app_timezone,
    to_storage_datetime,
)

__all__ = [
    "from_storage_datetime",
    "get_app_timezone",
    "now_in_app_timezone",
    "to_storage_datetime",
]
