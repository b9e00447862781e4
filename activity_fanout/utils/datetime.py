"""Timestamp helpers shared by the activity log and notification tables.

Columns hold naive UTC so that ordering and uniqueness follow the instant,
including across daylight-saving transitions. Values handed back to callers
are aware and expressed in ``APP_TIMEZONE``.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from activity_fanout.config import get_settings

_UTC_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the timezone configured through ``APP_TIMEZONE``.

    Both IANA names (``Europe/Madrid``) and fixed offsets (``UTC+05:30``) are
    accepted. Anything else resolves to UTC.
    """

    name = (get_settings().app_timezone or "").strip()
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _UTC_OFFSET.match(name)
        if match is None:
            return timezone.utc
        offset = timedelta(
            hours=int(match.group("hours")), minutes=int(match.group("minutes") or 0)
        )
        return timezone(-offset if match.group("sign") == "-" else offset)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def to_storage_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` as naive UTC for a ``DateTime`` column.

    Naive input is read as wall-clock time in the application timezone.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=get_app_timezone())
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def from_storage_datetime(value: datetime | None) -> datetime | None:
    """Attach UTC to a stored value and express it in the application timezone."""

    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc).astimezone(get_app_timezone())


__all__ = [
    "from_storage_datetime",
    "get_app_timezone",
    "now_in_app_timezone",
    "to_storage_datetime",
]
