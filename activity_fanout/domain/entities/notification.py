"""Domain entity representing a pending notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

NOTIFICATION_STATUS_UNREAD = "UNREAD"
NOTIFICATION_STATUS_UNOPENED = "UNOPENED"
NOTIFICATION_STATUS_OPENED = "OPENED"


@dataclass
class Notification:
    """Consolidated message for one recipient about one (target, action) pair."""

    id: int | None
    user_id: int
    target_model: str
    target_id: int
    action: str
    status: str = NOTIFICATION_STATUS_UNREAD
    activity_ids: set[int] = field(default_factory=set)
    created_at: datetime | None = None


__all__ = [
    "NOTIFICATION_STATUS_OPENED",
    "NOTIFICATION_STATUS_UNOPENED",
    "NOTIFICATION_STATUS_UNREAD",
    "Notification",
]
