"""Domain entity for explicit per-user subscription state on a target."""

from dataclasses import dataclass
from datetime import datetime

WATCHER_STATUS_WATCH = "WATCH"
WATCHER_STATUS_IGNORE = "IGNORE"
WATCHER_STATUSES = (WATCHER_STATUS_WATCH, WATCHER_STATUS_IGNORE)


@dataclass
class Watcher:
    """Whether ``user_id`` watches or ignores ``target_id``."""

    id: int | None
    user_id: int
    target_id: int
    status: str
    created_at: datetime | None = None


__all__ = [
    "WATCHER_STATUSES",
    "WATCHER_STATUS_IGNORE",
    "WATCHER_STATUS_WATCH",
    "Watcher",
]
