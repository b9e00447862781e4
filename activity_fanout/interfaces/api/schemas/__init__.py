from .activity import ActivityCreate, ActivityRead, ActivityRemovalResult
from .notification import NotificationRead
from .watcher import WatcherRead, WatcherUpdate

__all__ = [
    "ActivityCreate",
    "ActivityRead",
    "ActivityRemovalResult",
    "NotificationRead",
    "WatcherRead",
    "WatcherUpdate",
]
