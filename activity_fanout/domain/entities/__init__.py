"""Domain entities exposed by the application."""

from .activity import Activity
from .notification import (
    NOTIFICATION_STATUS_OPENED,
    NOTIFICATION_STATUS_UNOPENED,
    NOTIFICATION_STATUS_UNREAD,
    Notification,
)
from .page import Comment, Page
from .user import (
    USER_STATUS_ACTIVE,
    USER_STATUS_DELETED,
    USER_STATUS_INVITED,
    USER_STATUS_REGISTERED,
    USER_STATUS_SUSPENDED,
    User,
)
from .watcher import (
    WATCHER_STATUSES,
    WATCHER_STATUS_IGNORE,
    WATCHER_STATUS_WATCH,
    Watcher,
)

__all__ = [
    "Activity",
    "Comment",
    "Notification",
    "NOTIFICATION_STATUS_OPENED",
    "NOTIFICATION_STATUS_UNOPENED",
    "NOTIFICATION_STATUS_UNREAD",
    "Page",
    "User",
    "USER_STATUS_ACTIVE",
    "USER_STATUS_DELETED",
    "USER_STATUS_INVITED",
    "USER_STATUS_REGISTERED",
    "USER_STATUS_SUSPENDED",
    "Watcher",
    "WATCHER_STATUSES",
    "WATCHER_STATUS_IGNORE",
    "WATCHER_STATUS_WATCH",
]
