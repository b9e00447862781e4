"""Repository implementations for infrastructure layer."""

from .activity_repository import ActivityRepository
from .notification_repository import NotificationRepository
from .page_repository import PageRepository
from .user_repository import UserRepository
from .watcher_repository import WatcherRepository

__all__ = [
    "ActivityRepository",
    "NotificationRepository",
    "PageRepository",
    "UserRepository",
    "WatcherRepository",
]
