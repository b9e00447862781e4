"""ORM models used by the application infrastructure."""

from .activity import ActivityModel
from .notification import NotificationModel, notification_activity_table
from .page import CommentModel, PageModel
from .user import UserModel
from .watcher import WatcherModel

__all__ = [
    "ActivityModel",
    "CommentModel",
    "NotificationModel",
    "notification_activity_table",
    "PageModel",
    "UserModel",
    "WatcherModel",
]
