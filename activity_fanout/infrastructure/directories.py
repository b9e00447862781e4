"""SQLAlchemy-backed implementations of the activity core's collaborators.

Fan-out calls these from worker threads, so every call opens its own
short-lived session from the factory instead of sharing one.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import logging

from sqlalchemy.orm import Session, sessionmaker

from activity_fanout.domain.entities import Activity, Page
from activity_fanout.domain.errors import NotFoundError
from activity_fanout.domain.ports import TargetLoader
from activity_fanout.infrastructure.repositories import (
    NotificationRepository,
    PageRepository,
    UserRepository,
    WatcherRepository,
)

logger = logging.getLogger(__name__)


class SqlWatcherDirectory:
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def watchers(self, target_id: int) -> set[int]:
        with self._session_factory() as session:
            return WatcherRepository(session).list_watcher_ids(target_id)

    def ignorers(self, target_id: int) -> set[int]:
        with self._session_factory() as session:
            return WatcherRepository(session).list_ignorer_ids(target_id)


class SqlUserDirectory:
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def active_users_among(self, user_ids: Iterable[int]) -> set[int]:
        with self._session_factory() as session:
            return UserRepository(session).list_active_ids(user_ids)


class SqlNotificationStore:
    """Notification store persisting through :class:`NotificationRepository`."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def upsert(
        self,
        recipient_id: int,
        same_activities: Sequence[Activity],
        source_activity: Activity,
    ) -> None:
        with self._session_factory() as session:
            notification = NotificationRepository(session).upsert_by_activity(
                recipient_id, same_activities, source_activity
            )
        logger.debug(
            "Notification %s for user %s now references %d activities",
            notification.id,
            recipient_id,
            len(notification.activity_ids),
        )

    def retract(self, activity: Activity) -> None:
        with self._session_factory() as session:
            removed = NotificationRepository(session).remove_activity(activity)
        if removed:
            logger.debug("Dropped %d empty notifications after activity %s", removed, activity.id)


def make_page_loader(session_factory: sessionmaker[Session]) -> TargetLoader:
    """Return a loader resolving page ids into :class:`Page` entities."""

    def load_page(page_id: int) -> Page:
        with session_factory() as session:
            page = PageRepository(session).get(page_id)
        if page is None:
            msg = f"Page with id {page_id} not found"
            raise NotFoundError(msg)
        return page

    return load_page


__all__ = [
    "SqlNotificationStore",
    "SqlUserDirectory",
    "SqlWatcherDirectory",
    "make_page_loader",
]
