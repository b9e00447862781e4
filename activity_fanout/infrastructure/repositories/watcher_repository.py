"""Persistence layer for watch/ignore subscriptions."""

from __future__ import annotations

from sqlalchemy.orm import Session

from activity_fanout.domain.entities import (
    WATCHER_STATUSES,
    WATCHER_STATUS_IGNORE,
    WATCHER_STATUS_WATCH,
    Watcher,
)
from activity_fanout.infrastructure.models import WatcherModel
from activity_fanout.utils import (
    from_storage_datetime,
    now_in_app_timezone,
    to_storage_datetime,
)


class WatcherRepository:
    """Store at most one watch status per (user, target)."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def watch(self, user_id: int, target_id: int, status: str) -> Watcher:
        """Set the status of ``user_id`` on ``target_id``, replacing any previous one."""

        if status not in WATCHER_STATUSES:
            msg = f"Unsupported watcher status {status!r}"
            raise ValueError(msg)

        model = (
            self.session.query(WatcherModel)
            .filter(WatcherModel.user_id == user_id, WatcherModel.target_id == target_id)
            .one_or_none()
        )
        if model is None:
            model = WatcherModel(user_id=user_id, target_id=target_id)
            self.session.add(model)
        model.status = status
        model.created_at = to_storage_datetime(now_in_app_timezone())
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_user_ids(self, target_id: int, status: str) -> set[int]:
        query = self.session.query(WatcherModel.user_id).filter(
            WatcherModel.target_id == target_id, WatcherModel.status == status
        )
        return {user_id for (user_id,) in query.all()}

    def list_watcher_ids(self, target_id: int) -> set[int]:
        return self.list_user_ids(target_id, WATCHER_STATUS_WATCH)

    def list_ignorer_ids(self, target_id: int) -> set[int]:
        return self.list_user_ids(target_id, WATCHER_STATUS_IGNORE)

    @staticmethod
    def _to_entity(model: WatcherModel) -> Watcher:
        return Watcher(
            id=model.id,
            user_id=model.user_id,
            target_id=model.target_id,
            status=model.status,
            created_at=from_storage_datetime(model.created_at),
        )


__all__ = ["WatcherRepository"]
