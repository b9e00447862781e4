"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from activity_fanout.domain.entities import NOTIFICATION_STATUS_UNREAD, Activity, Notification
from activity_fanout.infrastructure.models import (
    ActivityModel,
    NotificationModel,
    notification_activity_table,
)
from activity_fanout.utils import from_storage_datetime, to_storage_datetime


class NotificationRepository:
    """Merge activities into per-recipient notifications and retract them again."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get_by_key(self, user_id: int, target_id: int, action: str) -> Notification | None:
        model = self._get_model(user_id, target_id, action)
        return self._to_entity(model) if model is not None else None

    def upsert_by_activity(
        self,
        user_id: int,
        activities: Sequence[Activity],
        activity: Activity,
    ) -> Notification:
        """Create or refresh the notification of ``user_id`` for ``activity``.

        The notification keeps the activities it already referenced and gains
        ``activities`` plus ``activity`` itself. It is marked unread again and
        stamped with the time of ``activity``.
        """

        activity_ids = {same.id for same in activities}
        activity_ids.add(activity.id)
        try:
            return self._merge(user_id, activity, activity_ids)
        except IntegrityError:
            # Another worker inserted the same (user, target, action) first.
            self.session.rollback()
            return self._merge(user_id, activity, activity_ids)

    def _merge(self, user_id: int, activity: Activity, activity_ids: set[int]) -> Notification:
        model = self._get_model(user_id, activity.target_id, activity.action)
        if model is None:
            model = NotificationModel(
                user_id=user_id,
                target_model=activity.target_model,
                target_id=activity.target_id,
                action=activity.action,
            )
            self.session.add(model)
            linked_ids: set[int] = set()
        else:
            linked_ids = {linked.id for linked in model.activities}

        missing_ids = activity_ids - linked_ids
        if missing_ids:
            model.activities.extend(
                self.session.query(ActivityModel).filter(ActivityModel.id.in_(missing_ids)).all()
            )
        model.status = NOTIFICATION_STATUS_UNREAD
        model.created_at = to_storage_datetime(activity.created_at)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def remove_activity(self, activity: Activity) -> int:
        """Detach ``activity`` from its notifications and drop the ones left empty.

        Returns the number of notifications deleted.
        """

        notification_ids = select(NotificationModel.id).where(
            NotificationModel.target_id == activity.target_id,
            NotificationModel.action == activity.action,
        )
        self.session.execute(
            delete(notification_activity_table).where(
                notification_activity_table.c.activity_id == activity.id,
                notification_activity_table.c.notification_id.in_(notification_ids),
            )
        )

        linked_ids = select(notification_activity_table.c.notification_id)
        empty_ids = [
            notification_id
            for (notification_id,) in self.session.execute(
                notification_ids.where(NotificationModel.id.not_in(linked_ids))
            ).all()
        ]
        if empty_ids:
            self.session.execute(
                delete(NotificationModel).where(NotificationModel.id.in_(empty_ids))
            )
        self.session.commit()
        return len(empty_ids)

    def _get_model(self, user_id: int, target_id: int, action: str) -> NotificationModel | None:
        return (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.target_id == target_id,
                NotificationModel.action == action,
            )
            .one_or_none()
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            target_model=model.target_model,
            target_id=model.target_id,
            action=model.action,
            status=model.status,
            activity_ids={linked.id for linked in model.activities},
            created_at=from_storage_datetime(model.created_at),
        )


__all__ = ["NotificationRepository"]
