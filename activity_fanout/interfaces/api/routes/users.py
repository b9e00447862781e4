"""Per-user views over the activity log and the notification store."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from activity_fanout.application.activity_store import ActivityStore
from activity_fanout.domain.entities import Notification
from activity_fanout.infrastructure.database import get_db
from activity_fanout.infrastructure.repositories import NotificationRepository
from activity_fanout.interfaces.api.dependencies import get_activity_store
from activity_fanout.interfaces.api.schemas import ActivityRead, NotificationRead

router = APIRouter(prefix="/users", tags=["users"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or 0,
        user_id=notification.user_id,
        target_model=notification.target_model,
        target_id=notification.target_id,
        action=notification.action,
        status=notification.status,
        activity_ids=sorted(notification.activity_ids),
        created_at=notification.created_at,
    )


@router.get("/{user_id}/activities", response_model=list[ActivityRead])
def list_user_activities(
    user_id: int,
    store: ActivityStore = Depends(get_activity_store),
) -> list[ActivityRead]:
    """Return the activities of ``user_id``, most recent first."""

    return [ActivityRead.model_validate(activity) for activity in store.find_by_user(user_id)]


@router.get("/{user_id}/notifications", response_model=list[NotificationRead])
def list_user_notifications(
    user_id: int,
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
) -> list[NotificationRead]:
    notifications = NotificationRepository(db).list_for_user(user_id, limit=limit)
    return [_notification_to_schema(notification) for notification in notifications]


__all__ = ["router"]
