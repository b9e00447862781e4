"""Endpoints recording, listing and removing activities."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from activity_fanout.application.activity_store import ActivityStore
from activity_fanout.domain.entities import Activity
from activity_fanout.domain.errors import ConflictError, ValidationError
from activity_fanout.interfaces.api.dependencies import get_activity_store
from activity_fanout.interfaces.api.schemas import (
    ActivityCreate,
    ActivityRead,
    ActivityRemovalResult,
)

router = APIRouter(prefix="/activities", tags=["activities"])

UNPROCESSABLE_CONTENT = 422


def _activity_to_schema(activity: Activity) -> ActivityRead:
    return ActivityRead.model_validate(activity)


@router.post("/", response_model=ActivityRead, status_code=status.HTTP_201_CREATED)
def create_activity(
    payload: ActivityCreate,
    store: ActivityStore = Depends(get_activity_store),
) -> ActivityRead:
    """Record an activity; notification fan-out happens in the background."""

    try:
        activity = store.create(payload.model_dump(exclude_none=True))
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=UNPROCESSABLE_CONTENT, detail=str(exc)) from exc
    return _activity_to_schema(activity)


@router.delete("/", response_model=ActivityRemovalResult)
def remove_activities(
    user_id: int | None = None,
    target_model: str | None = None,
    target_id: int | None = None,
    action: str | None = None,
    event_id: int | None = None,
    event_model: str | None = None,
    store: ActivityStore = Depends(get_activity_store),
) -> ActivityRemovalResult:
    """Remove every activity matching the given filters."""

    filters = {
        name: value
        for name, value in (
            ("user_id", user_id),
            ("target_model", target_model),
            ("target_id", target_id),
            ("action", action),
            ("event_id", event_id),
            ("event_model", event_model),
        )
        if value is not None
    }
    try:
        removed = store.remove_matching(filters)
    except ValidationError as exc:
        raise HTTPException(status_code=UNPROCESSABLE_CONTENT, detail=str(exc)) from exc
    return ActivityRemovalResult(removed=removed)


@router.get("/same", response_model=list[ActivityRead])
def list_same_activities(
    target_id: int,
    action: str,
    exclude_user_id: int | None = Query(None, description="Skip activities of this user"),
    store: ActivityStore = Depends(get_activity_store),
) -> list[ActivityRead]:
    """Return the newest activities sharing ``target_id`` and ``action``."""

    activities = store.get_same_activities(target_id, action, exclude_user_id=exclude_user_id)
    return [_activity_to_schema(activity) for activity in activities]


__all__ = ["router"]
