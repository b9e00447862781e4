"""Endpoints managing watch/ignore subscriptions on pages."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from activity_fanout.infrastructure.database import get_db
from activity_fanout.infrastructure.repositories import WatcherRepository
from activity_fanout.interfaces.api.schemas import WatcherRead, WatcherUpdate

router = APIRouter(prefix="/pages", tags=["watchers"])


@router.put("/{page_id}/watchers/{user_id}", response_model=WatcherRead)
def watch_page(
    page_id: int,
    user_id: int,
    payload: WatcherUpdate,
    db: Session = Depends(get_db),
) -> WatcherRead:
    """Watch or ignore ``page_id`` on behalf of ``user_id``."""

    watcher = WatcherRepository(db).watch(user_id, page_id, payload.status)
    return WatcherRead.model_validate(watcher)


__all__ = ["router"]
