"""Use cases recording and removing page activities."""

from __future__ import annotations

from collections.abc import Sequence

from activity_fanout.application.activity_store import ActivityStore
from activity_fanout.application.aggregator import action_users
from activity_fanout.domain.activity_define import (
    ACTION_COMMENT,
    ACTION_LIKE,
    ACTION_UPDATE,
    MODEL_COMMENT,
    MODEL_PAGE,
)
from activity_fanout.domain.entities import Activity, Comment
from activity_fanout.domain.errors import ValidationError


def create_by_page_comment(store: ActivityStore, comment: Comment) -> Activity:
    """Record that ``comment.creator_id`` commented on the comment's page."""

    if comment.id is None:
        raise ValidationError("Comment must be saved before recording its activity")

    return store.create(
        {
            "user_id": comment.creator_id,
            "target_model": MODEL_PAGE,
            "target_id": comment.page_id,
            "event_model": MODEL_COMMENT,
            "event_id": comment.id,
            "action": ACTION_COMMENT,
        }
    )


def create_by_page_like(store: ActivityStore, *, page_id: int, user_id: int) -> Activity:
    return store.create(
        {
            "user_id": user_id,
            "target_model": MODEL_PAGE,
            "target_id": page_id,
            "action": ACTION_LIKE,
        }
    )


def create_by_page_update(store: ActivityStore, *, page_id: int, user_id: int) -> Activity:
    return store.create(
        {
            "user_id": user_id,
            "target_model": MODEL_PAGE,
            "target_id": page_id,
            "action": ACTION_UPDATE,
        }
    )


def remove_by_page_unlike(store: ActivityStore, *, page_id: int, user_id: int) -> int:
    """Remove the like activities of ``user_id`` on ``page_id``."""

    return store.remove_matching(
        {
            "user_id": user_id,
            "target_model": MODEL_PAGE,
            "target_id": page_id,
            "action": ACTION_LIKE,
        }
    )


def remove_by_page(store: ActivityStore, page_id: int) -> int:
    """Remove every activity on ``page_id``, typically because the page was deleted."""

    return store.remove_matching({"target_model": MODEL_PAGE, "target_id": page_id})


def get_action_users_from_activities(activities: Sequence[Activity]) -> list[int]:
    return action_users(activities)


__all__ = [
    "create_by_page_comment",
    "create_by_page_like",
    "create_by_page_update",
    "get_action_users_from_activities",
    "remove_by_page",
    "remove_by_page_unlike",
]
