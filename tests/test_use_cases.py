"""Tests for the page activity use cases."""

from __future__ import annotations

import pytest

from activity_fanout.application.activity_store import ActivityStore
from activity_fanout.application.use_cases import (
    create_by_page_comment,
    create_by_page_like,
    create_by_page_update,
    get_action_users_from_activities,
    remove_by_page,
    remove_by_page_unlike,
)
from activity_fanout.domain.entities import Comment

from conftest import make_activity


@pytest.fixture()
def store(session_factory) -> ActivityStore:
    return ActivityStore(session_factory)


def test_create_by_page_comment_links_the_comment(store) -> None:
    comment = Comment(id=42, page_id=100, creator_id=2, comment="nice page")

    activity = create_by_page_comment(store, comment)

    assert (activity.user_id, activity.target_model, activity.target_id) == (2, "Page", 100)
    assert (activity.action, activity.event_model, activity.event_id) == ("COMMENT", "Comment", 42)


def test_create_by_page_comment_requires_saved_comment(store) -> None:
    with pytest.raises(ValueError):
        create_by_page_comment(store, Comment(id=None, page_id=100, creator_id=2, comment="draft"))


def test_like_and_unlike(store) -> None:
    create_by_page_like(store, page_id=100, user_id=2)
    create_by_page_like(store, page_id=100, user_id=3)
    create_by_page_update(store, page_id=100, user_id=2)

    assert remove_by_page_unlike(store, page_id=100, user_id=2) == 1
    assert [activity.action for activity in store.find_by_user(2)] == ["UPDATE"]
    assert [activity.user_id for activity in store.get_same_activities(100, "LIKE")] == [3]


def test_remove_by_page_only_touches_that_page(store) -> None:
    create_by_page_like(store, page_id=100, user_id=2)
    create_by_page_update(store, page_id=100, user_id=3)
    create_by_page_like(store, page_id=101, user_id=2)

    assert remove_by_page(store, 100) == 2
    assert [activity.target_id for activity in store.find_by_user(2)] == [101]


def test_action_users_are_distinct_in_first_appearance_order() -> None:
    activities = [make_activity(3, 7), make_activity(2, 5), make_activity(1, 7)]

    assert get_action_users_from_activities(activities) == [7, 5]
