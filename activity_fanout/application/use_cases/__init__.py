"""Aggregate application use cases."""

from .activities import (
    create_by_page_comment,
    create_by_page_like,
    create_by_page_update,
    get_action_users_from_activities,
    remove_by_page,
    remove_by_page_unlike,
)

__all__ = [
    "create_by_page_comment",
    "create_by_page_like",
    "create_by_page_update",
    "get_action_users_from_activities",
    "remove_by_page",
    "remove_by_page_unlike",
]
