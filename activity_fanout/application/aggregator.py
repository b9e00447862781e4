"""Batching of activities that share a target and an action."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from activity_fanout.domain.entities import Activity


class SameActivitySource(Protocol):
    def get_same_activities(
        self, target_id: int, action: str, exclude_user_id: int | None = None
    ) -> list[Activity]:
        ...


class SameActivityAggregator:
    """Collect prior activities so several actors can share one notification."""

    def __init__(self, source: SameActivitySource) -> None:
        self._source = source

    def same_activities(self, activity: Activity) -> list[Activity]:
        """Return the newest activities on the same target with the same action."""

        return self._source.get_same_activities(activity.target_id, activity.action)

    @staticmethod
    def for_recipient(activities: Iterable[Activity], recipient_id: int) -> list[Activity]:
        """Drop the activities ``recipient_id`` performed themselves."""

        return [activity for activity in activities if activity.user_id != recipient_id]


def action_users(activities: Sequence[Activity]) -> list[int]:
    """Return the distinct actors of ``activities`` in order of first appearance."""

    return list(dict.fromkeys(activity.user_id for activity in activities))


__all__ = ["SameActivityAggregator", "SameActivitySource", "action_users"]
