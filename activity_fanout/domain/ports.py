"""Interfaces of the collaborators the activity core depends on."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Protocol

from .entities import Activity


class TargetEntity(Protocol):
    """An entity that can be the target of an activity."""

    def interested_parties(self) -> set[int]:
        ...


TargetLoader = Callable[[int], TargetEntity]


class WatcherDirectory(Protocol):
    def watchers(self, target_id: int) -> set[int]:
        ...

    def ignorers(self, target_id: int) -> set[int]:
        ...


class UserDirectory(Protocol):
    def active_users_among(self, user_ids: Iterable[int]) -> set[int]:
        ...


class NotificationStore(Protocol):
    """Persists consolidated notifications built from activities."""

    def upsert(
        self,
        recipient_id: int,
        same_activities: Sequence[Activity],
        source_activity: Activity,
    ) -> None:
        ...

    def retract(self, activity: Activity) -> None:
        ...


class ActivityListener(Protocol):
    """Receives lifecycle callbacks from the activity store."""

    def activity_created(self, activity: Activity) -> object:
        ...

    def activity_removing(self, activity: Activity) -> object:
        ...


__all__ = [
    "ActivityListener",
    "NotificationStore",
    "TargetEntity",
    "TargetLoader",
    "UserDirectory",
    "WatcherDirectory",
]
