"""Append-only store of activity records."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

import logging

from sqlalchemy.orm import Session, sessionmaker

from activity_fanout.config import MAX_SAME_ACTIVITIES
from activity_fanout.domain.activity_define import (
    is_supported_action,
    is_supported_event_model,
    is_supported_target_model,
)
from activity_fanout.domain.entities import Activity
from activity_fanout.domain.errors import ValidationError
from activity_fanout.domain.ports import ActivityListener
from activity_fanout.infrastructure.repositories import ActivityRepository
from activity_fanout.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = ("user_id", "target_model", "target_id", "action")
OPTIONAL_FIELDS: tuple[str, ...] = ("event_id", "event_model", "created_at")
_ID_FIELDS: tuple[str, ...] = ("user_id", "target_id", "event_id")


def _invalid(reason: str) -> ValidationError:
    logger.info("Rejected activity parameters: %s", reason)
    return ValidationError(f"Activity validation failed: {reason}")


class ActivityStore:
    """Validate, persist and remove activities, notifying listeners of both.

    Listeners receive ``activity_created`` once per successful :meth:`create`
    and ``activity_removing`` for each activity :meth:`remove_matching` is
    about to delete, while the row still exists.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        *,
        same_activities_limit: int = MAX_SAME_ACTIVITIES,
    ) -> None:
        self._session_factory = session_factory
        self._same_activities_limit = max(1, min(same_activities_limit, MAX_SAME_ACTIVITIES))
        self._listeners: list[ActivityListener] = []

    def add_listener(self, listener: ActivityListener) -> None:
        self._listeners.append(listener)

    def create(self, params: Mapping[str, Any]) -> Activity:
        """Persist a new activity built from ``params``.

        Raises :class:`ValidationError` for missing or unregistered values and
        :class:`ConflictError` when the same user already recorded the same
        action on the same target at the same instant.
        """

        values = self._validate(params)
        with self._session_factory() as session:
            activity = ActivityRepository(session).create(**values)
        logger.debug(
            "Recorded activity %s: user %s %s %s %s",
            activity.id,
            activity.user_id,
            activity.action,
            activity.target_model,
            activity.target_id,
        )
        for listener in self._listeners:
            listener.activity_created(activity)
        return activity

    def remove_matching(self, filters: Mapping[str, Any]) -> int:
        """Delete every activity matching ``filters`` and return how many were removed.

        Listeners are told about each activity before the rows are deleted so
        dependent notifications are retracted first.
        """

        if not filters:
            raise _invalid("a removal filter is required")
        unknown = sorted(set(filters) - ActivityRepository.FILTERABLE_FIELDS)
        if unknown:
            raise _invalid(f"unknown filter fields {', '.join(unknown)}")

        with self._session_factory() as session:
            repository = ActivityRepository(session)
            activities = repository.find(filters)
            for activity in activities:
                for listener in self._listeners:
                    listener.activity_removing(activity)
            removed = repository.delete_many(activity.id for activity in activities)
        logger.debug("Removed %d activities matching %s", removed, dict(filters))
        return removed

    def find_by_user(self, user_id: int) -> list[Activity]:
        """Return the activities of ``user_id``, most recent first."""

        with self._session_factory() as session:
            return ActivityRepository(session).list_for_user(user_id)

    def get_same_activities(
        self,
        target_id: int,
        action: str,
        exclude_user_id: int | None = None,
    ) -> list[Activity]:
        """Return up to the configured limit of activities sharing ``(target_id, action)``.

        Results are ordered by ``created_at`` descending. Older history beyond
        the limit is not reachable through this method.
        """

        with self._session_factory() as session:
            return list(
                ActivityRepository(session).list_same(
                    target_id,
                    action,
                    limit=self._same_activities_limit,
                    exclude_user_id=exclude_user_id,
                )
            )

    @staticmethod
    def _validate(params: Mapping[str, Any]) -> dict[str, Any]:
        unknown = sorted(set(params) - set(REQUIRED_FIELDS) - set(OPTIONAL_FIELDS))
        if unknown:
            raise _invalid(f"unknown fields {', '.join(unknown)}")

        missing = [name for name in REQUIRED_FIELDS if params.get(name) is None]
        if missing:
            raise _invalid(f"missing required fields {', '.join(missing)}")

        for name in _ID_FIELDS:
            value = params.get(name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise _invalid(f"{name} must be an integer id")

        if not is_supported_target_model(params["target_model"]):
            raise _invalid(f"unsupported target model {params['target_model']!r}")
        if not is_supported_action(params["action"]):
            raise _invalid(f"unsupported action {params['action']!r}")

        event_id = params.get("event_id")
        event_model = params.get("event_model")
        if event_id is not None and event_model is None:
            raise _invalid("event_model is required when event_id is set")
        if event_model is not None and not is_supported_event_model(event_model):
            raise _invalid(f"unsupported event model {event_model!r}")

        created_at = params.get("created_at")
        if created_at is None:
            created_at = now_in_app_timezone()
        elif not isinstance(created_at, datetime):
            raise _invalid("created_at must be a datetime")

        return {
            "user_id": params["user_id"],
            "target_model": params["target_model"],
            "target_id": params["target_id"],
            "action": params["action"],
            "event_id": event_id,
            "event_model": event_model,
            "created_at": created_at,
        }


__all__ = ["ActivityStore", "OPTIONAL_FIELDS", "REQUIRED_FIELDS"]
