"""Persistence layer for activity records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from activity_fanout.domain.entities import Activity
from activity_fanout.domain.errors import ConflictError
from activity_fanout.infrastructure.models import ActivityModel
from activity_fanout.utils import from_storage_datetime, to_storage_datetime


class ActivityRepository:
    """Append, query and delete :class:`Activity` rows. Rows are never updated."""

    FILTERABLE_FIELDS = frozenset(
        {"id", "user_id", "target_model", "target_id", "action", "event_id", "event_model"}
    )

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(
        self,
        *,
        user_id: int,
        target_model: str,
        target_id: int,
        action: str,
        created_at: datetime,
        event_id: int | None = None,
        event_model: str | None = None,
    ) -> Activity:
        model = ActivityModel(
            user_id=user_id,
            target_model=target_model,
            target_id=target_id,
            action=action,
            event_id=event_id,
            event_model=event_model,
            created_at=to_storage_datetime(created_at),
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            msg = (
                f"Activity {action} on {target_model} {target_id} by user {user_id} "
                f"already recorded at {created_at.isoformat()}"
            )
            raise ConflictError(msg) from exc
        self.session.refresh(model)
        return self._to_entity(model)

    def get(self, activity_id: int) -> Activity | None:
        model = self.session.get(ActivityModel, activity_id)
        return self._to_entity(model) if model is not None else None

    def find(self, filters: Mapping[str, Any]) -> list[Activity]:
        """Return activities whose columns equal every value in ``filters``."""

        return [self._to_entity(model) for model in self._filtered(filters).all()]

    def list_for_user(self, user_id: int) -> list[Activity]:
        return self.find({"user_id": user_id})

    def list_same(
        self,
        target_id: int,
        action: str,
        *,
        limit: int,
        exclude_user_id: int | None = None,
    ) -> Sequence[Activity]:
        query = self._filtered({"target_id": target_id, "action": action})
        if exclude_user_id is not None:
            query = query.filter(ActivityModel.user_id != exclude_user_id)
        return [self._to_entity(model) for model in query.limit(limit).all()]

    def delete_many(self, activity_ids: Iterable[int]) -> int:
        ids = list(activity_ids)
        if not ids:
            return 0
        removed = (
            self.session.query(ActivityModel)
            .filter(ActivityModel.id.in_(ids))
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return removed

    def _filtered(self, filters: Mapping[str, Any]) -> Query:
        query = self.session.query(ActivityModel)
        for name, value in filters.items():
            column = getattr(ActivityModel, name)
            query = query.filter(column.is_(None) if value is None else column == value)
        return query.order_by(ActivityModel.created_at.desc(), ActivityModel.id.desc())

    @staticmethod
    def _to_entity(model: ActivityModel) -> Activity:
        return Activity(
            id=model.id,
            user_id=model.user_id,
            target_model=model.target_model,
            target_id=model.target_id,
            action=model.action,
            event_id=model.event_id,
            event_model=model.event_model,
            created_at=from_storage_datetime(model.created_at),
        )


__all__ = ["ActivityRepository"]
