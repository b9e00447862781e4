"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from activity_fanout.domain.entities import USER_STATUS_ACTIVE, User
from activity_fanout.infrastructure.models import UserModel


class UserRepository:
    """Provide the user lookups needed by notification fan-out."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(id=user.id, name=user.name, email=user.email, status=user.status)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status(self, user_id: int, status: int) -> User:
        model = self.session.get(UserModel, user_id)
        if model is None:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        model.status = status
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_active_ids(self, user_ids: Iterable[int]) -> set[int]:
        unique_ids = {int(user_id) for user_id in user_ids}
        if not unique_ids:
            return set()
        query = (
            self.session.query(UserModel.id)
            .filter(UserModel.id.in_(unique_ids))
            .filter(UserModel.status == USER_STATUS_ACTIVE)
        )
        return {user_id for (user_id,) in query.all()}

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(id=model.id, name=model.name, email=model.email, status=model.status)


__all__ = ["UserRepository"]
