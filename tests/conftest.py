"""Shared fixtures for the activity fan-out test-suite."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta, timezone

import pytest

from activity_fanout.application.services import build_activity_services
from activity_fanout.config import Settings
from activity_fanout.domain.entities import (
    USER_STATUS_ACTIVE,
    USER_STATUS_SUSPENDED,
    Activity,
    Comment,
    Page,
    User,
)
from activity_fanout.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from activity_fanout.infrastructure.repositories import PageRepository, UserRepository

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeWatcherDirectory:
    def __init__(self) -> None:
        self.statuses: dict[tuple[int, int], str] = {}

    def watch(self, user_id: int, target_id: int, status: str) -> None:
        self.statuses[(user_id, target_id)] = status

    def watchers(self, target_id: int) -> set[int]:
        return self._with_status(target_id, "WATCH")

    def ignorers(self, target_id: int) -> set[int]:
        return self._with_status(target_id, "IGNORE")

    def _with_status(self, target_id: int, wanted: str) -> set[int]:
        return {
            user
            for (user, target), status in self.statuses.items()
            if target == target_id and status == wanted
        }


class FakeUserDirectory:
    def __init__(self, suspended: Iterable[int] = ()) -> None:
        self.suspended = set(suspended)
        self.calls: list[set[int]] = []

    def active_users_among(self, user_ids: Iterable[int]) -> set[int]:
        ids = set(user_ids)
        self.calls.append(ids)
        return ids - self.suspended


class RecordingNotificationStore:
    def __init__(self, *, fail_on: Iterable[int] = (), fail_retract: bool = False) -> None:
        self.upserts: dict[int, tuple[list[Activity], Activity]] = {}
        self.retracted: list[Activity] = []
        self.fail_on = set(fail_on)
        self.fail_retract = fail_retract

    def upsert(
        self,
        recipient_id: int,
        same_activities: Sequence[Activity],
        source_activity: Activity,
    ) -> None:
        if recipient_id in self.fail_on:
            raise ConnectionError("notification backend unavailable")
        self.upserts[recipient_id] = (list(same_activities), source_activity)

    def retract(self, activity: Activity) -> None:
        if self.fail_retract:
            raise ConnectionError("notification backend unavailable")
        self.retracted.append(activity)


def make_activity(
    activity_id: int,
    user_id: int,
    *,
    target_id: int = 100,
    action: str = "COMMENT",
    minutes: int = 0,
) -> Activity:
    return Activity(
        id=activity_id,
        user_id=user_id,
        target_model="Page",
        target_id=target_id,
        action=action,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def engine(tmp_path):
    """Return an engine bound to a fresh SQLite file with every table created."""

    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture()
def services(session_factory):
    services = build_activity_services(
        session_factory, Settings(fanout_max_workers=2, database_url="sqlite://")
    )
    yield services
    services.close()


@pytest.fixture()
def store(services):
    return services.store


@pytest.fixture()
def wiki(session_factory):
    """Seed four users and one page.

    User 1 created the page, user 2 and user 3 are active, and user 4 is
    suspended but commented on the page.
    """

    with session_factory() as session:
        users = UserRepository(session)
        users.create(User(id=1, name="alice", email="alice@example.com", status=USER_STATUS_ACTIVE))
        users.create(User(id=2, name="bob", email="bob@example.com", status=USER_STATUS_ACTIVE))
        users.create(User(id=3, name="carol", email="carol@example.com", status=USER_STATUS_ACTIVE))
        users.create(User(id=4, name="dave", email="dave@example.com", status=USER_STATUS_SUSPENDED))

        pages = PageRepository(session)
        page = pages.create(Page(id=100, path="/sandbox", creator_id=1))
        pages.add_comment(Comment(id=None, page_id=page.id, creator_id=4, comment="first!"))
    return page
