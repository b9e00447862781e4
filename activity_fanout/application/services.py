"""Wiring of the activity store to its fan-out collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from sqlalchemy.orm import Session, sessionmaker

from activity_fanout.config import Settings, get_settings
from activity_fanout.domain.activity_define import MODEL_PAGE
from activity_fanout.infrastructure.directories import (
    SqlNotificationStore,
    SqlUserDirectory,
    SqlWatcherDirectory,
    make_page_loader,
)

from .activity_store import ActivityStore
from .aggregator import SameActivityAggregator
from .audience import AudienceResolver
from .fanout import FanOutCoordinator
from .targets import TargetRegistry


@dataclass
class ActivityServices:
    store: ActivityStore
    coordinator: FanOutCoordinator
    targets: TargetRegistry

    def close(self) -> None:
        self.coordinator.shutdown()


def build_activity_services(
    session_factory: sessionmaker[Session],
    settings: Settings | None = None,
) -> ActivityServices:
    """Assemble an :class:`ActivityStore` whose writes fan out to notifications."""

    settings = settings or get_settings()

    targets = TargetRegistry()
    targets.register(MODEL_PAGE, make_page_loader(session_factory))

    store = ActivityStore(
        session_factory, same_activities_limit=settings.same_activities_limit
    )
    coordinator = FanOutCoordinator(
        AudienceResolver(
            targets,
            SqlWatcherDirectory(session_factory),
            SqlUserDirectory(session_factory),
        ),
        SameActivityAggregator(store),
        SqlNotificationStore(session_factory),
        max_workers=settings.fanout_max_workers,
    )
    store.add_listener(coordinator)
    return ActivityServices(store=store, coordinator=coordinator, targets=targets)


@lru_cache
def get_activity_services() -> ActivityServices:
    """Return the process wide services bound to the default database session factory."""

    from activity_fanout.infrastructure.database import SessionLocal

    return build_activity_services(SessionLocal)


__all__ = ["ActivityServices", "build_activity_services", "get_activity_services"]
