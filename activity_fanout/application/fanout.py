"""Turn activity lifecycle events into notification updates."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor, wait
from enum import Enum

import logging

import anyio
from anyio import to_thread

from activity_fanout.domain.entities import Activity
from activity_fanout.domain.ports import NotificationStore

from .aggregator import SameActivityAggregator
from .audience import AudienceResolver

logger = logging.getLogger(__name__)


class FanOutState(str, Enum):
    CREATED = "created"
    DISPATCHED = "dispatched"
    DISPATCH_FAILED = "dispatch_failed"
    REMOVAL_REQUESTED = "removal_requested"
    RETRACTED = "retracted"
    RETRACT_FAILED = "retract_failed"


class FanOutCoordinator:
    """Listener of :class:`ActivityStore` that keeps notifications in sync.

    Creation fan-out runs on a worker pool so the writer never waits for it.
    Failures on either path are logged and reported through
    :class:`FanOutState`; they never reach the code that wrote the activity.
    """

    def __init__(
        self,
        resolver: AudienceResolver,
        aggregator: SameActivityAggregator,
        notifications: NotificationStore,
        *,
        max_workers: int = 4,
    ) -> None:
        self._resolver = resolver
        self._aggregator = aggregator
        self._notifications = notifications
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="activity-fanout"
        )
        self._pending: set[Future[FanOutState]] = set()

    def activity_created(self, activity: Activity) -> Future[FanOutState] | None:
        """Schedule fan-out for ``activity`` and return its future."""

        try:
            future = self._executor.submit(anyio.run, self.dispatch, activity)
        except RuntimeError:
            logger.exception("Could not schedule fan-out for activity %s", activity.id)
            return None
        self._pending.add(future)
        future.add_done_callback(self._pending.discard)
        return future

    def activity_removing(self, activity: Activity) -> FanOutState:
        """Retract the notification contribution of ``activity`` before it is deleted."""

        logger.debug("Activity %s %s", activity.id, FanOutState.REMOVAL_REQUESTED.value)
        try:
            self._notifications.retract(activity)
        except Exception:
            logger.exception("Could not retract notifications of activity %s", activity.id)
            return FanOutState.RETRACT_FAILED
        return FanOutState.RETRACTED

    async def dispatch(self, activity: Activity) -> FanOutState:
        """Upsert one notification per eligible recipient of ``activity``."""

        logger.debug("Activity %s %s", activity.id, FanOutState.CREATED.value)
        try:
            recipients, same_activities = await self._collect(activity)
            async with anyio.create_task_group() as task_group:
                for recipient_id in recipients:
                    task_group.start_soon(self._upsert, recipient_id, same_activities, activity)
        except Exception:
            logger.exception("Notification fan-out failed for activity %s", activity.id)
            return FanOutState.DISPATCH_FAILED

        logger.debug("Activity %s dispatched to %d recipients", activity.id, len(recipients))
        return FanOutState.DISPATCHED

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until scheduled fan-outs finish; ``False`` if ``timeout`` expired first."""

        _, not_done = wait(list(self._pending), timeout=timeout)
        return not not_done

    def shutdown(self, *, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    async def _collect(self, activity: Activity) -> tuple[set[int], list[Activity]]:
        results: dict[str, object] = {}

        async def run(key: str, func) -> None:
            results[key] = await to_thread.run_sync(func, activity)

        async with anyio.create_task_group() as task_group:
            task_group.start_soon(run, "audience", self._resolver.resolve)
            task_group.start_soon(run, "same", self._aggregator.same_activities)
        return results["audience"], results["same"]  # type: ignore[return-value]

    async def _upsert(
        self,
        recipient_id: int,
        same_activities: Sequence[Activity],
        activity: Activity,
    ) -> None:
        batch = self._aggregator.for_recipient(same_activities, recipient_id)
        await to_thread.run_sync(self._notifications.upsert, recipient_id, batch, activity)


__all__ = ["FanOutCoordinator", "FanOutState"]
