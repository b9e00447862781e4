"""Resolve which users should hear about an activity."""

from __future__ import annotations

import logging

from activity_fanout.domain.entities import Activity
from activity_fanout.domain.ports import UserDirectory, WatcherDirectory

from .targets import TargetRegistry

logger = logging.getLogger(__name__)


class AudienceResolver:
    """Compute the notification audience of a single activity.

    The audience is everyone the target itself considers interested plus the
    target's watchers. Ignorers and the actor are then removed, and only
    accounts that are still active are kept.
    """

    def __init__(
        self,
        targets: TargetRegistry,
        watchers: WatcherDirectory,
        users: UserDirectory,
    ) -> None:
        self._targets = targets
        self._watchers = watchers
        self._users = users

    def resolve(self, activity: Activity) -> set[int]:
        """Return the ids of users eligible for a notification about ``activity``.

        Raises :class:`TargetNotFoundError` when the target cannot be loaded.
        """

        target = self._targets.load(activity.target_model, activity.target_id)
        target_users = set(target.interested_parties())
        watch_users = set(self._watchers.watchers(activity.target_id))
        ignore_users = set(self._watchers.ignorers(activity.target_id))

        eligible = (target_users | watch_users) - ignore_users
        eligible.discard(activity.user_id)
        if not eligible:
            return set()

        audience = set(self._users.active_users_among(eligible)) & eligible
        logger.debug(
            "Activity %s: %d candidates, %d ignored, %d active recipients",
            activity.id,
            len(target_users | watch_users),
            len(ignore_users),
            len(audience),
        )
        return audience


__all__ = ["AudienceResolver"]
