"""Domain entity describing one recorded user action."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Activity:
    """Immutable log entry of a user acting on a target.

    ``target_model`` names the kind of entity ``target_id`` points to and
    ``event_model`` does the same for the optional ``event_id`` (for example
    the comment that produced a ``COMMENT`` activity).
    """

    id: int
    user_id: int
    target_model: str
    target_id: int
    action: str
    created_at: datetime
    event_id: int | None = None
    event_model: str | None = None


__all__ = ["Activity"]
