"""Exceptions raised by the activity log and its collaborators."""

from __future__ import annotations


class ActivityError(Exception):
    """Base class for activity related failures."""


class ValidationError(ActivityError, ValueError):
    """Raised when activity parameters are missing or not registered."""


class ConflictError(ValidationError):
    """Raised when an identical activity was already recorded at the same instant."""


class NotFoundError(ActivityError, LookupError):
    """Raised by target loaders when the requested entity does not exist."""


class TargetNotFoundError(NotFoundError):
    """Raised when the target of an activity cannot be loaded."""

    def __init__(self, target_model: str, target_id: object) -> None:
        super().__init__(f"{target_model} with id {target_id} not found")
        self.target_model = target_model
        self.target_id = target_id


__all__ = [
    "ActivityError",
    "ConflictError",
    "NotFoundError",
    "TargetNotFoundError",
    "ValidationError",
]
