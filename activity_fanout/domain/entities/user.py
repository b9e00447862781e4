"""Domain entity representing a user."""

from dataclasses import dataclass

USER_STATUS_REGISTERED = 1
USER_STATUS_ACTIVE = 2
USER_STATUS_SUSPENDED = 3
USER_STATUS_DELETED = 4
USER_STATUS_INVITED = 5


@dataclass
class User:
    """Attributes of an account that can act on or be notified about pages."""

    id: int | None
    name: str
    email: str
    status: int = USER_STATUS_ACTIVE


__all__ = [
    "USER_STATUS_ACTIVE",
    "USER_STATUS_DELETED",
    "USER_STATUS_INVITED",
    "USER_STATUS_REGISTERED",
    "USER_STATUS_SUSPENDED",
    "User",
]
