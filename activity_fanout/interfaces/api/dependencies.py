"""FastAPI dependency utilities."""

from activity_fanout.application.activity_store import ActivityStore
from activity_fanout.application.services import get_activity_services


def get_activity_store() -> ActivityStore:
    """Return the activity store wired to notification fan-out."""

    return get_activity_services().store
