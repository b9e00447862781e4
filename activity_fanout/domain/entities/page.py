"""Domain entities for wiki pages and their comments."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Page:
    """A wiki page as seen by the notification core."""

    id: int | None
    path: str
    creator_id: int | None
    commenter_ids: set[int] = field(default_factory=set)

    def interested_parties(self) -> set[int]:
        """Return users with a stake in the page: its creator and its commenters."""

        parties = set(self.commenter_ids)
        if self.creator_id is not None:
            parties.add(self.creator_id)
        return parties


@dataclass
class Comment:
    id: int | None
    page_id: int
    creator_id: int
    comment: str
    created_at: datetime | None = None


__all__ = ["Comment", "Page"]
