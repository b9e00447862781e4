"""Persistence helpers for pages and their comments."""

from __future__ import annotations

from sqlalchemy.orm import Session

from activity_fanout.domain.entities import Comment, Page
from activity_fanout.infrastructure.models import CommentModel, PageModel
from activity_fanout.utils import (
    from_storage_datetime,
    now_in_app_timezone,
    to_storage_datetime,
)


class PageRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, page_id: int) -> Page | None:
        """Return the page with the distinct creators of its comments."""

        model = self.session.get(PageModel, page_id)
        if model is None:
            return None
        commenter_ids = {
            creator_id
            for (creator_id,) in self.session.query(CommentModel.creator_id)
            .filter(CommentModel.page_id == page_id)
            .distinct()
            .all()
        }
        return Page(
            id=model.id,
            path=model.path,
            creator_id=model.creator_id,
            commenter_ids=commenter_ids,
        )

    def create(self, page: Page) -> Page:
        model = PageModel(id=page.id, path=page.path, creator_id=page.creator_id)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return Page(id=model.id, path=model.path, creator_id=model.creator_id)

    def add_comment(self, comment: Comment) -> Comment:
        model = CommentModel(
            page_id=comment.page_id,
            creator_id=comment.creator_id,
            comment=comment.comment,
            created_at=to_storage_datetime(comment.created_at or now_in_app_timezone()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return Comment(
            id=model.id,
            page_id=model.page_id,
            creator_id=model.creator_id,
            comment=model.comment,
            created_at=from_storage_datetime(model.created_at),
        )


__all__ = ["PageRepository"]
