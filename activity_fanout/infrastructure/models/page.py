"""SQLAlchemy models for pages and page comments."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from activity_fanout.infrastructure.database import Base


class PageModel(Base):
    __tablename__ = "page"

    id = Column(Integer, primary_key=True, index=True)
    path = Column(String(255), nullable=False, unique=True)
    creator_id = Column(Integer, ForeignKey("user.id"), nullable=True, index=True)

    comments = relationship(
        "CommentModel",
        back_populates="page",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class CommentModel(Base):
    __tablename__ = "comment"

    id = Column(Integer, primary_key=True, index=True)
    page_id = Column(
        Integer,
        ForeignKey("page.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    creator_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    comment = Column(Text, nullable=False)
    created_at = Column(DateTime(), nullable=False)

    page = relationship("PageModel", back_populates="comments")


__all__ = ["CommentModel", "PageModel"]
