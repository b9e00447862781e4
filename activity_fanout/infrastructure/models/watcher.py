"""SQLAlchemy model for watch/ignore subscriptions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint

from activity_fanout.infrastructure.database import Base


class WatcherModel(Base):
    """One row per user and target holding the user's watch status."""

    __tablename__ = "watcher"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    target_id = Column(Integer, nullable=False, index=True)
    status = Column(String(20), nullable=False)
    created_at = Column(DateTime(), nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "target_id", name="uq_watcher_user_target"),
    )


__all__ = ["WatcherModel"]
