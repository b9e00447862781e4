"""SQLAlchemy model for the activity log."""

from sqlalchemy import Column, DateTime, Index, Integer, String, UniqueConstraint

from activity_fanout.infrastructure.database import Base


class ActivityModel(Base):
    """Database representation of an immutable activity record."""

    __tablename__ = "activity"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    target_model = Column(String(50), nullable=False)
    target_id = Column(Integer, nullable=False)
    action = Column(String(50), nullable=False)
    event_id = Column(Integer, nullable=True)
    event_model = Column(String(50), nullable=True)
    created_at = Column(DateTime(), nullable=False)

    __table_args__ = (
        Index("ix_activity_target_action", "target_id", "action"),
        UniqueConstraint(
            "user_id",
            "target_id",
            "action",
            "created_at",
            name="uq_activity_user_target_action_created_at",
        ),
    )


__all__ = ["ActivityModel"]
