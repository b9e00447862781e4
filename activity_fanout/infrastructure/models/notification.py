"""SQLAlchemy models for persisted notifications."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, UniqueConstraint
from sqlalchemy.orm import relationship

from activity_fanout.domain.entities import NOTIFICATION_STATUS_UNREAD
from activity_fanout.infrastructure.database import Base

notification_activity_table = Table(
    "notification_activity",
    Base.metadata,
    Column(
        "notification_id",
        Integer,
        ForeignKey("notification.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "activity_id",
        Integer,
        ForeignKey("activity.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


class NotificationModel(Base):
    """Database representation of a consolidated user notification."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    target_model = Column(String(50), nullable=False)
    target_id = Column(Integer, nullable=False)
    action = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False, default=NOTIFICATION_STATUS_UNREAD)
    created_at = Column(DateTime(), nullable=False)

    activities = relationship("ActivityModel", secondary=notification_activity_table)

    __table_args__ = (
        UniqueConstraint(
            "user_id", "target_id", "action", name="uq_notification_user_target_action"
        ),
    )


__all__ = ["NotificationModel", "notification_activity_table"]
