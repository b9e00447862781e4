"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, Integer, String

from activity_fanout.domain.entities import USER_STATUS_ACTIVE
from activity_fanout.infrastructure.database import Base


class UserModel(Base):
    """Database representation of the fields the activity core reads from users."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    email = Column(String(120), nullable=False, index=True)
    status = Column(Integer, nullable=False, default=USER_STATUS_ACTIVE, index=True)


__all__ = ["UserModel"]
