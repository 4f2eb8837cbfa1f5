"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import expression

from pulse.domain.entities import NOTIFICATION_TYPE_MAX_LENGTH
from pulse.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation for user notifications.

    ``seq`` is the storage key and records insertion order; ``id`` is the
    public identifier.
    """

    __tablename__ = "notification"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True)
    user_id = Column(String(36), ForeignKey("user.id"), nullable=False, index=True)
    type = Column(String(NOTIFICATION_TYPE_MAX_LENGTH), nullable=False)
    payload = Column(JSON, nullable=False, default=dict)
    read = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    created_at = Column(DateTime, nullable=False)


__all__ = ["NotificationModel"]
