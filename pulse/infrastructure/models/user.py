"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, DateTime, String

from pulse.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a registered user."""

    __tablename__ = "user"

    id = Column(String(36), primary_key=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False)


__all__ = ["UserModel"]
