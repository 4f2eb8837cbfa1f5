"""Schemas describing user payloads."""

from datetime import datetime

from .base import CamelModel


class UserRead(CamelModel):
    """Public projection of a user; never carries the password hash."""

    id: str
    name: str
    email: str
    created_at: datetime | None = None
