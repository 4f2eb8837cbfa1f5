"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NOTIFICATION_TYPE_MAX_LENGTH = 50


@dataclass
class Notification:
    """Message addressed to a single owning user."""

    id: str | None
    user_id: str
    type: str
    payload: dict[str, Any] = field(default_factory=dict)
    read: bool = False
    created_at: datetime | None = None


@dataclass
class UnreadNotifications:
    """Unread notifications of one user in insertion order."""

    notifications: list[Notification]

    @property
    def count(self) -> int:
        return len(self.notifications)


__all__ = ["NOTIFICATION_TYPE_MAX_LENGTH", "Notification", "UnreadNotifications"]
