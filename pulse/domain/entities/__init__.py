"""Domain entities exposed by the application."""

from .identity import Identity
from .notification import NOTIFICATION_TYPE_MAX_LENGTH, Notification, UnreadNotifications
from .user import User

__all__ = [
    "NOTIFICATION_TYPE_MAX_LENGTH",
    "Identity",
    "Notification",
    "UnreadNotifications",
    "User",
]
