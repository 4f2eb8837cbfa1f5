"""Aggregate application use cases."""

from .notifications import NotificationService
from .users import get_user, login_user, register_user

__all__ = [
    "NotificationService",
    "get_user",
    "login_user",
    "register_user",
]
