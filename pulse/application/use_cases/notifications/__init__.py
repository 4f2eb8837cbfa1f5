"""Notification use cases."""

from .service import NotificationService

__all__ = ["NotificationService"]
