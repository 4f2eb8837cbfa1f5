"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from .base import CamelModel


class NotificationCreateRequest(CamelModel):
    """Body of ``POST /notification``; missing fields are reported by the service."""

    type: str | None = None
    user_id: str | None = None
    payload: dict[str, Any] | None = None


class NotificationMarkReadRequest(CamelModel):
    notification_id: str | None = None


class NotificationRead(CamelModel):
    """Representation of a notification delivered to the client."""

    id: str
    user_id: str
    type: str
    payload: dict[str, Any] = Field(default_factory=dict)
    read: bool
    created_at: datetime | None = None


class NotificationResponse(CamelModel):
    notification: NotificationRead


class UnreadNotificationsResponse(CamelModel):
    unread_notifications: list[NotificationRead]
    length: int


class MarkAllReadResponse(CamelModel):
    updated_count: int


__all__ = [
    "MarkAllReadResponse",
    "NotificationCreateRequest",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "NotificationResponse",
    "UnreadNotificationsResponse",
]
