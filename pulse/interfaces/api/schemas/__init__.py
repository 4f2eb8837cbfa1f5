from .auth import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from .notification import (
    MarkAllReadResponse,
    NotificationCreateRequest,
    NotificationMarkReadRequest,
    NotificationRead,
    NotificationResponse,
    UnreadNotificationsResponse,
)
from .user import UserRead

__all__ = [
    "LoginRequest",
    "MarkAllReadResponse",
    "NotificationCreateRequest",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "NotificationResponse",
    "RegisterRequest",
    "TokenResponse",
    "UnreadNotificationsResponse",
    "UserRead",
    "UserResponse",
]
