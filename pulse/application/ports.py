"""Contracts the application layer requires from its collaborators."""

from __future__ import annotations

from typing import Any, Protocol

from pulse.domain.entities import Identity, Notification, User
from pulse.domain.outcome import Outcome


class DuplicateEmailError(Exception):
    """Raised by a :class:`UserStore` when the email is already registered."""


class UserStore(Protocol):
    """User persistence operations used by authentication and notifications."""

    async def get(self, user_id: str) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def exists(self, user_id: str) -> bool: ...

    async def create(self, user: User) -> User:
        """Persist ``user``; raises :class:`DuplicateEmailError` on a taken email."""
        ...


class NotificationStore(Protocol):
    """Notification persistence operations; each call is atomic."""

    async def create(self, notification: Notification) -> Notification: ...

    async def list_unread(self, user_id: str) -> list[Notification]: ...

    async def mark_read(self, notification_id: str, *, user_id: str) -> Notification | None: ...

    async def mark_all_read(self, user_id: str) -> int: ...


class PasswordVerifier(Protocol):
    """Opaque password hashing collaborator."""

    def hash(self, password: str) -> str: ...

    def verify(self, password: str, hashed_password: str) -> bool: ...


class TokenVerifier(Protocol):
    """Identity token operations shared by the HTTP and push channel paths."""

    def issue(self, identity: Identity) -> str: ...

    def verify(self, token: str | None) -> Outcome[Identity]: ...


class DeliveryGateway(Protocol):
    """Realtime delivery target for newly created notifications."""

    async def publish(self, user_id: str, message: dict[str, Any]) -> int: ...


__all__ = [
    "DeliveryGateway",
    "DuplicateEmailError",
    "NotificationStore",
    "PasswordVerifier",
    "TokenVerifier",
    "UserStore",
]
