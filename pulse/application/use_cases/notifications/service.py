"""Notification lifecycle: creation, unread accounting and read-marking."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pulse.application.ports import DeliveryGateway, NotificationStore, UserStore
from pulse.domain.entities import (
    NOTIFICATION_TYPE_MAX_LENGTH,
    Identity,
    Notification,
    UnreadNotifications,
)
from pulse.domain.outcome import Outcome, not_found, validation_error
from pulse.infrastructure.notifications import NotificationPublisher
from pulse.utils import utc_now

logger = logging.getLogger(__name__)

_MISSING_FIELDS = "Required fields are missing"


class NotificationService:
    """Apply notification rules on behalf of an authenticated identity.

    Every read-marking query carries the owner in its predicate, so a
    notification owned by someone else looks exactly like a missing one.
    """

    def __init__(
        self,
        *,
        notifications: NotificationStore,
        users: UserStore,
        gateway: DeliveryGateway,
    ) -> None:
        self._notifications = notifications
        self._users = users
        self._publisher = NotificationPublisher(gateway)

    @property
    def publisher(self) -> NotificationPublisher:
        return self._publisher

    async def create(
        self,
        actor: Identity,
        *,
        type: str | None,
        user_id: str | None,
        payload: Mapping[str, Any] | None,
    ) -> Outcome[Notification]:
        """Persist an unread notification for ``user_id`` and push it."""

        if not type or not user_id or payload is None:
            return validation_error(_MISSING_FIELDS)
        if not isinstance(payload, Mapping):
            return validation_error("Payload must be an object")
        if len(type) > NOTIFICATION_TYPE_MAX_LENGTH:
            return validation_error(
                f"Type must be at most {NOTIFICATION_TYPE_MAX_LENGTH} characters"
            )

        payload = _with_actor(payload, actor.id)
        if not payload["actor"].get("id"):
            return validation_error("Actor id Required")

        if not await self._users.exists(user_id):
            return not_found("User does not exist")

        notification = await self._notifications.create(
            Notification(
                id=None,
                user_id=user_id,
                type=type,
                payload=payload,
                read=False,
                created_at=utc_now(),
            )
        )
        logger.info(
            "Notification %s (%s) created for user %s by %s",
            notification.id,
            notification.type,
            notification.user_id,
            actor.id,
        )
        self._publisher.dispatch(notification)
        return Outcome.success(notification)

    async def list_unread(self, user_id: str | None) -> Outcome[UnreadNotifications]:
        if not user_id:
            return validation_error(_MISSING_FIELDS)
        if not await self._users.exists(user_id):
            return not_found("User does not exist")

        notifications = await self._notifications.list_unread(user_id)
        return Outcome.success(UnreadNotifications(notifications=list(notifications)))

    async def mark_read(
        self, notification_id: str | None, user_id: str
    ) -> Outcome[Notification]:
        """Mark one of ``user_id``'s notifications read; repeating it is a no-op."""

        if not notification_id:
            return validation_error(_MISSING_FIELDS)

        notification = await self._notifications.mark_read(notification_id, user_id=user_id)
        if notification is None:
            return not_found("Notification not found")
        return Outcome.success(notification)

    async def mark_all_read(self, user_id: str | None) -> Outcome[int]:
        """Mark all of ``user_id``'s notifications read.

        The count covers notifications that were unread when the update ran.
        """

        if not user_id:
            return validation_error(_MISSING_FIELDS)

        updated = await self._notifications.mark_all_read(user_id)
        return Outcome.success(updated)


def _with_actor(payload: Mapping[str, Any], actor_id: str) -> dict[str, Any]:
    """Return a copy of ``payload`` whose ``actor.id`` is ``actor_id``."""

    actor = payload.get("actor")
    actor = dict(actor) if isinstance(actor, Mapping) else {}
    actor["id"] = actor_id
    return {**payload, "actor": actor}


__all__ = ["NotificationService"]
