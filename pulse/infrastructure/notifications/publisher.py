"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pulse.application.ports import DeliveryGateway
from pulse.domain.entities import Notification

logger = logging.getLogger(__name__)


class NotificationPublisher:
    """Serialize notifications and schedule their delivery without awaiting it."""

    def __init__(self, gateway: DeliveryGateway) -> None:
        self._gateway = gateway
        self._pending: set[asyncio.Task[Any]] = set()

    def dispatch(self, notification: Notification) -> None:
        """Schedule ``notification`` to be delivered to its owner."""

        message = {"type": "notification", "data": serialize_notification(notification)}
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._deliver(notification.user_id, message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def flush(self) -> None:
        """Wait until every scheduled delivery has finished."""

        while self._pending:
            await asyncio.wait(set(self._pending))

    async def _deliver(self, user_id: str, message: dict[str, Any]) -> None:
        try:
            delivered = await self._gateway.publish(user_id, message)
        except Exception:
            logger.exception("Realtime delivery to user %s failed", user_id)
            return
        logger.debug("Notification delivered to %s connection(s) of user %s", delivered, user_id)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the JSON representation used on the wire for ``notification``."""

    return {
        "id": notification.id,
        "userId": notification.user_id,
        "type": notification.type,
        "payload": notification.payload or {},
        "read": notification.read,
        "createdAt": notification.created_at.isoformat()
        if notification.created_at
        else None,
    }


__all__ = ["NotificationPublisher", "serialize_notification"]
