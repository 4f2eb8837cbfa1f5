"""Endpoints and websocket handler for user notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from fastapi.security.utils import get_authorization_scheme_param

from pulse.application.use_cases import NotificationService
from pulse.container import Container
from pulse.domain.entities import Identity, Notification
from pulse.infrastructure.notifications import serialize_notification
from pulse.interfaces.api.dependencies import (
    get_container,
    get_current_identity,
    get_notification_service,
)
from pulse.interfaces.api.routes_helpers import unwrap_or_raise
from pulse.interfaces.api.schemas import (
    MarkAllReadResponse,
    NotificationCreateRequest,
    NotificationMarkReadRequest,
    NotificationRead,
    NotificationResponse,
    UnreadNotificationsResponse,
)

router = APIRouter(prefix="/notification", tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id,
        user_id=notification.user_id,
        type=notification.type,
        payload=notification.payload or {},
        read=notification.read,
        created_at=notification.created_at,
    )


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    payload: NotificationCreateRequest,
    identity: Identity = Depends(get_current_identity),
    service: NotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    """Create a notification for ``userId`` on behalf of the caller."""

    outcome = await service.create(
        identity,
        type=payload.type,
        user_id=payload.user_id,
        payload=payload.payload,
    )
    return NotificationResponse(notification=_notification_to_schema(unwrap_or_raise(outcome)))


@router.get("", response_model=UnreadNotificationsResponse)
async def list_unread_notifications(
    identity: Identity = Depends(get_current_identity),
    service: NotificationService = Depends(get_notification_service),
) -> UnreadNotificationsResponse:
    """Return the caller's unread notifications in creation order."""

    unread = unwrap_or_raise(await service.list_unread(identity.id))
    return UnreadNotificationsResponse(
        unread_notifications=[_notification_to_schema(n) for n in unread.notifications],
        length=unread.count,
    )


@router.patch("", response_model=NotificationResponse)
async def mark_notification_read(
    payload: NotificationMarkReadRequest,
    identity: Identity = Depends(get_current_identity),
    service: NotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    outcome = await service.mark_read(payload.notification_id, identity.id)
    return NotificationResponse(notification=_notification_to_schema(unwrap_or_raise(outcome)))


@router.patch("/all-notification", response_model=MarkAllReadResponse)
async def mark_all_notifications_read(
    identity: Identity = Depends(get_current_identity),
    service: NotificationService = Depends(get_notification_service),
) -> MarkAllReadResponse:
    updated = unwrap_or_raise(await service.mark_all_read(identity.id))
    return MarkAllReadResponse(updated_count=updated)


def _handshake_token(websocket: WebSocket) -> str | None:
    token = websocket.query_params.get("token")
    if token:
        return token
    scheme, credentials = get_authorization_scheme_param(websocket.headers.get("Authorization"))
    if scheme.lower() == "bearer" and credentials:
        return credentials
    return None


@router.websocket("/ws")
async def notifications_websocket(
    websocket: WebSocket,
    container: Container = Depends(get_container),
) -> None:
    """Websocket endpoint that streams notifications to the authenticated user."""

    gateway = container.gateway
    service = container.notification_service

    joined = await gateway.connect(websocket, _handshake_token(websocket))
    if not joined.ok:
        return

    connection = joined.value
    identity = connection.identity
    try:
        pending = await service.list_unread(identity.id)
        if pending.ok and pending.value.count:
            await websocket.send_json(
                {
                    "type": "init",
                    "data": [serialize_notification(n) for n in pending.value.notifications],
                }
            )
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except Exception as exc:
                logger.debug("Ignoring unreadable frame from user %s: %r", identity.id, exc)
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "ack":
                ids = message.get("ids", [])
                if isinstance(ids, list):
                    for notification_id in ids:
                        if isinstance(notification_id, str):
                            await service.mark_read(notification_id, identity.id)
                continue
    except WebSocketDisconnect:
        pass
    finally:
        gateway.disconnect(connection)
