"""Per-user channel membership for notification websockets."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Any, DefaultDict, Set

from fastapi import WebSocket, status

from pulse.application.ports import TokenVerifier
from pulse.domain.entities import Identity
from pulse.domain.outcome import ErrorKind, Outcome

logger = logging.getLogger(__name__)


class ConnectionState(Enum):
    """Lifecycle of a single push connection."""

    CONNECTING = "connecting"
    AUTHENTICATING = "authenticating"
    JOINED = "joined"
    REJECTED = "rejected"
    DISCONNECTED = "disconnected"


@dataclass(eq=False)
class ChannelConnection:
    """A websocket together with the identity it authenticated as."""

    websocket: WebSocket
    state: ConnectionState = ConnectionState.CONNECTING
    identity: Identity | None = None

    @property
    def channel(self) -> str | None:
        return self.identity.id if self.identity else None


class ChannelMembershipGateway:
    """Authenticate websockets and group joined ones by user id.

    Several connections of the same user share one channel and all receive
    what is published to it.
    """

    def __init__(self, token_verifier: TokenVerifier) -> None:
        self._token_verifier = token_verifier
        self._channels: DefaultDict[str, Set[ChannelConnection]] = defaultdict(set)

    async def connect(
        self, websocket: WebSocket, token: str | None
    ) -> Outcome[ChannelConnection]:
        """Verify ``token`` and either join ``websocket`` or refuse it."""

        connection = ChannelConnection(websocket=websocket)
        connection.state = ConnectionState.AUTHENTICATING
        verified = self._token_verifier.verify(token)
        if not verified.ok:
            connection.state = ConnectionState.REJECTED
            logger.info("Rejected push connection: %s", verified.error.message)
            await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason="Unauthorized")
            return Outcome.failure(ErrorKind.UNAUTHENTICATED, verified.error.message)

        await websocket.accept()
        connection.identity = verified.value
        connection.state = ConnectionState.JOINED
        self._channels[connection.channel].add(connection)
        logger.debug("User %s joined its channel", connection.channel)
        return Outcome.success(connection)

    def disconnect(self, connection: ChannelConnection) -> None:
        """Remove ``connection`` from its channel; safe to call repeatedly."""

        user_id = connection.channel
        connection.state = ConnectionState.DISCONNECTED
        if user_id is None:
            return
        members = self._channels.get(user_id)
        if members is None:
            return
        members.discard(connection)
        if not members:
            self._channels.pop(user_id, None)
        logger.debug("User %s left its channel", user_id)

    def members(self, user_id: str) -> int:
        """Return how many connections are enrolled in ``user_id``'s channel."""

        return len(self._channels.get(user_id, ()))

    async def publish(self, user_id: str, message: dict[str, Any]) -> int:
        """Send ``message`` once to every member of ``user_id``'s channel.

        Members whose send fails are dropped. Returns the number of
        successful deliveries.
        """

        delivered = 0
        for connection in list(self._channels.get(user_id, ())):
            try:
                await connection.websocket.send_json(message)
            except Exception as exc:
                logger.warning("Dropping connection of user %s after failed send: %s", user_id, exc)
                self.disconnect(connection)
            else:
                delivered += 1
        return delivered


__all__ = ["ChannelConnection", "ChannelMembershipGateway", "ConnectionState"]
