"""Realtime notification helpers for the infrastructure layer."""

from .gateway import ChannelConnection, ChannelMembershipGateway, ConnectionState
from .publisher import NotificationPublisher, serialize_notification

__all__ = [
    "ChannelConnection",
    "ChannelMembershipGateway",
    "ConnectionState",
    "NotificationPublisher",
    "serialize_notification",
]
