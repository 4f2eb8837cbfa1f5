"""Persistence helpers for notification entities."""

from __future__ import annotations

import uuid
from collections.abc import Sequence

from sqlalchemy.orm import Session

from pulse.domain.entities import Notification
from pulse.infrastructure.models import NotificationModel
from pulse.utils import ensure_utc, to_naive_utc, utc_now


class NotificationRepository:
    """Provide the queries the notification service relies on.

    Every write commits on its own, so each call is one transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            id=notification.id or str(uuid.uuid4()),
            user_id=notification.user_id,
            type=notification.type,
            payload=notification.payload or {},
            read=False,
            created_at=to_naive_utc(notification.created_at or utc_now()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_unread_for_user(self, user_id: str) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.read.is_(False))
            .order_by(NotificationModel.seq.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def mark_as_read(self, notification_id: str, *, user_id: str) -> Notification | None:
        """Mark one notification read when it belongs to ``user_id``.

        Returns ``None`` when nothing matched the id and owner together.
        """

        ownership = (
            NotificationModel.id == notification_id,
            NotificationModel.user_id == user_id,
        )
        matched = (
            self.session.query(NotificationModel)
            .filter(*ownership)
            .update({NotificationModel.read: True}, synchronize_session=False)
        )
        self.session.commit()
        if not matched:
            return None
        model = self.session.query(NotificationModel).filter(*ownership).one()
        return self._to_entity(model)

    def mark_all_as_read(self, user_id: str) -> int:
        """Mark every notification of ``user_id`` read and return how many changed."""

        updated = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.read.is_(False))
            .update({NotificationModel.read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            payload=dict(model.payload or {}),
            read=bool(model.read),
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["NotificationRepository"]
