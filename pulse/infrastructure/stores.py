"""Async store adapters running repository work in worker threads."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from anyio import to_thread
from sqlalchemy.orm import Session, sessionmaker

from pulse.domain.entities import Notification, User
from pulse.infrastructure.repositories import NotificationRepository, UserRepository

T = TypeVar("T")


class _SessionStore:
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    async def _run(self, work: Callable[[Session], T]) -> T:
        def unit_of_work() -> T:
            with self._session_factory() as session:
                return work(session)

        return await to_thread.run_sync(unit_of_work)


class SqlAlchemyUserStore(_SessionStore):
    """:class:`~pulse.application.ports.UserStore` backed by SQLAlchemy."""

    async def get(self, user_id: str) -> User | None:
        return await self._run(lambda session: UserRepository(session).get(user_id))

    async def get_by_email(self, email: str) -> User | None:
        return await self._run(lambda session: UserRepository(session).get_by_email(email))

    async def exists(self, user_id: str) -> bool:
        return await self._run(lambda session: UserRepository(session).exists(user_id))

    async def create(self, user: User) -> User:
        return await self._run(lambda session: UserRepository(session).create(user))


class SqlAlchemyNotificationStore(_SessionStore):
    """:class:`~pulse.application.ports.NotificationStore` backed by SQLAlchemy."""

    async def create(self, notification: Notification) -> Notification:
        return await self._run(
            lambda session: NotificationRepository(session).create(notification)
        )

    async def list_unread(self, user_id: str) -> list[Notification]:
        return await self._run(
            lambda session: list(NotificationRepository(session).list_unread_for_user(user_id))
        )

    async def mark_read(self, notification_id: str, *, user_id: str) -> Notification | None:
        return await self._run(
            lambda session: NotificationRepository(session).mark_as_read(
                notification_id, user_id=user_id
            )
        )

    async def mark_all_read(self, user_id: str) -> int:
        return await self._run(
            lambda session: NotificationRepository(session).mark_all_as_read(user_id)
        )


__all__ = ["SqlAlchemyNotificationStore", "SqlAlchemyUserStore"]
