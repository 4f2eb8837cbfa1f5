"""Process-wide components wired together for one application instance."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from pulse.application.use_cases import NotificationService
from pulse.config import Settings
from pulse.infrastructure.database import create_database_engine, create_session_factory
from pulse.infrastructure.notifications import ChannelMembershipGateway
from pulse.infrastructure.security import IdentityTokenService, PasswordHasher
from pulse.infrastructure.stores import SqlAlchemyNotificationStore, SqlAlchemyUserStore


@dataclass
class Container:
    """Owns the single gateway, token service and stores of the process."""

    settings: Settings
    engine: Engine
    session_factory: sessionmaker[Session]
    users: SqlAlchemyUserStore
    notifications: SqlAlchemyNotificationStore
    passwords: PasswordHasher
    tokens: IdentityTokenService
    gateway: ChannelMembershipGateway
    notification_service: NotificationService

    @classmethod
    def build(cls, settings: Settings) -> "Container":
        engine = create_database_engine(settings.database_url)
        session_factory = create_session_factory(engine)
        users = SqlAlchemyUserStore(session_factory)
        notifications = SqlAlchemyNotificationStore(session_factory)
        tokens = IdentityTokenService.from_settings(settings)
        gateway = ChannelMembershipGateway(tokens)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=session_factory,
            users=users,
            notifications=notifications,
            passwords=PasswordHasher(rounds=settings.password_hash_rounds),
            tokens=tokens,
            gateway=gateway,
            notification_service=NotificationService(
                notifications=notifications,
                users=users,
                gateway=gateway,
            ),
        )


__all__ = ["Container"]
