"""Persistence layer for user data."""

from __future__ import annotations

import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pulse.application.ports import DuplicateEmailError
from pulse.domain.entities import User
from pulse.infrastructure.models import UserModel
from pulse.utils import ensure_utc, to_naive_utc, utc_now


class UserRepository:
    """Provide lookup and creation for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self.session.query(UserModel).filter_by(email=email).first()
        return self._to_entity(model) if model else None

    def exists(self, user_id: str) -> bool:
        query = self.session.query(UserModel.id).filter(UserModel.id == user_id)
        return self.session.query(query.exists()).scalar()

    def create(self, user: User) -> User:
        model = UserModel(
            id=user.id or str(uuid.uuid4()),
            name=user.name,
            email=user.email,
            password=user.password,
            created_at=to_naive_utc(user.created_at or utc_now()),
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise DuplicateEmailError(user.email) from exc
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["UserRepository"]
