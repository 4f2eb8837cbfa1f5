"""Security helpers for hashing passwords and signing identity tokens."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from pulse.config import Settings
from pulse.domain.entities import Identity
from pulse.domain.outcome import Outcome, unauthenticated
from pulse.utils import utc_now

logger = logging.getLogger(__name__)

TOKEN_ALGORITHM = "HS256"
_IDENTITY_CLAIMS = ("id", "name", "email")


class PasswordHasher:
    """pbkdf2_sha256 hashing through a single passlib context."""

    def __init__(self, rounds: int = 310_000) -> None:
        self._context = CryptContext(
            schemes=["pbkdf2_sha256"],
            deprecated="auto",
            pbkdf2_sha256__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        return self._context.verify(password, hashed_password)


class IdentityTokenService:
    """Mint and verify signed tokens carrying ``{id, name, email}``.

    Verification never touches storage: the identity is exactly what was
    encoded at issue time.
    """

    def __init__(
        self,
        secret_key: str,
        *,
        lifetime: timedelta,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if not secret_key:
            raise ValueError("A signing secret is required")
        self._secret_key = secret_key
        self._lifetime = lifetime
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings) -> "IdentityTokenService":
        return cls(
            settings.secret_key,
            lifetime=timedelta(minutes=settings.access_token_expire_minutes),
        )

    def issue(self, identity: Identity) -> str:
        issued_at = self._clock()
        claims = {
            "sub": identity.id,
            "id": identity.id,
            "name": identity.name,
            "email": identity.email,
            "iat": issued_at,
            "exp": issued_at + self._lifetime,
        }
        return jwt.encode(claims, self._secret_key, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: str | None) -> Outcome[Identity]:
        if not token:
            return unauthenticated("Token not present")

        try:
            claims = jwt.decode(token, self._secret_key, algorithms=[TOKEN_ALGORITHM])
        except ExpiredSignatureError:
            return unauthenticated("Invalid or expired token")
        except JWTError as exc:
            logger.debug("Rejected identity token: %s", exc)
            return unauthenticated("Invalid or expired token")

        values = [claims.get(name) for name in _IDENTITY_CLAIMS]
        if not all(isinstance(value, str) and value for value in values):
            return unauthenticated("Invalid or expired token")

        identity_id, name, email = values
        return Outcome.success(Identity(id=identity_id, name=name, email=email))


__all__ = ["IdentityTokenService", "PasswordHasher", "TOKEN_ALGORITHM"]
