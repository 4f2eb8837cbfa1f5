"""Use case for registering users."""

import logging

from pulse.application.ports import DuplicateEmailError, PasswordVerifier, UserStore
from pulse.domain.entities import User
from pulse.domain.outcome import Outcome, conflict, validation_error
from pulse.utils import utc_now

from .validators import normalize_email

logger = logging.getLogger(__name__)

_DUPLICATE_EMAIL = "User already exists"


async def register_user(
    users: UserStore,
    passwords: PasswordVerifier,
    *,
    name: str | None,
    email: str | None,
    password: str | None,
) -> Outcome[User]:
    """Create a new user ensuring unique email addresses."""

    # Tokens carry the name, so a blank one could never be verified.
    name = (name or "").strip()
    if not name or not email or not password:
        return validation_error("Required fields are missing")

    try:
        email = normalize_email(email)
    except ValueError as exc:
        return validation_error(str(exc))

    if await users.get_by_email(email):
        return conflict(_DUPLICATE_EMAIL)

    try:
        user = await users.create(
            User(
                id=None,
                name=name,
                email=email,
                password=passwords.hash(password),
                created_at=utc_now(),
            )
        )
    except DuplicateEmailError:
        # Another registration for the same email committed first.
        return conflict(_DUPLICATE_EMAIL)

    logger.info("Registered user %s", user.id)
    return Outcome.success(user)
