"""Use case for exchanging credentials for an identity token."""

import logging

from pulse.application.ports import PasswordVerifier, TokenVerifier, UserStore
from pulse.domain.outcome import Outcome, unauthenticated, validation_error

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid credentials"


async def login_user(
    users: UserStore,
    passwords: PasswordVerifier,
    tokens: TokenVerifier,
    *,
    email: str | None,
    password: str | None,
) -> Outcome[str]:
    """Return a signed token for the user when the credentials match."""

    if not email or not password:
        return validation_error("Required fields are missing")

    user = await users.get_by_email(email.strip().lower())
    # Unknown emails and wrong passwords share one answer.
    if user is None or not passwords.verify(password, user.password):
        logger.info("Failed login attempt for %s", email)
        return unauthenticated(_INVALID_CREDENTIALS)

    return Outcome.success(tokens.issue(user.to_identity()))
