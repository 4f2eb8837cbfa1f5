"""Use case for retrieving a single user."""

from pulse.application.ports import UserStore
from pulse.domain.entities import User
from pulse.domain.outcome import Outcome, not_found, validation_error


async def get_user(users: UserStore, user_id: str | None) -> Outcome[User]:
    """Return the requested user or a ``NOT_FOUND`` outcome."""

    if not user_id:
        return validation_error("Id cannot be null")

    user = await users.get(user_id)
    if user is None:
        return not_found("User does not exist")
    return Outcome.success(user)
