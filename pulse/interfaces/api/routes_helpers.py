"""Helper utilities shared across API route handlers."""

from typing import TypeVar

from fastapi import HTTPException, status

from pulse.domain.outcome import ErrorKind, Outcome

T = TypeVar("T")

_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}


def unwrap_or_raise(outcome: Outcome[T]) -> T:
    """Return the outcome's value or raise the matching ``HTTPException``."""

    if outcome.ok:
        return outcome.value

    error = outcome.error
    headers = None
    if error.kind is ErrorKind.UNAUTHENTICATED:
        headers = {"WWW-Authenticate": "Bearer"}
    raise HTTPException(
        status_code=_STATUS_BY_KIND[error.kind],
        detail=error.message,
        headers=headers,
    )
