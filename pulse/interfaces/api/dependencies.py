"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.requests import HTTPConnection
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from pulse.application.use_cases import NotificationService
from pulse.container import Container
from pulse.domain.entities import Identity

bearer_scheme = HTTPBearer(auto_error=False)


def get_container(connection: HTTPConnection) -> Container:
    """Return the components owned by the running application."""

    return connection.app.state.container


def get_notification_service(
    container: Container = Depends(get_container),
) -> NotificationService:
    return container.notification_service


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    container: Container = Depends(get_container),
) -> Identity:
    """Resolve the caller's identity from the ``Authorization: Bearer`` header.

    A missing or malformed header is a client error (400); a token that fails
    verification is 401.
    """

    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Token not present",
        )

    verified = container.tokens.verify(credentials.credentials)
    if not verified.ok:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=verified.error.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return verified.value
