"""Endpoints for registration, login and profile lookup."""

from fastapi import APIRouter, Depends, HTTPException, status

from pulse.application.use_cases import get_user, login_user, register_user
from pulse.container import Container
from pulse.domain.entities import Identity, User
from pulse.interfaces.api.dependencies import get_container, get_current_identity
from pulse.interfaces.api.routes_helpers import unwrap_or_raise
from pulse.interfaces.api.schemas import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserRead,
    UserResponse,
)

router = APIRouter(prefix="/auth", tags=["auth"])


def _user_to_schema(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
    )


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    container: Container = Depends(get_container),
) -> UserResponse:
    """Create an account; the email must not be registered yet."""

    outcome = await register_user(
        container.users,
        container.passwords,
        name=payload.name,
        email=payload.email,
        password=payload.password,
    )
    return UserResponse(user=_user_to_schema(unwrap_or_raise(outcome)))


@router.post("/login", response_model=TokenResponse)
async def login(
    payload: LoginRequest,
    container: Container = Depends(get_container),
) -> TokenResponse:
    """Exchange email and password for an identity token."""

    outcome = await login_user(
        container.users,
        container.passwords,
        container.tokens,
        email=payload.email,
        password=payload.password,
    )
    return TokenResponse(token=unwrap_or_raise(outcome))


@router.get("/{user_id}", response_model=UserResponse)
async def read_user(
    user_id: str,
    identity: Identity = Depends(get_current_identity),
    container: Container = Depends(get_container),
) -> UserResponse:
    """Return the caller's own profile; other ids are reported as missing."""

    if user_id != identity.id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User does not exist")

    user = unwrap_or_raise(await get_user(container.users, identity.id))
    return UserResponse(user=_user_to_schema(user))
