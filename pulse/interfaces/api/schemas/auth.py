"""Authentication related schemas."""

from pydantic import BaseModel

from .user import UserRead


class RegisterRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class TokenResponse(BaseModel):
    token: str


class UserResponse(BaseModel):
    user: UserRead
