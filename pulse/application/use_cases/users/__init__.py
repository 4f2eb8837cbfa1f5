"""Use cases for managing users."""

from .get_user import get_user
from .login_user import login_user
from .register_user import register_user

__all__ = [
    "get_user",
    "login_user",
    "register_user",
]
