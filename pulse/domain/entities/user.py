"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

from .identity import Identity


@dataclass
class User:
    """Core attributes describing a registered user."""

    id: str | None
    name: str
    email: str
    password: str
    created_at: datetime | None = None

    def to_identity(self) -> Identity:
        """Return the identity claims that tokens issued for this user carry."""

        if self.id is None:
            raise ValueError("Cannot build an identity for an unsaved user")
        return Identity(id=self.id, name=self.name, email=self.email)
