"""Domain entity representing an authenticated caller."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Identity claims recovered from a verified token."""

    id: str
    name: str
    email: str


__all__ = ["Identity"]
