"""Explicit success/failure values returned by core operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Categories of expected failures surfaced to callers."""

    VALIDATION = auto()
    UNAUTHENTICATED = auto()
    NOT_FOUND = auto()
    CONFLICT = auto()


@dataclass(frozen=True)
class ServiceError:
    """Failure description carried by an unsuccessful :class:`Outcome`."""

    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either the value produced by an operation or the reason it failed."""

    value: T | None = None
    error: ServiceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Outcome[T]":
        return cls(error=ServiceError(kind=kind, message=message))


def validation_error(message: str) -> Outcome:
    return Outcome.failure(ErrorKind.VALIDATION, message)


def unauthenticated(message: str) -> Outcome:
    return Outcome.failure(ErrorKind.UNAUTHENTICATED, message)


def not_found(message: str) -> Outcome:
    return Outcome.failure(ErrorKind.NOT_FOUND, message)


def conflict(message: str) -> Outcome:
    return Outcome.failure(ErrorKind.CONFLICT, message)


__all__ = [
    "ErrorKind",
    "Outcome",
    "ServiceError",
    "conflict",
    "not_found",
    "unauthenticated",
    "validation_error",
]
