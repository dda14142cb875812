"""Tagged result returned by every use case."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from domain.model.errors import DomainError, ErrorKind

T = TypeVar('T')


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a successful value or a failure with a kind and message.

    Exactly one side is populated: ``error_kind is None`` means success.
    """
    value: T | None = None
    error_kind: ErrorKind | None = None
    message: str = ''

    @property
    def is_ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> Outcome[T]:
        return cls(error_kind=kind, message=message)

    @classmethod
    def from_error(cls, error: DomainError) -> Outcome[T]:
        """Convert a raised domain error into a failed outcome."""
        return cls.failure(error.kind, str(error))
