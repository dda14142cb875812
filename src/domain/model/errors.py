"""Domain-level exceptions and the error kinds they map to.

Use cases raise these errors internally and hand them back as a typed
``Outcome`` failure. Controllers branch on ``ErrorKind`` to choose the HTTP
status code, never on the error message.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed operation."""
    VALIDATION = 'validation'
    NOT_FOUND = 'not_found'
    CONFLICT = 'conflict'
    UNEXPECTED = 'unexpected'


class DomainError(Exception):
    """Base class for all domain errors."""
    kind = ErrorKind.UNEXPECTED


class ValidationError(DomainError):
    """Input violates a business validation rule."""
    kind = ErrorKind.VALIDATION


class NotFoundError(DomainError):
    """Requested entity does not exist."""
    kind = ErrorKind.NOT_FOUND


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""
    kind = ErrorKind.CONFLICT
