from typing import Protocol, runtime_checkable

from domain.model.user import User


@runtime_checkable
class UserRepository(Protocol):
    """Protocol defining the interface for user persistence.

    Identifiers are opaque strings at this boundary; each adapter converts
    them to its own representation.
    """
    def create(self, user: User) -> User:
        """Persist a transient user. Return a new User carrying the assigned id."""
        ...

    def find_all(self) -> list[User]:
        """Return every persisted user."""
        ...

    def find_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return None if not found or the ID is malformed."""
        ...
