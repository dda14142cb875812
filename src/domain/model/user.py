# domain/model/user.py

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone

DEFAULT_ROLE = 'user'
ADMIN_ROLE = 'admin'


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class User:
    """Domain model representing a user.

    A user with ``id=None`` is transient; the repository assigns the id on
    ``create`` and hands back a new instance. Instances are never mutated,
    use ``dataclasses.replace`` to derive a changed copy.

    No validation happens here: use cases check input before construction,
    and email uniqueness belongs to the persistence layer.
    """
    id: str | None
    name: str | None
    email: str | None
    role: str | None = DEFAULT_ROLE
    created_at: datetime | None = field(default_factory=_utcnow)

    def __post_init__(self):
        # Rehydrated records may carry no timestamp.
        if self.created_at is None:
            object.__setattr__(self, 'created_at', _utcnow())

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


@dataclass(frozen=True)
class UserDTO:
    """External projection of a User (Value Object). Carries no created_at."""
    id: str | None
    name: str | None
    email: str | None
    role: str | None

    def to_dict(self) -> dict:
        return asdict(self)
