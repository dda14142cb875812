"""Stateless conversions between User entities, DTOs and raw records."""

from collections.abc import Iterable, Mapping

from domain.model.user import User, UserDTO


def to_dto(user: User) -> UserDTO:
    """Project an entity onto its external shape (created_at stays inside)."""
    return UserDTO(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
    )


def to_dtos(users: Iterable[User]) -> list[UserDTO]:
    return [to_dto(user) for user in users]


def to_entity(data: Mapping) -> User:
    """Rehydrate a User from an arbitrary record.

    Missing fields are left as None rather than rejected; a missing timestamp
    falls back to the entity's default. Accepts ``created_at`` or ``createdAt``.
    """
    raw_id = data.get('id')
    return User(
        id=str(raw_id) if raw_id is not None else None,
        name=data.get('name'),
        email=data.get('email'),
        role=data.get('role'),
        created_at=data.get('created_at') or data.get('createdAt'),
    )
