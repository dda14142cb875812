"""CreateUser use case: validate input and persist a new user.

Pure business logic with no HTTP dependencies. Domain errors raised while
running are returned as a failed Outcome; anything else (store outages)
propagates to the caller.
"""

from collections.abc import Mapping

from domain.model.errors import DomainError, ValidationError
from domain.model.result import Outcome
from domain.model.user import DEFAULT_ROLE, User, UserDTO
from port.user_repository import UserRepository
from services.user_mapper import to_dto


def _clean(value, message: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(message)
    return value.strip() or None


def _validate(data: Mapping) -> tuple[str, str, str]:
    name = _clean(data.get('name'), "Name and email must be strings")
    email = _clean(data.get('email'), "Name and email must be strings")
    if not name or not email:
        raise ValidationError("Name and email are required")

    role = _clean(data.get('role'), "Role must be a string") or DEFAULT_ROLE
    return name, email, role


class CreateUser:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def execute(self, data: Mapping) -> Outcome[UserDTO]:
        """Create a user from already-deserialized input.

        Fails with VALIDATION when name or email is missing or blank (nothing
        is persisted), and with CONFLICT when the store rejects the email.
        """
        try:
            name, email, role = _validate(data)
            created = self.repo.create(User(id=None, name=name, email=email, role=role))
        except DomainError as e:
            return Outcome.from_error(e)

        return Outcome.success(to_dto(created))
