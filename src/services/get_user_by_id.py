"""GetUserById use case."""

from domain.model.errors import NotFoundError
from domain.model.result import Outcome
from domain.model.user import UserDTO
from port.user_repository import UserRepository
from services.user_mapper import to_dto


class GetUserById:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def execute(self, user_id: str) -> Outcome[UserDTO]:
        """Look up one user.

        A malformed id is indistinguishable from an unknown one: the
        repository returns None for both, and both become NOT_FOUND.
        """
        user = self.repo.find_by_id(user_id)
        if user is None:
            return Outcome.from_error(NotFoundError("User not found"))
        return Outcome.success(to_dto(user))
