"""GetAllUsers use case."""

from domain.model.result import Outcome
from domain.model.user import UserDTO
from port.user_repository import UserRepository
from services.user_mapper import to_dtos


class GetAllUsers:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def execute(self) -> Outcome[list[UserDTO]]:
        """Return every user as a DTO, in the order the repository yields them."""
        return Outcome.success(to_dtos(self.repo.find_all()))
