"""In-memory implementation of UserRepository.

Not for production: records live only as long as the instance, and
duplicate emails are accepted since there is no unique index to reject them.
"""

from logging import getLogger

from domain.model.user import User

logger = getLogger(__name__)


class InMemoryUserRepository:
    def __init__(self):
        self.records: list[dict] = []
        self._next_id = 1

    def _to_domain(self, record: dict) -> User:
        """Convert a stored record to a User, encoding the integer id as a string."""
        return User(
            id=str(record['id']),
            name=record['name'],
            email=record['email'],
            role=record['role'],
            created_at=record['created_at'],
        )

    # ── write operations ─────────────────────────────────────

    def create(self, user: User) -> User:
        record = {
            'id': self._next_id,
            'name': user.name,
            'email': user.email,
            'role': user.role,
            'created_at': user.created_at,
        }
        self._next_id += 1
        self.records.append(record)

        logger.info("User created", extra={"userId": record['id'], "email": user.email})
        return self._to_domain(record)

    # ── read operations ──────────────────────────────────────

    def find_all(self) -> list[User]:
        return [self._to_domain(record) for record in self.records]

    def find_by_id(self, user_id: str) -> User | None:
        if not isinstance(user_id, str) or not (user_id.isascii() and user_id.isdigit()):
            return None

        numeric_id = int(user_id)
        for record in self.records:
            if record['id'] == numeric_id:
                return self._to_domain(record)
        return None
