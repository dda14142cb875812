"""MongoDB implementation of UserRepository."""

from logging import getLogger

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb.connection import USERS_COLLECTION_NAME
from domain.model.errors import DuplicateError
from domain.model.user import DEFAULT_ROLE, User

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            email_ok = create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True)
            created_ok = create_index_safe(self.collection, [('createdAt', -1)], 'idx_users_created_at')
            return email_ok and created_ok
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model.

        Records written outside this service may lack fields; those stay None.
        """
        return User(
            id=str(doc['_id']),
            name=doc.get('name'),
            email=doc.get('email'),
            role=doc.get('role', DEFAULT_ROLE),
            created_at=doc.get('createdAt'),
        )

    def create(self, user: User) -> User:
        """Insert the user and return it rehydrated with its ObjectId.

        Raises:
            DuplicateError: email already stored (unique index)
            PyMongoError: any other driver failure, unchanged
        """
        user_doc = {
            'name': user.name,
            'email': user.email,
            'role': user.role or DEFAULT_ROLE,
            'createdAt': user.created_at,
        }
        try:
            result = self.collection.insert_one(user_doc)
        except DuplicateKeyError as e:
            logger.warning("User creation failed: email already exists", extra={"email": user.email})
            raise DuplicateError("Email already exists") from e

        created = self._to_domain({**user_doc, '_id': result.inserted_id})
        logger.info("User created", extra={"userId": created.id, "email": user.email})
        return created

    def find_all(self) -> list[User]:
        return [self._to_domain(doc) for doc in self.collection.find()]

    def find_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return None if not found or not a valid ObjectId."""
        try:
            object_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            logger.debug("Malformed user id", extra={"userId": str(user_id)[:64]})
            return None

        doc = self.collection.find_one({'_id': object_id})
        if doc:
            return self._to_domain(doc)
        return None
