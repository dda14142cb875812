import logging

from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# Set pymongo logger to WARNING to reduce noise from driver-level logs
pymongo_logger = logging.getLogger('pymongo')
pymongo_logger.setLevel(logging.WARNING)

USERS_COLLECTION_NAME = 'users'


def connect(mongo_url: str) -> MongoClient:
    """Open a MongoDB client and verify it with a ping.

    The caller owns the returned client and must close it on shutdown.

    Raises:
        pymongo.errors.PyMongoError: server unreachable or URL invalid
    """
    client = MongoClient(
        mongo_url,
        serverSelectionTimeoutMS=5000,  # 5s timeout for server selection
        connectTimeoutMS=5000,  # 5s timeout for initial connection
        socketTimeoutMS=30000,  # 30s timeout for operations
        maxPoolSize=10,
        minPoolSize=0,
        maxIdleTimeMS=30000,
        retryWrites=True,
        retryReads=True,
        tz_aware=True,  # createdAt comes back as an aware UTC datetime
    )
    try:
        client.admin.command('ping')
    except PyMongoError:
        client.close()
        raise

    logger.info("[MONGODB] Connected successfully")
    return client


def ping(client: MongoClient) -> bool:
    """Return True if the server answers a ping."""
    try:
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.warning("[MONGODB] Ping failed", extra={"error": str(e)[:200]})
        return False
