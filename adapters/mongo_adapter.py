"""MongoDB adapter for meal and user storage.
"""

from typing import Optional
import logging
from pymongo import MongoClient, ASCENDING, DESCENDING
from pymongo.database import Database

from app.exceptions import UnavailableError

logger = logging.getLogger("dormdash.mongo")

MEALS_COLLECTION = "meals"
USERS_COLLECTION = "users"

_client: Optional[MongoClient] = None
_db: Optional[Database] = None


# ------------------ Connection ------------------
def connect(uri: str, db_name: str = "dormdash", timeout_ms: int = 15000) -> Database:
    """Open the shared client and verify the server answers a ping.

    Raises the underlying pymongo error when the server cannot be reached,
    leaving the adapter disconnected.
    """
    global _client, _db
    client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    _client = client
    _db = client[db_name]
    logger.info("Connected to MongoDB (database: %s)", db_name)
    return _db


def close():
    """Close MongoDB connection."""
    global _client, _db
    try:
        if _client is not None:
            _client.close()
            logger.info("MongoDB client closed")
    except Exception:
        logger.exception("Error closing MongoDB client")
    finally:
        _client = None
        _db = None


def is_connected() -> bool:
    return _db is not None


def get_database() -> Database:
    """
    Database dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Database = Depends(get_database)):
            ...
    """
    if _db is None:
        raise UnavailableError("Database is not connected")
    return _db


def ensure_indexes(db: Database):
    """Create the indexes the services rely on. Safe to call repeatedly."""
    db[MEALS_COLLECTION].create_index([("createdAt", DESCENDING)])
    db[MEALS_COLLECTION].create_index("tags")
    db[USERS_COLLECTION].create_index([("email", ASCENDING)], unique=True)
    logger.info("MongoDB indexes ensured")
