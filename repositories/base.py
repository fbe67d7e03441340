"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING
from pymongo.database import Database

Document = Dict[str, Any]


class BaseRepository:
    """
    Base repository providing common operations over one MongoDB collection.
    Subclasses set ``collection_name``.
    """

    collection_name: str = ""

    def __init__(self, db: Database):
        self.db = db
        self.collection = db[self.collection_name]

    @staticmethod
    def to_object_id(entity_id: Union[str, ObjectId]) -> Optional[ObjectId]:
        """Parse an id coming from a URL. Returns None for malformed ids."""
        if isinstance(entity_id, ObjectId):
            return entity_id
        try:
            return ObjectId(entity_id)
        except (InvalidId, TypeError):
            return None

    def get_by_id(self, entity_id: Union[str, ObjectId]) -> Optional[Document]:
        """
        Get document by ID.

        Args:
            entity_id: ObjectId or its 24-character hex string

        Returns:
            Document or None if not found (or if the id is malformed)
        """
        oid = self.to_object_id(entity_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid})

    def get_all(self) -> List[Document]:
        """Get all documents, newest first"""
        cursor = self.collection.find({}).sort(
            [("createdAt", DESCENDING), ("_id", DESCENDING)]
        )
        return list(cursor)

    def create(self, document: Document) -> Document:
        """Insert a new document and return it with its assigned ``_id``"""
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    def exists(self, entity_id: Union[str, ObjectId]) -> bool:
        """Check if document exists"""
        return self.get_by_id(entity_id) is not None


def utcnow() -> datetime:
    """Current UTC time as MongoDB stores it: naive, millisecond precision."""
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)
