"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional

from adapters.mongo_adapter import USERS_COLLECTION
from repositories.base import BaseRepository, Document


class UserRepository(BaseRepository):
    """Repository for user data access"""

    collection_name = USERS_COLLECTION

    def get_by_email(self, email: str) -> Optional[Document]:
        """Get user by email"""
        return self.collection.find_one({"email": email})
