"""
Meal Repository - Data access layer for meal listings
"""

from datetime import datetime
from typing import Optional
from bson import ObjectId
from pymongo import ReturnDocument

from adapters.mongo_adapter import MEALS_COLLECTION
from repositories.base import BaseRepository, Document


class MealRepository(BaseRepository):
    """Repository for meal data access"""

    collection_name = MEALS_COLLECTION

    def reserve_one(self, meal_id: ObjectId, now: datetime) -> Optional[Document]:
        """
        Atomically take one serving of a meal.

        The filter only matches while ``servingsLeft`` is positive, so the
        check and the decrement happen in a single server-side operation and
        concurrent callers can never drive the counter below zero.

        Args:
            meal_id: Meal ObjectId
            now: Timestamp recorded as ``updatedAt``

        Returns:
            The updated document, or None when the meal is missing or sold out
        """
        return self.collection.find_one_and_update(
            {"_id": meal_id, "servingsLeft": {"$gt": 0}},
            {"$inc": {"servingsLeft": -1}, "$set": {"updatedAt": now}},
            return_document=ReturnDocument.AFTER,
        )
