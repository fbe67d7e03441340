from typing import Any, Dict, Iterable, List, Optional
from datetime import datetime
from pymongo.database import Database
from pymongo.errors import PyMongoError
import logging

from domain.feed import filter_meals
from domain.origins import resolve_origin
from domain.schemas.meal_schemas import MealCreate
from repositories import MealRepository
from repositories.base import utcnow
from app.exceptions import ServiceValidationError, NotFoundError, SoldOutError

logger = logging.getLogger("dormdash.meals")

DEFAULT_TITLE = "Untitled Meal"
DEFAULT_CHEF = "Anonymous Chef"
DEFAULT_CHEF_BIO = "Student chef"
DEFAULT_DORM = "Unknown Dorm"


class MealService:
    """Business logic for meal listings and reservations"""

    @staticmethod
    def list_meals(
        db: Database,
        query: Optional[str] = None,
        tags: Optional[Iterable[str]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Return meals newest first, optionally narrowed by the feed filter.

        Args:
            db: MongoDB database
            query: Free-text search over title, description and tags
            tags: Tags every returned meal must carry

        Returns:
            List of meal documents
        """
        meals = MealRepository(db).get_all()
        if query or tags:
            meals = filter_meals(meals, query or "", tags or [])
        logger.info(f"meals_listed count={len(meals)} query={query!r} tags={tags}")
        return meals

    @staticmethod
    def get_meal(db: Database, meal_id: str) -> Dict[str, Any]:
        """Fetch a single meal or raise NotFoundError"""
        meal = MealRepository(db).get_by_id(meal_id)
        if not meal:
            logger.warning(f"meal_not_found meal_id={meal_id}")
            raise NotFoundError("Meal not found")
        return meal

    @staticmethod
    def build_meal_document(payload: MealCreate, now: datetime) -> Dict[str, Any]:
        """
        Turn a validated create request into the document to store.

        Applies display defaults, maps the legacy ``culturalNote`` onto
        ``dishMatters``, resolves the origin key to coordinates and sets
        ``servingsLeft`` to the full capacity when it was not given.
        """
        servings_left = (
            payload.servings_left
            if payload.servings_left is not None
            else payload.servings
        )
        if servings_left > payload.servings:
            raise ServiceValidationError("servingsLeft cannot exceed servings")

        doc: Dict[str, Any] = {
            "title": payload.title or DEFAULT_TITLE,
            "description": payload.description or "",
            "chef": payload.chef or DEFAULT_CHEF,
            "chefBio": payload.chef_bio or DEFAULT_CHEF_BIO,
            "dorm": payload.dorm or DEFAULT_DORM,
            "price": payload.price,
            "servings": payload.servings,
            "servingsLeft": servings_left,
            "image": payload.image,
            "tags": list(payload.tags),
            "dishMatters": payload.dish_matters or payload.cultural_note or "",
            "culturalNote": payload.cultural_note,
            "rating": payload.rating,
            "orders": payload.orders,
            "originKey": None,
            "createdAt": now,
            "updatedAt": now,
        }

        origin = resolve_origin(payload.origin_key)
        if origin:
            doc["originKey"] = origin.key
            doc["lat"] = origin.lat
            doc["lng"] = origin.lng
        elif payload.origin_key:
            logger.info(f"meal_origin_unknown origin_key={payload.origin_key!r}")

        return doc

    @staticmethod
    def create_meal(db: Database, payload: MealCreate) -> Dict[str, Any]:
        """
        Persist a new meal listing.

        Args:
            db: MongoDB database
            payload: Validated create request

        Returns:
            Stored meal document including its ``_id``

        Raises:
            ServiceValidationError: If the payload breaks an invariant or the
                store rejects the insert
        """
        doc = MealService.build_meal_document(payload, utcnow())
        try:
            meal = MealRepository(db).create(doc)
        except PyMongoError as e:
            logger.error(f"meal_create_failed title={doc['title']!r} error={str(e)}")
            raise ServiceValidationError("Failed to create meal")

        logger.info(
            f"meal_created meal_id={meal['_id']} servings={meal['servings']} "
            f"origin_key={meal.get('originKey')}"
        )
        return meal

    @staticmethod
    def reserve_meal(db: Database, meal_id: str) -> Dict[str, Any]:
        """
        Reserve one serving of a meal.

        The decrement is a single conditional update, so at most one
        reservation succeeds per available serving regardless of how many
        requests race for it. Only a failed update triggers the extra read
        that tells a missing meal apart from a sold-out one.

        Args:
            db: MongoDB database
            meal_id: Meal id from the URL

        Returns:
            The updated meal document

        Raises:
            NotFoundError: No meal with that id (or malformed id)
            SoldOutError: The meal has no servings left
        """
        repo = MealRepository(db)
        oid = repo.to_object_id(meal_id)
        if oid is None:
            logger.warning(f"meal_reserve_bad_id meal_id={meal_id}")
            raise NotFoundError("Meal not found")

        meal = repo.reserve_one(oid, utcnow())
        if meal is not None:
            logger.info(
                f"meal_reserved meal_id={meal_id} servings_left={meal['servingsLeft']}"
            )
            return meal

        if not repo.exists(oid):
            logger.warning(f"meal_not_found meal_id={meal_id}")
            raise NotFoundError("Meal not found")

        logger.info(f"meal_sold_out meal_id={meal_id}")
        raise SoldOutError("Sold out")
