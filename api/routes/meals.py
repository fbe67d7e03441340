"""Meal listing and reservation routes"""

from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database
from typing import List, Optional

from adapters.mongo_adapter import get_database
from domain.schemas.meal_schemas import MealCreate, MealResponse
from domain.mappers import MealMapper
from services import MealService

router = APIRouter(prefix="/meals", tags=["Meals"])


@router.get("", response_model=List[MealResponse])
def list_meals(
    q: Optional[str] = Query(None, description="Free-text search over title, description and tags"),
    tags: Optional[List[str]] = Query(None, description="Tags every meal must carry"),
    db: Database = Depends(get_database),
):
    """Return all meals, newest first, optionally filtered like the browse feed."""
    meals = MealService.list_meals(db, query=q, tags=tags)
    return [MealMapper.to_response(m) for m in meals]


@router.post("", response_model=MealResponse, status_code=status.HTTP_201_CREATED)
def create_meal(meal: MealCreate, db: Database = Depends(get_database)):
    """
    Post a new meal.

    ``servingsLeft`` defaults to ``servings``; a known ``originKey`` is
    resolved to map coordinates.
    """
    created = MealService.create_meal(db, meal)
    return MealMapper.to_response(created)


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(meal_id: str, db: Database = Depends(get_database)):
    """Get a single meal."""
    return MealMapper.to_response(MealService.get_meal(db, meal_id))


@router.patch("/{meal_id}/reserve", response_model=MealResponse)
def reserve_meal(meal_id: str, db: Database = Depends(get_database)):
    """
    Reserve one serving of a meal.

    Returns the updated meal. Responds 404 when the meal does not exist and
    400 (``SOLD_OUT``) when no servings are left.
    """
    meal = MealService.reserve_meal(db, meal_id)
    return MealMapper.to_response(meal)
