"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.meal_schemas import MealCreate, MealResponse, OriginResponse
from domain.schemas.user_schemas import UserCreate, UserResponse

__all__ = [
    "MealCreate",
    "MealResponse",
    "OriginResponse",
    "UserCreate",
    "UserResponse",
]
