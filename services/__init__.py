"""Services package - Business logic layer"""

from services.meal_service import MealService
from services.user_service import UserService
from services.upload_service import UploadService

__all__ = [
    "MealService",
    "UserService",
    "UploadService",
]
