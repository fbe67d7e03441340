"""
Meal domain mappers.
Handles transformation between MongoDB documents and meal DTOs.
"""

from typing import Any, Mapping

from domain.mappers.document import response_fields
from domain.schemas.meal_schemas import MealResponse


class MealMapper:
    """Mapper for meal documents."""

    @staticmethod
    def to_response(doc: Mapping[str, Any]) -> MealResponse:
        """
        Convert a stored meal document to a MealResponse DTO.

        Legacy fields without a response counterpart are ignored.

        Args:
            doc: Meal document as returned by pymongo

        Returns:
            MealResponse DTO
        """
        return MealResponse.model_validate(response_fields(doc))
