"""
User domain mappers.
Handles transformation between MongoDB documents and user DTOs.
"""

from typing import Any, Mapping

from domain.mappers.document import response_fields
from domain.schemas.user_schemas import UserResponse


class UserMapper:
    """Mapper for user documents."""

    @staticmethod
    def to_response(doc: Mapping[str, Any]) -> UserResponse:
        """
        Convert a stored user document to a UserResponse DTO.

        Args:
            doc: User document as returned by pymongo

        Returns:
            UserResponse DTO
        """
        return UserResponse.model_validate(response_fields(doc))
