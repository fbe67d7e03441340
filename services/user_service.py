from typing import Any, Dict, List
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError
import logging

from domain.schemas.user_schemas import UserCreate
from repositories import UserRepository
from repositories.base import utcnow
from app.exceptions import ConflictError, NotFoundError

logger = logging.getLogger("dormdash.users")


class UserService:
    """Business logic for user registration"""

    @staticmethod
    def get_all_users(db: Database) -> List[Dict[str, Any]]:
        """Return all users, newest first (no pagination)."""
        return UserRepository(db).get_all()

    @staticmethod
    def get_user(db: Database, user_id: str) -> Dict[str, Any]:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            logger.warning(f"user_not_found user_id={user_id}")
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def create_user(db: Database, payload: UserCreate) -> Dict[str, Any]:
        """
        Register a new user.

        The email lookup gives the common case a clean error; the unique
        index on ``email`` catches two registrations racing past it.

        Raises:
            ConflictError: A user with this email already exists
        """
        user_repo = UserRepository(db)

        if user_repo.get_by_email(payload.email):
            logger.warning(f"user_create_conflict email={payload.email}")
            raise ConflictError("User with this email already exists")

        now = utcnow()
        doc = {
            "name": payload.name,
            "email": payload.email,
            "phone": payload.phone,
            "dorm": payload.dorm,
            "bio": payload.bio,
            "dietary": list(payload.dietary),
            "role": payload.role.value,
            "ratings": 0,
            "createdAt": now,
            "updatedAt": now,
        }
        try:
            user = user_repo.create(doc)
        except DuplicateKeyError:
            logger.warning(f"user_create_conflict email={payload.email} source=index")
            raise ConflictError("User with this email already exists")

        logger.info(f"user_created user_id={user['_id']} role={user['role']}")
        return user
