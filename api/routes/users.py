"""User registration routes"""

from fastapi import APIRouter, Depends, status
from pymongo.database import Database
from typing import List

from adapters.mongo_adapter import get_database
from domain.schemas.user_schemas import UserCreate, UserResponse
from domain.mappers import UserMapper
from services import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, db: Database = Depends(get_database)):
    """Register a new user from JSON body"""
    new_user = UserService.create_user(db, user)
    return UserMapper.to_response(new_user)


@router.get("", response_model=List[UserResponse])
def get_all_users(db: Database = Depends(get_database)):
    """Return all users."""
    users = UserService.get_all_users(db)
    return [UserMapper.to_response(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, db: Database = Depends(get_database)):
    """Get a single user."""
    return UserMapper.to_response(UserService.get_user(db, user_id))
