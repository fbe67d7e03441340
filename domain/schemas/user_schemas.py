from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

from domain.enums import UserRole


class UserCreate(BaseModel):
    """Registration payload"""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    dorm: str = Field(..., min_length=1, max_length=100)
    role: UserRole
    phone: Optional[str] = None
    bio: Optional[str] = None
    dietary: List[str] = Field(default_factory=list)

    model_config = {"str_strip_whitespace": True}

    @field_validator("email")
    def normalize_email(cls, v):
        return v.lower()

    @field_validator("dietary")
    def drop_blank_dietary(cls, v):
        return [d for d in v if d]


class UserResponse(BaseModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    dorm: Optional[str] = None
    bio: Optional[str] = None
    dietary: List[str] = Field(default_factory=list)
    role: Optional[str] = None
    ratings: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
