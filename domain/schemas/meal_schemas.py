from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime


class MealCreate(BaseModel):
    """Schema for posting a new meal.

    Coordinates are not accepted from the client; they are resolved from
    ``originKey`` by the service.
    """

    title: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    chef: Optional[str] = None
    chef_bio: Optional[str] = None
    dorm: Optional[str] = None
    price: float = Field(0, ge=0, allow_inf_nan=False, description="Per-serving price")
    servings: int = Field(1, ge=1, description="Total servings offered")
    servings_left: Optional[int] = Field(
        None, ge=0, description="Servings still available; defaults to servings"
    )
    image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    dish_matters: Optional[str] = None
    cultural_note: Optional[str] = Field(
        None, description="Legacy name of dishMatters, still accepted"
    )
    origin_key: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5, allow_inf_nan=False)
    orders: int = Field(0, ge=0)

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "str_strip_whitespace": True,
    }

    @model_validator(mode="after")
    def check_servings_left(self):
        if self.servings_left is not None and self.servings_left > self.servings:
            raise ValueError("servingsLeft cannot exceed servings")
        return self


class MealResponse(BaseModel):
    """Schema for meal response"""

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    chef: Optional[str] = None
    chef_bio: Optional[str] = None
    dorm: Optional[str] = None
    price: Optional[float] = None
    servings: Optional[int] = None
    servings_left: Optional[int] = None
    image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    dish_matters: Optional[str] = None
    cultural_note: Optional[str] = None
    rating: Optional[float] = None
    orders: Optional[int] = None
    origin_key: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class OriginResponse(BaseModel):
    """Known cultural origin and its map coordinates"""

    key: str
    lat: float
    lng: float
