"""Cultural origin lookup routes"""

from fastapi import APIRouter
from typing import List

from domain.origins import ORIGIN_COORDS
from domain.schemas.meal_schemas import OriginResponse

router = APIRouter(prefix="/origins", tags=["Origins"])


@router.get("", response_model=List[OriginResponse])
def list_origins():
    """Known origin keys and the coordinates stored with meals that use them."""
    return [OriginResponse(**origin._asdict()) for origin in ORIGIN_COORDS.values()]
