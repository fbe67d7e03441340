"""
Cultural origin lookup table.

Maps the origin keys offered by the post-meal form to the coordinates used
for the map pins. Coordinates are denormalised onto the meal document at
creation time.
"""

from typing import Dict, NamedTuple, Optional


class Origin(NamedTuple):
    key: str
    lat: float
    lng: float


ORIGIN_COORDS: Dict[str, Origin] = {
    "punjabi": Origin("punjabi", 31.1471, 75.3412),  # Punjab, India
    "japanese": Origin("japanese", 35.6762, 139.6503),  # Tokyo
    "middle eastern": Origin("middle eastern", 30.0444, 31.2357),  # Cairo
    "mexican": Origin("mexican", 19.4326, -99.1332),  # Mexico City
}


def resolve_origin(key: Optional[str]) -> Optional[Origin]:
    """Return the known origin for ``key`` or None.

    Matching ignores case and surrounding whitespace.
    """
    if not key:
        return None
    return ORIGIN_COORDS.get(key.strip().lower())
