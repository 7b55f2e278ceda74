"""
Great-circle distance between user and program coordinates.
"""

import math
from typing import Optional

from .contracts import Coordinates, Program, UserProfile
from .constants import EARTH_RADIUS_MILES


def haversine_miles(origin: Coordinates, destination: Coordinates) -> float:
    """Haversine distance in miles."""
    lat1 = math.radians(origin.lat)
    lat2 = math.radians(destination.lat)
    d_lat = lat2 - lat1
    d_lng = math.radians(destination.lng - origin.lng)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    # Rounding can push a slightly above 1 for antipodal points
    c = 2 * math.asin(min(1.0, math.sqrt(a)))
    return EARTH_RADIUS_MILES * c


def distance_to_program(user: UserProfile, program: Program) -> Optional[float]:
    """Distance in miles, or None when either side has no coordinates."""
    origin = user.location.coordinates
    destination = program.location.coordinates
    if origin is None or destination is None:
        return None
    return haversine_miles(origin, destination)
