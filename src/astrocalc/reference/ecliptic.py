from __future__ import annotations

import math
from typing import Tuple

from ..core.angle import wrap_rad


def ecliptic_points_on_horizon(oblq: float, observer_lat: float, loc_sidr: float) -> Tuple[float, float]:
    """Longitudes of the two points of the ecliptic on the horizon (Meeus 14.2)."""
    p = math.atan2(
        -math.cos(loc_sidr),
        math.sin(oblq) * math.tan(observer_lat) + math.cos(oblq) * math.sin(loc_sidr),
    )
    return wrap_rad(p), wrap_rad(p + math.pi)


def angle_between_ecliptic_and_horizon(oblq: float, observer_lat: float, loc_sidr: float) -> float:
    """Angle I between the ecliptic and the horizon (Meeus 14.3)."""
    return math.acos(
        math.cos(oblq) * math.sin(observer_lat)
        - math.sin(oblq) * math.cos(observer_lat) * math.sin(loc_sidr)
    )
