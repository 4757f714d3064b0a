from __future__ import annotations

import math


def parallactic_angle(hour_angle: float, dec: float, observer_lat: float) -> float:
    """Parallactic angle q of a body (Meeus 14.1); undefined at the zenith."""
    return math.atan2(
        math.sin(hour_angle),
        math.tan(observer_lat) * math.cos(dec) - math.sin(dec) * math.cos(hour_angle),
    )


def parallactic_angle_on_horizon(dec: float, observer_lat: float) -> float:
    """q at rising or setting."""
    return math.acos(math.sin(observer_lat) / math.cos(dec))
