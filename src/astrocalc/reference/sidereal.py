from __future__ import annotations

import math

from ..core.angle import wrap_deg, wrap_rad
from ..core.time import J2000, julian_century


def mean_sidereal_time(jd_ut: float) -> float:
    """
    Mean sidereal time at Greenwich (radians, [0, 2pi)), Meeus 12.4.

    jd_ut is any instant in UT, not only 0h.
    """
    T = julian_century(jd_ut)
    theta0 = (
        280.46061837
        + 360.98564736629 * (jd_ut - J2000)
        + T * T * (0.000387933 - T / 38710000.0)
    )
    return math.radians(wrap_deg(theta0))


def apparent_sidereal_time(mean_sidr: float, nut_long: float, true_oblq: float) -> float:
    """Apparent sidereal time: the mean value corrected by dpsi*cos(eps)."""
    return wrap_rad(mean_sidr + nut_long * math.cos(true_oblq))
