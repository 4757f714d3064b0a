"""astrocalc public API.

Closed-form algorithms from Jean Meeus, Astronomical Algorithms (2nd Ed).
The modules under astrocalc.reference hold the full set; the functions
re-exported here are the usual entry points.
"""

from .api import (
    jd,
    nutation_report,
    sun_report,
    moon_report,
    planet_report,
)
from .core.config import DEFAULT_CONFIG, SolverConfig
from .core.errors import AstrocalcError, ConvergenceError, InvalidDateError
from .core.time import CalendarDate, CalendarKind, date_from_julian_day, julian_day
from .core.types import EclPoint, EqPoint, GalPoint, GeographPoint, HzPoint
from .reference.planets import Planet

__all__ = [
    "jd",
    "nutation_report",
    "sun_report",
    "moon_report",
    "planet_report",
    "SolverConfig",
    "DEFAULT_CONFIG",
    "AstrocalcError",
    "ConvergenceError",
    "InvalidDateError",
    "CalendarDate",
    "CalendarKind",
    "julian_day",
    "date_from_julian_day",
    "EqPoint",
    "EclPoint",
    "GeographPoint",
    "GalPoint",
    "HzPoint",
    "Planet",
]
