# reference/transit.py

from __future__ import annotations

"""
Rising, transit and setting (Meeus ch. 15).

The body's apparent (asc, dec) at 0h TD on the day before, the day of and
the day after are interpolated; each time is refined once.
"""

import logging
import math
from enum import Enum
from typing import Optional

from ..core.angle import TAU
from ..core.types import EqPoint, GeographPoint
from .coords import hz_from_eq
from .interpolation import _three_point

log = logging.getLogger(__name__)

# sidereal degrees per solar day
_SIDEREAL_RATE = math.radians(360.985647)


class TransitEvent(Enum):
    RISE = "rise"
    TRANSIT = "transit"
    SET = "set"


class TransitBody(Enum):
    STAR_OR_PLANET = "star"
    SUN = "sun"
    MOON = "moon"


def standard_altitude(body: TransitBody, moon_parallax: float = 0.0) -> float:
    """h0: geometric altitude of the centre at apparent rising or setting."""
    if body is TransitBody.SUN:
        return math.radians(-0.8333)
    if body is TransitBody.MOON:
        return 0.7275 * moon_parallax - math.radians(0.5667)
    return math.radians(-0.5667)


def _unwrap(asc: float, ref: float) -> float:
    # keep the three right ascensions on one branch across 0h
    return ref + (asc - ref + math.pi) % TAU - math.pi


def rise_transit_set(
    event: TransitEvent,
    body: TransitBody,
    observer: GeographPoint,
    eq1: EqPoint,
    eq2: EqPoint,
    eq3: EqPoint,
    app_green_sidr: float,
    delta_t: float,
    moon_parallax: float = 0.0,
) -> Optional[float]:
    """
    UT of the event as a fraction of the day, or None when the body does
    not reach the standard altitude that day (circumpolar or never rises).

    app_green_sidr is the apparent sidereal time at Greenwich at 0h UT,
    delta_t is TT - UT in seconds and moon_parallax is used for the Moon only.
    """
    h0 = standard_altitude(body, moon_parallax)
    lat, L = observer.lat, observer.long

    cos_H0 = (math.sin(h0) - math.sin(lat) * math.sin(eq2.dec)) / (math.cos(lat) * math.cos(eq2.dec))
    if abs(cos_H0) > 1.0:
        log.debug("rise_transit_set: no %s, cos H0 = %.4f", event.value, cos_H0)
        return None
    H0 = math.acos(cos_H0)

    m = (eq2.asc + L - app_green_sidr) / TAU
    if event is TransitEvent.RISE:
        m -= H0 / TAU
    elif event is TransitEvent.SET:
        m += H0 / TAU
    m %= 1.0

    theta = app_green_sidr + _SIDEREAL_RATE * m
    # n may exceed 1 by delta_t/86400 just before midnight
    n = m + delta_t / 86400.0
    asc = _three_point(_unwrap(eq1.asc, eq2.asc), eq2.asc, _unwrap(eq3.asc, eq2.asc), n)
    H = (theta - L - asc + math.pi) % TAU - math.pi

    if event is TransitEvent.TRANSIT:
        return (m - H / TAU) % 1.0

    dec = _three_point(eq1.dec, eq2.dec, eq3.dec, n)
    h = hz_from_eq(H, dec, lat).alt
    return (m + (h - h0) / (TAU * math.cos(dec) * math.cos(lat) * math.sin(H))) % 1.0
