# reference/coords.py

from __future__ import annotations

import math
from typing import Tuple

from ..core.angle import wrap_rad
from ..core.types import EclPoint, EqPoint, GalPoint, HzPoint


# ------------------------------------------------------------
# Hour angle
# ------------------------------------------------------------

def hour_angle_from_observer_long(green_sidr: float, observer_long: float, asc: float) -> float:
    """Local hour angle H = theta0 - L - alpha, with L positive west."""
    return green_sidr - observer_long - asc


def hour_angle_from_local_sidereal(local_sidr: float, asc: float) -> float:
    return local_sidr - asc


# ------------------------------------------------------------
# Equatorial <-> ecliptic (Meeus 13.1-13.4)
# ------------------------------------------------------------

def ecl_from_eq(eq: EqPoint, oblq: float) -> EclPoint:
    """
    Ecliptic coordinates of an equatorial point.

    Use the true obliquity when the input includes nutation, the mean
    obliquity otherwise.
    """
    s_a, c_a = math.sin(eq.asc), math.cos(eq.asc)
    s_e, c_e = math.sin(oblq), math.cos(oblq)
    lon = math.atan2(s_a * c_e + math.tan(eq.dec) * s_e, c_a)
    lat = math.asin(math.sin(eq.dec) * c_e - math.cos(eq.dec) * s_e * s_a)
    return EclPoint(long=wrap_rad(lon), lat=lat)


def eq_from_ecl(ecl: EclPoint, oblq: float) -> EqPoint:
    s_l, c_l = math.sin(ecl.long), math.cos(ecl.long)
    s_e, c_e = math.sin(oblq), math.cos(oblq)
    asc = math.atan2(s_l * c_e - math.tan(ecl.lat) * s_e, c_l)
    dec = math.asin(math.sin(ecl.lat) * c_e + math.cos(ecl.lat) * s_e * s_l)
    return EqPoint(asc=wrap_rad(asc), dec=dec)


# ------------------------------------------------------------
# Equatorial <-> horizontal (Meeus 13.5-13.6)
# ------------------------------------------------------------

def hz_from_eq(hour_angle: float, dec: float, observer_lat: float) -> HzPoint:
    """Azimuth (from the south, westward) and altitude."""
    az = math.atan2(
        math.sin(hour_angle),
        math.cos(hour_angle) * math.sin(observer_lat) - math.tan(dec) * math.cos(observer_lat),
    )
    alt = math.asin(
        math.sin(observer_lat) * math.sin(dec)
        + math.cos(observer_lat) * math.cos(dec) * math.cos(hour_angle)
    )
    return HzPoint(az=wrap_rad(az), alt=alt)


def eq_from_hz(hz: HzPoint, observer_lat: float) -> Tuple[float, float]:
    """(hour_angle, dec) of a horizontal point."""
    H = math.atan2(
        math.sin(hz.az),
        math.cos(hz.az) * math.sin(observer_lat) + math.tan(hz.alt) * math.cos(observer_lat),
    )
    dec = math.asin(
        math.sin(observer_lat) * math.sin(hz.alt)
        - math.cos(observer_lat) * math.cos(hz.alt) * math.cos(hz.az)
    )
    return wrap_rad(H), dec


# ------------------------------------------------------------
# Equatorial (B1950) <-> galactic (Meeus 13.7-13.8)
# ------------------------------------------------------------

_POLE_ASC = math.radians(192.25)
_POLE_DEC = math.radians(27.4)
_GAL_LONG_OFFSET = math.radians(303.0)
_GAL_NODE = math.radians(123.0)
_ASC_OFFSET = math.radians(12.25)


def gal_from_eq(eq: EqPoint) -> GalPoint:
    """Galactic coordinates; eq must be referred to the equinox of B1950.0."""
    x = _POLE_ASC - eq.asc
    lon = _GAL_LONG_OFFSET - math.atan2(
        math.sin(x),
        math.cos(x) * math.sin(_POLE_DEC) - math.tan(eq.dec) * math.cos(_POLE_DEC),
    )
    lat = math.asin(
        math.sin(eq.dec) * math.sin(_POLE_DEC)
        + math.cos(eq.dec) * math.cos(_POLE_DEC) * math.cos(x)
    )
    return GalPoint(long=wrap_rad(lon), lat=lat)


def eq_from_gal(gal: GalPoint) -> EqPoint:
    """Equatorial coordinates referred to B1950.0."""
    x = gal.long - _GAL_NODE
    asc = _ASC_OFFSET + math.atan2(
        math.sin(x),
        math.cos(x) * math.sin(_POLE_DEC) - math.tan(gal.lat) * math.cos(_POLE_DEC),
    )
    dec = math.asin(
        math.sin(gal.lat) * math.sin(_POLE_DEC)
        + math.cos(gal.lat) * math.cos(_POLE_DEC) * math.cos(x)
    )
    return EqPoint(asc=wrap_rad(asc), dec=dec)
