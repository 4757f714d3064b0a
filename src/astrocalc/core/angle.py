from __future__ import annotations

import math
from math import fmod
from typing import Tuple


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

TAU = 2.0 * math.pi

SMALL_ANGLE_DEG = 0.003


def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    # fmod of a tiny negative number plus 360 rounds to 360 exactly
    if y >= 360.0:
        y = 0.0
    return y


def wrap_rad(x_rad: float) -> float:
    """Wrap radians to [0,2*pi)."""
    y = fmod(x_rad, TAU)
    if y < 0:
        y += TAU
    if y >= TAU:
        y = 0.0
    return y


def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0


def arcsec_to_deg(arcsec: float) -> float:
    return arcsec / 3600.0


def arcsec_to_rad(arcsec: float) -> float:
    return math.radians(arcsec_to_deg(arcsec))


def rad_to_arcsec(rad: float) -> float:
    return math.degrees(rad) * 3600.0


# ------------------------------------------------------------
# Sexagesimal packing
# ------------------------------------------------------------

def deg_from_dms(deg: float, minute: float, second: float) -> float:
    """
    Degrees from a (degree, arcminute, arcsecond) triple.

    The sign is carried by the degree field; minute and second are read as
    magnitudes. When the degree field is zero the sign may come from a
    float -0.0 or from the first non-zero of minute/second, which is the
    form dms_from_deg produces. deg_from_dms_signed takes an explicit flag.
    """
    if deg != 0:
        negative = deg < 0
    elif math.copysign(1.0, deg) < 0:
        negative = True
    elif minute != 0:
        negative = minute < 0
    else:
        negative = second < 0
    return deg_from_dms_signed(negative, abs(deg), abs(minute), abs(second))


def deg_from_dms_signed(negative: bool, deg: float, minute: float, second: float) -> float:
    """Degrees from an explicit sign flag and non-negative d/m/s magnitudes."""
    if deg < 0 or minute < 0 or second < 0:
        raise ValueError("degree, minute and second must be non-negative when the sign is given separately")
    x = deg + minute / 60.0 + second / 3600.0
    return -x if negative else x


def dms_from_deg(x_deg: float) -> Tuple[int, int, float]:
    """
    Split degrees into (degree, arcminute, arcsecond).

    The sign goes on the first non-zero field, so that
    deg_from_dms(*dms_from_deg(x)) == x up to rounding.
    """
    negative = x_deg < 0
    a = abs(x_deg)
    d = int(a)
    rem = (a - d) * 60.0
    m = int(rem)
    s = (rem - m) * 60.0
    if negative:
        if d != 0:
            d = -d
        elif m != 0:
            m = -m
        else:
            s = -s
    return d, m, s


def deg_from_hms(hour: float, minute: float, second: float) -> float:
    """Degrees from an (hour, minute, second) triple; 1h = 15 degrees."""
    return 15.0 * deg_from_dms(hour, minute, second)


def hms_from_deg(x_deg: float) -> Tuple[int, int, float]:
    """Split an angle in degrees into (hour, minute, second) of time."""
    return dms_from_deg(x_deg / 15.0)


def rad_from_dms(deg: float, minute: float, second: float) -> float:
    return math.radians(deg_from_dms(deg, minute, second))


def rad_from_hms(hour: float, minute: float, second: float) -> float:
    return math.radians(deg_from_hms(hour, minute, second))


def hms_from_rad(x_rad: float) -> Tuple[int, int, float]:
    return hms_from_deg(math.degrees(x_rad))


def dms_from_rad(x_rad: float) -> Tuple[int, int, float]:
    return dms_from_deg(math.degrees(x_rad))


def is_small_angle(x_deg: float) -> bool:
    """True for separations where the plain acos formula loses precision."""
    return abs(x_deg) < SMALL_ANGLE_DEG


# ------------------------------------------------------------
# Angular separation (radians in, radians out)
# ------------------------------------------------------------

def angular_separation(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """
    Spherical law of cosines (Meeus 17.1).

    Fine for most separations; near 0 and near pi the argument of acos
    is close to +-1 and digits are lost. See angular_separation_precise.
    """
    c = (
        math.sin(lat1) * math.sin(lat2)
        + math.cos(lat1) * math.cos(lat2) * math.cos(lon1 - lon2)
    )
    # clamp rounding spill past +-1
    return math.acos(max(-1.0, min(1.0, c)))


def angular_separation_haversine(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """Haversine form; well conditioned for small separations."""
    s_lat = math.sin((lat2 - lat1) / 2.0)
    s_lon = math.sin((lon2 - lon1) / 2.0)
    h = s_lat * s_lat + math.cos(lat1) * math.cos(lat2) * s_lon * s_lon
    return 2.0 * math.asin(min(1.0, math.sqrt(h)))


def angular_separation_precise(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """
    Vincenty's atan2 form of the separation.

    Stable over the whole range [0, pi], with no acos/asin at all.
    """
    dlon = lon2 - lon1
    s1, c1 = math.sin(lat1), math.cos(lat1)
    s2, c2 = math.sin(lat2), math.cos(lat2)
    x = c2 * math.sin(dlon)
    y = c1 * s2 - s1 * c2 * math.cos(dlon)
    num = math.hypot(x, y)
    den = s1 * s2 + c1 * c2 * math.cos(dlon)
    return math.atan2(num, den)
