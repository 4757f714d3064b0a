from __future__ import annotations

import math
from typing import Tuple

from ..core.angle import arcsec_to_rad, wrap_rad
from ..core.types import EclPoint, EqPoint, GeographPoint
from .coords import hour_angle_from_observer_long
from .earth import rho_sin_cos_phi


# equatorial horizontal parallax of the Sun at 1 AU
SOLAR_PARALLAX = arcsec_to_rad(8.794)


def eq_horizontal_parallax(dist_au: float) -> float:
    """Equatorial horizontal parallax of a body at dist_au from the Earth (radians)."""
    return math.asin(math.sin(SOLAR_PARALLAX) / dist_au)


def topocentric_eq_coords(
    eq: EqPoint,
    eq_hz_parallax: float,
    observer: GeographPoint,
    height_m: float,
    green_sidr: float,
) -> EqPoint:
    """
    Topocentric right ascension and declination (Meeus 40.2-40.3, rigorous).

    green_sidr is the apparent sidereal time at Greenwich; the observer's
    longitude is positive west.
    """
    rho_sin, rho_cos = rho_sin_cos_phi(observer.lat, height_m)
    H = hour_angle_from_observer_long(green_sidr, observer.long, eq.asc)
    sp = math.sin(eq_hz_parallax)

    den = math.cos(eq.dec) - rho_cos * sp * math.cos(H)
    d_asc = math.atan2(-rho_cos * sp * math.sin(H), den)
    dec = math.atan2((math.sin(eq.dec) - rho_sin * sp) * math.cos(d_asc), den)
    return EqPoint(asc=wrap_rad(eq.asc + d_asc), dec=dec)


def topocentric_ecl_coords(
    ecl: EclPoint,
    eq_hz_parallax: float,
    observer: GeographPoint,
    height_m: float,
    loc_sidr: float,
    oblq: float,
    geocent_semidiameter: float,
) -> Tuple[EclPoint, float]:
    """
    Topocentric ecliptic coordinates and semidiameter (Meeus 40.6).

    Returns (point, topocentric semidiameter).
    """
    rho_sin, rho_cos = rho_sin_cos_phi(observer.lat, height_m)
    sp = math.sin(eq_hz_parallax)
    s_th, c_th = math.sin(loc_sidr), math.cos(loc_sidr)
    s_e, c_e = math.sin(oblq), math.cos(oblq)
    c_b = math.cos(ecl.lat)

    N = math.cos(ecl.long) * c_b - rho_cos * sp * c_th
    lon = math.atan2(math.sin(ecl.long) * c_b - sp * (rho_sin * s_e + rho_cos * c_e * s_th), N)
    # cos(lon) and N share a sign, so beta' stays in (-90, 90)
    lat = math.atan(math.cos(lon) * (math.sin(ecl.lat) - sp * (rho_sin * c_e - rho_cos * s_e * s_th)) / N)
    semidia = math.asin(math.cos(lon) * math.cos(lat) * math.sin(geocent_semidiameter) / N)
    return EclPoint(long=wrap_rad(lon), lat=lat), semidia
