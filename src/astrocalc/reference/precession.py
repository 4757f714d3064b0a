# reference/precession.py

from __future__ import annotations

import math
from typing import Tuple

from ..core.angle import arcsec_to_rad, deg_from_hms, wrap_rad
from ..core.time import julian_century


def _as(x: float) -> float:
    return arcsec_to_rad(x)


def annual_precession(asc: float, dec: float, jd: float) -> Tuple[float, float]:
    """
    Annual precession (d_asc, d_dec) in radians per year, low accuracy (Meeus 21.1).

    Not for stars near the celestial poles, nor for epochs far from jd.
    """
    T = julian_century(jd)
    m = math.radians(deg_from_hms(0, 0, 3.07496 + 0.00186 * T))
    n = math.radians(deg_from_hms(0, 0, 1.33621 - 0.00057 * T))
    return m + n * math.sin(asc) * math.tan(dec), n * math.cos(asc)


def _rotate_eq(asc: float, dec: float, zeta: float, z: float, theta: float) -> Tuple[float, float]:
    c_d = math.cos(dec)
    A = c_d * math.sin(asc + zeta)
    B = math.cos(theta) * c_d * math.cos(asc + zeta) - math.sin(theta) * math.sin(dec)
    C = math.sin(theta) * c_d * math.cos(asc + zeta) + math.cos(theta) * math.sin(dec)
    new_asc = math.atan2(A, B) + z
    # near the pole asin(C) loses precision
    if abs(C) > 0.99:
        new_dec = math.copysign(math.acos(math.hypot(A, B)), C)
    else:
        new_dec = math.asin(C)
    return wrap_rad(new_asc), new_dec


def precess_eq_coords(asc: float, dec: float, jd_old: float, jd_new: float) -> Tuple[float, float]:
    """
    Rigorous precession of FK5 equatorial coordinates (Meeus 21.2-21.4).

    Proper motion must be applied separately, before precessing.
    """
    T = julian_century(jd_old)
    t = (jd_new - jd_old) / 36525.0
    x = t * (2306.2181 + T * (1.39656 - 0.000139 * T))
    zeta = _as(x + t * t * ((0.30188 - 0.000344 * T) + 0.017998 * t))
    z = _as(x + t * t * ((1.09468 + 0.000066 * T) + 0.018203 * t))
    theta = _as(
        t * (2004.3109 - T * (0.85330 + 0.000217 * T))
        - t * t * ((0.42665 + 0.000217 * T) + 0.041833 * t)
    )
    return _rotate_eq(asc, dec, zeta, z, theta)


def precess_eq_coords_fk4(asc: float, dec: float, jd_old: float, jd_new: float) -> Tuple[float, float]:
    """Precession in the old FK4 system (Newcomb), times in tropical centuries from B1900.0."""
    T = (jd_old - 2415020.3135) / 36524.2199
    t = (jd_new - jd_old) / 36524.2199
    x = t * (2304.250 + 1.396 * T)
    zeta = _as(x + t * t * (0.302 + 0.018 * t))
    z = _as(x + t * t * (1.093 + 0.019 * t))
    theta = _as(t * (2004.682 - 0.853 * T) - t * t * (0.426 + 0.042 * t))
    return _rotate_eq(asc, dec, zeta, z, theta)


def _ecliptic_change(T: float, t: float) -> Tuple[float, float, float]:
    """eta, Pi, p of Meeus 21.5 (radians)."""
    eta = _as(
        t * (47.0029 - T * (0.06603 - 0.000598 * T))
        + t * t * (-0.03302 + 0.000598 * T)
        + 0.000060 * t ** 3
    )
    Pi = math.radians(174.876384) + _as(
        T * (3289.4789 + 0.60622 * T)
        - t * (869.8089 + 0.50491 * T)
        + 0.03536 * t * t
    )
    p = _as(
        t * (5029.0966 + T * (2.22226 - 0.000042 * T))
        + t * t * (1.11113 - 0.000042 * T)
        - 0.000006 * t ** 3
    )
    return eta, Pi, p


def precess_ecl_coords(lon: float, lat: float, jd_old: float, jd_new: float) -> Tuple[float, float]:
    """Ecliptic longitude and latitude referred to another equinox (Meeus 21.7)."""
    T = julian_century(jd_old)
    t = (jd_new - jd_old) / 36525.0
    eta, Pi, p = _ecliptic_change(T, t)

    A = math.cos(eta) * math.cos(lat) * math.sin(Pi - lon) - math.sin(eta) * math.sin(lat)
    B = math.cos(lat) * math.cos(Pi - lon)
    C = math.cos(eta) * math.sin(lat) + math.sin(eta) * math.cos(lat) * math.sin(Pi - lon)
    return wrap_rad(p + Pi - math.atan2(A, B)), math.asin(C)


def precess_orbital_elements(
    inc: float,
    arg_perih: float,
    node: float,
    jd_old: float,
    jd_new: float,
) -> Tuple[float, float, float]:
    """
    Inclination, argument of perihelion and longitude of the ascending node
    referred to another equinox (Meeus 24.2). Returns (i, w, Omega).
    """
    T = julian_century(jd_old)
    t = (jd_new - jd_old) / 36525.0
    eta, Pi, p = _ecliptic_change(T, t)
    psi = Pi + p

    if inc == 0.0:
        return eta, arg_perih, wrap_rad(psi + math.pi)

    A = math.sin(inc) * math.sin(node - Pi)
    B = -math.sin(eta) * math.cos(inc) + math.cos(eta) * math.sin(inc) * math.cos(node - Pi)
    cos_i = math.cos(inc) * math.cos(eta) + math.sin(inc) * math.sin(eta) * math.cos(node - Pi)
    new_inc = math.atan2(math.hypot(A, B), cos_i)
    new_node = wrap_rad(psi + math.atan2(A, B))

    d_w = math.asin(-math.sin(eta) * math.sin(node - Pi) / math.sin(new_inc))
    return new_inc, wrap_rad(arg_perih + d_w), new_node
