# reference/stars.py

from __future__ import annotations

"""
Stellar magnitudes, space motion, binary-star orbits and asteroid sizes
(Meeus ch. 21, 56, 57 and the asteroid notes of ch. 55).

Angles are radians; years are decimal years.
"""

import math
from typing import Iterable, Tuple

from ..core.angle import TAU, arcsec_to_rad, rad_to_arcsec, wrap_rad


# ------------------------------------------------------------
# Magnitudes (Meeus ch. 56)
# ------------------------------------------------------------

def brightness_ratio(m1: float, m2: float) -> float:
    """How many times star 1 is brighter than star 2."""
    return 10.0 ** (0.4 * (m2 - m1))


def magnitude_difference(ratio: float) -> float:
    return 2.5 * math.log10(ratio)


def combined_magnitude(m1: float, m2: float) -> float:
    """Magnitude of two stars seen as one (Meeus 56.1)."""
    return m2 - 2.5 * math.log10(brightness_ratio(m1, m2) + 1.0)


def combined_magnitude_of_many(mags: Iterable[float]) -> float:
    total = sum(10.0 ** (-0.4 * m) for m in mags)
    if total == 0.0:
        raise ValueError("need at least one magnitude")
    return -2.5 * math.log10(total)


def absolute_magnitude_from_parallax(parallax: float, app_mag: float) -> float:
    """Absolute magnitude from the annual parallax (radians)."""
    return app_mag + 5.0 + 5.0 * math.log10(rad_to_arcsec(parallax))


def absolute_magnitude_from_distance(dist_pc: float, app_mag: float) -> float:
    return app_mag + 5.0 - 5.0 * math.log10(dist_pc)


# ------------------------------------------------------------
# Space motion (Meeus ch. 21)
# ------------------------------------------------------------

def eq_coords_from_motion(
    asc: float,
    dec: float,
    r: float,
    dr: float,
    pm_asc: float,
    pm_dec: float,
    t: float,
) -> Tuple[float, float]:
    """
    (asc, dec) t years from the epoch, combining proper motion with the
    change in distance.

    r is the distance in parsecs and dr the radial velocity in parsecs per
    year; pm_asc and pm_dec are annual proper motions in radians.
    """
    x = r * math.cos(dec) * math.cos(asc)
    y = r * math.cos(dec) * math.sin(asc)
    z = r * math.sin(dec)

    d_asc = 3600.0 * math.degrees(pm_asc) / 13751.0
    d_dec = 3600.0 * math.degrees(pm_dec) / 206265.0

    dx = x / r * dr - z * d_dec * math.cos(asc) - y * d_asc
    dy = y / r * dr - z * d_dec * math.sin(asc) + x * d_asc
    dz = z / r * dr + r * d_dec * math.cos(dec)

    x1, y1, z1 = x + t * dx, y + t * dy, z + t * dz
    return wrap_rad(math.atan2(y1, x1)), math.atan2(z1, math.hypot(x1, y1))


def proper_motion_in_ecl_coords(
    asc: float,
    dec: float,
    pm_asc: float,
    pm_dec: float,
    ecl_lat: float,
    oblq: float,
) -> Tuple[float, float]:
    """Proper motion (d_long, d_lat) in ecliptic coordinates from the equatorial one."""
    cb = math.cos(ecl_lat)
    k = math.cos(oblq) * math.cos(dec) + math.sin(oblq) * math.sin(dec) * math.sin(asc)
    d_long = (pm_dec * math.sin(oblq) * math.cos(asc) + pm_asc * math.cos(dec) * k) / (cb * cb)
    d_lat = (pm_dec * k - pm_asc * math.sin(oblq) * math.cos(asc) * math.cos(dec)) / cb
    return d_long, d_lat


def angle_between_north_celestial_and_ecliptic_pole(ecl_long: float, ecl_lat: float, oblq: float) -> float:
    """Angle at the star between the directions to the two north poles."""
    return math.atan2(
        math.cos(ecl_long) * math.tan(oblq),
        math.sin(ecl_lat) * math.sin(ecl_long) * math.tan(oblq) - math.cos(ecl_lat),
    )


# ------------------------------------------------------------
# Binary stars (Meeus ch. 57)
# ------------------------------------------------------------

def binary_mean_annual_motion(period_years: float) -> float:
    return TAU / period_years


def binary_mean_anomaly(n: float, t: float, T: float) -> float:
    """n mean annual motion, t the epoch and T the time of periastron, in years."""
    return n * (t - T)


def binary_radius_vector(a: float, ecc: float, ecc_anom: float) -> float:
    return a * (1.0 - ecc * math.cos(ecc_anom))


def binary_true_anomaly(ecc: float, ecc_anom: float) -> float:
    return 2.0 * math.atan(math.sqrt((1.0 + ecc) / (1.0 - ecc)) * math.tan(ecc_anom / 2.0))


def binary_position_angle(node: float, true_anom: float, w: float, inc: float) -> float:
    """Apparent position angle of the companion, from the north toward the east."""
    u = true_anom + w
    return wrap_rad(math.atan2(math.sin(u) * math.cos(inc), math.cos(u)) + node)


def binary_angular_separation(radius: float, true_anom: float, w: float, inc: float) -> float:
    """Apparent separation, in the units of the radius vector."""
    u = true_anom + w
    return radius * math.hypot(math.sin(u) * math.cos(inc), math.cos(u))


def binary_apparent_eccentricity(ecc: float, w: float, inc: float) -> float:
    """Eccentricity of the orbit as projected on the sky."""
    ci = math.cos(inc)
    ec, es = ecc * math.cos(w), ecc * math.sin(w)
    A = (1.0 - ec * ec) * ci * ci
    B = es * ec * ci
    C = 1.0 - es * es
    D = math.sqrt((A - C) ** 2 + 4.0 * B * B)
    return math.sqrt(2.0 * D / (A + C + D))


# ------------------------------------------------------------
# Asteroids
# ------------------------------------------------------------

def asteroid_diameter(abs_mag: float, albedo: float) -> float:
    """Diameter in km from the absolute magnitude H and the geometric albedo."""
    return 10.0 ** (3.12 - abs_mag / 5.0 - 0.217147 * math.log10(albedo))


def asteroid_apparent_diameter(diameter_km: float, dist_au: float) -> float:
    """Apparent diameter (radians) at dist_au from the Earth."""
    return arcsec_to_rad(1.3788 * diameter_km / dist_au)
