# reference/earth.py

from __future__ import annotations

"""
astrocalc.reference.earth

The figure of the Earth (Meeus ch. 11) on the WGS84 ellipsoid. Latitudes
are geographic (geodetic), heights in metres, lengths in km.
"""

import math
from typing import Tuple

from ..core.angle import arcsec_to_rad
from ..core.types import GeographPoint


EQUATORIAL_RADIUS_KM = 6378.137
FLATTENING = 1.0 / 298.257223563
POLAR_RADIUS_KM = EQUATORIAL_RADIUS_KM * (1.0 - FLATTENING)
MEAN_RADIUS_KM = 6371.0

# rad/s, sidereal rotation
ROTATION_RATE = 7.292114992e-5


def flattening() -> float:
    return FLATTENING


def eccentricity() -> float:
    """Eccentricity of the meridian ellipse."""
    f = FLATTENING
    return math.sqrt(2.0 * f - f * f)


def rho_sin_cos_phi(lat: float, height_m: float) -> Tuple[float, float]:
    """
    (rho sin phi', rho cos phi') of an observer (Meeus 11.3).

    rho is the geocentric distance in units of the equatorial radius and
    phi' the geocentric latitude; these feed the parallax formulas.
    """
    ba = POLAR_RADIUS_KM / EQUATORIAL_RADIUS_KM
    u = math.atan(ba * math.tan(lat))
    x = height_m / (1000.0 * EQUATORIAL_RADIUS_KM)
    return ba * math.sin(u) + x * math.sin(lat), math.cos(u) + x * math.cos(lat)


def rho(lat: float) -> float:
    """Geocentric radius at sea level, equatorial radius = 1 (Meeus 11.2 series)."""
    return 0.9983271 + 0.0016764 * math.cos(2.0 * lat) - 0.0000035 * math.cos(4.0 * lat)


def geocentric_latitude_diff(lat: float) -> float:
    """phi - phi' (radians); 692.73" sin 2phi - 1.16" sin 4phi."""
    return arcsec_to_rad(692.73 * math.sin(2.0 * lat) - 1.16 * math.sin(4.0 * lat))


def radius_of_parallel(lat: float) -> float:
    """Radius of the parallel of latitude lat (km)."""
    e = eccentricity()
    s = math.sin(lat)
    return EQUATORIAL_RADIUS_KM * math.cos(lat) / math.sqrt(1.0 - e * e * s * s)


def linear_velocity_at_latitude(lat: float) -> float:
    """Speed of a point at latitude lat due to the Earth's rotation (km/s)."""
    return ROTATION_RATE * radius_of_parallel(lat)


def radius_of_curvature_of_meridian(lat: float) -> float:
    """Radius of curvature of the meridian at lat (km)."""
    e2 = eccentricity() ** 2
    s = math.sin(lat)
    return EQUATORIAL_RADIUS_KM * (1.0 - e2) / (1.0 - e2 * s * s) ** 1.5


def geodesic_distance(p1: GeographPoint, p2: GeographPoint) -> float:
    """
    Distance along the ellipsoid (km), Andoyer's formula as given by Meeus 11.

    About 50 m accuracy for points that are not nearly antipodal.
    Coincident points give 0.
    """
    F = (p1.lat + p2.lat) / 2.0
    G = (p1.lat - p2.lat) / 2.0
    lam = (p1.long - p2.long) / 2.0

    sG, cG = math.sin(G), math.cos(G)
    sF, cF = math.sin(F), math.cos(F)
    sl, cl = math.sin(lam), math.cos(lam)

    S = sG * sG * cl * cl + cF * cF * sl * sl
    C = cG * cG * cl * cl + sF * sF * sl * sl
    if S == 0.0:
        return 0.0
    w = math.atan(math.sqrt(S / C))
    R = math.sqrt(S * C) / w
    D = 2.0 * w * EQUATORIAL_RADIUS_KM
    H1 = (3.0 * R - 1.0) / (2.0 * C)
    H2 = (3.0 * R + 1.0) / (2.0 * S)
    f = FLATTENING
    return D * (1.0 + f * H1 * sF * sF * cG * cG - f * H2 * cF * cF * sG * sG)


def approx_geodesic_distance(p1: GeographPoint, p2: GeographPoint) -> float:
    """Great-circle distance on a sphere of radius 6371 km."""
    return MEAN_RADIUS_KM * p1.separation(p2)


def angle_between_diurnal_path_and_horizon(dec: float, observer_lat: float) -> float:
    """Angle at which a body of declination dec rises or sets (Meeus ch. 14)."""
    B = math.tan(dec) * math.tan(observer_lat)
    C = math.sqrt(1.0 - B * B)
    return math.atan2(C * math.cos(dec), math.tan(observer_lat))
