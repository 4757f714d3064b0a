# reference/solar.py

from __future__ import annotations

"""
Solar position (Meeus ch. 25, low accuracy), rectangular coordinates,
the FK5 correction and the physical ephemeris of ch. 29.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from ..core.angle import arcsec_to_rad, wrap_deg, wrap_rad
from ..core.time import julian_millennium
from ..core.types import EqPoint
from . import astro_args as aa


@dataclass(frozen=True)
class SolarPosition:
    mean_long: float
    mean_anomaly: float
    true_long: float
    apparent_long: float
    radius: float        # AU
    eq: EqPoint          # apparent, true obliquity corrected by 0.00256 cos(Omega)

    @property
    def true_long_deg(self) -> float: return math.degrees(self.true_long)
    @property
    def apparent_long_deg(self) -> float: return math.degrees(self.apparent_long)


def sun_position(jd_tt: float) -> SolarPosition:
    """
    Geometric and apparent position of the Sun from the Earth's Keplerian
    orbit plus the equation of centre (Meeus 25.2-25.8). Good to 0.01 deg.
    """
    T = aa.T_centuries(jd_tt)
    L0 = wrap_deg(280.46646 + T * (36000.76983 + 0.0003032 * T))
    M = wrap_deg(357.52911 + T * (35999.05029 - 0.0001537 * T))
    e = 0.016708634 - T * (0.000042037 + 0.0000001267 * T)

    Mr = math.radians(M)
    C = (
        (1.914602 - T * (0.004817 + 0.000014 * T)) * math.sin(Mr)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * Mr)
        + 0.000289 * math.sin(3.0 * Mr)
    )
    true_long = L0 + C
    v = math.radians(M + C)
    R = 1.000001018 * (1.0 - e * e) / (1.0 + e * math.cos(v))

    omega = math.radians(125.04 - 1934.136 * T)
    app_long = math.radians(true_long - 0.00569 - 0.00478 * math.sin(omega))
    eps = aa.mean_obliquity(jd_tt) + math.radians(0.00256 * math.cos(omega))

    asc = math.atan2(math.cos(eps) * math.sin(app_long), math.cos(app_long))
    dec = math.asin(math.sin(eps) * math.sin(app_long))

    return SolarPosition(
        mean_long=math.radians(L0),
        mean_anomaly=Mr,
        true_long=math.radians(wrap_deg(true_long)),
        apparent_long=wrap_rad(app_long),
        radius=R,
        eq=EqPoint(asc=wrap_rad(asc), dec=dec),
    )


def semidiameter(dist_au: float) -> float:
    return arcsec_to_rad(959.63) / dist_au


def geocentric_rect_coords(sun_long: float, sun_lat: float, R: float, oblq: float) -> Tuple[float, float, float]:
    """
    Rectangular equatorial coordinates (x, y, z) of the Sun in AU from its
    geometric ecliptic position; x toward the equinox, z toward the pole.
    """
    cb = math.cos(sun_lat)
    x = R * cb * math.cos(sun_long)
    y = R * (cb * math.sin(sun_long) * math.cos(oblq) - math.sin(sun_lat) * math.sin(oblq))
    z = R * (cb * math.sin(sun_long) * math.sin(oblq) + math.sin(sun_lat) * math.cos(oblq))
    return x, y, z


def ecl_coords_to_fk5(jd_tt: float, ecl_long: float, ecl_lat: float) -> Tuple[float, float]:
    """Ecliptic coordinates of the dynamical equinox referred to FK5 (Meeus 32.3)."""
    T = aa.T_centuries(jd_tt)
    lam1 = ecl_long - math.radians(T * (1.397 + 0.00031 * T))
    d_lat = arcsec_to_rad(0.03916) * (math.cos(lam1) - math.sin(lam1))
    return wrap_rad(ecl_long - arcsec_to_rad(0.09033)), ecl_lat + d_lat


@dataclass(frozen=True)
class SolarEphemeris:
    """Quantities for physical observations of the Sun (radians)."""
    P: float    # position angle of the northern rotation axis
    B0: float   # heliographic latitude of the disk centre
    L0: float   # heliographic longitude of the disk centre

    @property
    def P_deg(self) -> float: return math.degrees(self.P)
    @property
    def B0_deg(self) -> float: return math.degrees(self.B0)
    @property
    def L0_deg(self) -> float: return math.degrees(self.L0)


_SOLAR_EQUATOR_INCLINATION = math.radians(7.25)


def ephemeris(jd_tt: float, app_long: float, app_long_with_nut: float, true_oblq: float) -> SolarEphemeris:
    """
    P, B0, L0 (Meeus ch. 29).

    app_long includes aberration but not nutation; app_long_with_nut
    includes both.
    """
    theta = math.radians(wrap_deg((jd_tt - 2398220.0) * 360.0 / 25.38))
    I = _SOLAR_EQUATOR_INCLINATION
    K = math.radians(73.6667 + 1.3958333 * (jd_tt - 2396758.0) / 36525.0)

    z = app_long - K
    x = math.atan(-math.cos(app_long_with_nut) * math.tan(true_oblq))
    y = math.atan(-math.cos(z) * math.tan(I))

    B0 = math.asin(math.sin(z) * math.sin(I))
    nu = math.atan2(-math.sin(z) * math.cos(I), -math.cos(z))
    return SolarEphemeris(P=x + y, B0=B0, L0=wrap_rad(nu - theta))


def synodic_rotation(C: int) -> float:
    """
    JDE of the start of Carrington synodic rotation C. Within 0.002 day
    between 1850 and 2100.
    """
    M = math.radians(281.96 + 26.882476 * C)
    return (
        2398140.227 + 27.2752316 * C
        + 0.1454 * math.sin(M)
        - 0.0085 * math.sin(2.0 * M)
        - 0.0141 * math.cos(2.0 * M)
    )


def sun_mean_longitude(jd_tt: float) -> float:
    """Mean longitude of the Sun referred to the mean equinox of date (Meeus 28.2)."""
    t = julian_millennium(jd_tt)
    L0 = 280.4664567 + t * (360007.6982779 + t * (0.03032028 + t * (1.0 / 49931.0 + t * (-1.0 / 15300.0 - t / 2000000.0))))
    return math.radians(wrap_deg(L0))


def equation_of_time(jd_tt: float, sun_asc: float, nut_long: float, true_oblq: float) -> float:
    """
    Apparent minus mean solar time (Meeus 28.3), radians in [-pi, pi).
    Multiply degrees by 4 for minutes of time.
    """
    E = sun_mean_longitude(jd_tt) - math.radians(0.0057183) - sun_asc + nut_long * math.cos(true_oblq)
    return (E + math.pi) % (2.0 * math.pi) - math.pi
