# reference/planets.py

from __future__ import annotations

"""
astrocalc.reference.planets

Planetary positions from the mean orbital elements of Meeus Table 31.A
(mean equinox of the date) and Kepler's equation.

Without the periodic perturbations this is good to a few hundredths of
a degree for the inner planets and a few tenths for Jupiter through
Neptune. Positions are heliocentric ecliptic (l, b, r) or geocentric,
with the light-time loop of Meeus ch. 33.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from ..core.angle import arcsec_to_rad, wrap_deg, wrap_rad
from ..core.config import SolverConfig, resolve
from ..core.errors import ConvergenceError
from ..core.types import EclPoint, EqPoint
from . import astro_args as aa
from .coords import eq_from_ecl
from .nutation import nutation
from .orbits import solve_kepler, true_anomaly
from .solar import ecl_coords_to_fk5

log = logging.getLogger(__name__)

# days per AU of light travel
LIGHT_TIME_DAYS_PER_AU = 0.0057755183

# constant of aberration
_KAPPA = arcsec_to_rad(20.49552)


class Planet(Enum):
    MERCURY = "mercury"
    VENUS = "venus"
    EARTH = "earth"
    MARS = "mars"
    JUPITER = "jupiter"
    SATURN = "saturn"
    URANUS = "uranus"
    NEPTUNE = "neptune"

    @classmethod
    def parse(cls, value: Planet | str) -> Planet:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower().strip())
        except ValueError:
            names = ", ".join(p.value for p in cls)
            raise ValueError(f"planet must be one of: {names}") from None


# Meeus Table 31.A, degrees and AU; coefficients of T^0..T^3.
# (L, a, e, i, Omega, varpi)
_ELEMENTS = {
    Planet.MERCURY: (
        (252.250906, 149474.0722491, 0.00030350, 0.000000018),
        (0.387098310,),
        (0.20563175, 0.000020407, -0.0000000283, -0.00000000018),
        (7.004986, 0.0018215, -0.00001810, 0.000000056),
        (48.330893, 1.1861883, 0.00017542, 0.000000215),
        (77.456119, 1.5564776, 0.00029544, 0.000000009),
    ),
    Planet.VENUS: (
        (181.979801, 58519.2130302, 0.00031014, 0.000000015),
        (0.723329820,),
        (0.00677192, -0.000047765, 0.0000000981, 0.00000000046),
        (3.394662, 0.0010037, -0.00000088, -0.000000007),
        (76.679920, 0.9011206, 0.00040618, -0.000000093),
        (131.563703, 1.4022288, -0.00107618, -0.000005678),
    ),
    Planet.EARTH: (
        (100.466457, 36000.7698278, 0.00030322, 0.000000020),
        (1.000001018,),
        (0.01670863, -0.000042037, -0.0000001267, 0.00000000014),
        (0.0,),
        (0.0,),
        (102.937348, 1.7195366, 0.00045688, -0.000000018),
    ),
    Planet.MARS: (
        (355.433000, 19141.6964471, 0.00031052, 0.000000016),
        (1.523679342,),
        (0.09340065, 0.000090484, -0.0000000806, -0.00000000025),
        (1.849726, -0.0006011, 0.00001276, -0.000000007),
        (49.558093, 0.7720959, 0.00001557, 0.000002267),
        (336.060234, 1.8410449, 0.00013477, 0.000000536),
    ),
    Planet.JUPITER: (
        (34.351519, 3036.3027748, 0.00022330, 0.000000037),
        (5.202603209, 0.0000001913),
        (0.04849793, 0.000163225, -0.0000004714, -0.00000000201),
        (1.303267, -0.0054965, 0.00000466, -0.000000002),
        (100.464407, 1.0209774, 0.00040315, 0.000000404),
        (14.331207, 1.6126352, 0.00103042, -0.000004464),
    ),
    Planet.SATURN: (
        (50.077444, 1223.5110686, 0.00051908, -0.000000030),
        (9.554909192, -0.0000021390, 0.000000004),
        (0.05554814, -0.000346641, -0.0000006436, 0.00000000340),
        (2.488879, -0.0037362, -0.00001519, 0.000000087),
        (113.665503, 0.8770880, -0.00012176, -0.000002249),
        (93.057237, 1.9637613, 0.00083753, 0.000004928),
    ),
    Planet.URANUS: (
        (314.055005, 429.8640561, 0.00030390, -0.000000026),
        (19.218446062, -0.0000000372, 0.00000000098),
        (0.04638122, -0.000027293, 0.0000000789, 0.00000000024),
        (0.773197, 0.0007744, 0.00003749, -0.000000092),
        (74.005957, 0.5211278, 0.00133947, 0.000018484),
        (173.005291, 1.4863790, 0.00021406, 0.000000434),
    ),
    Planet.NEPTUNE: (
        (304.348665, 219.8833092, 0.00030882, 0.000000018),
        (30.110386869, -0.0000001663, 0.00000000069),
        (0.00945575, 0.000006033, 0.0, -0.00000000005),
        (1.769953, -0.0093082, -0.00000708, 0.000000027),
        (131.784057, 1.1022039, 0.00025952, -0.000000637),
        (48.120276, 1.4262957, 0.00038434, 0.000000020),
    ),
}


def _poly(T: float, coeffs: Tuple[float, ...]) -> float:
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * T + c
    return acc


@dataclass(frozen=True)
class OrbitalElements:
    """Mean elements of date; angles in radians, a in AU."""
    L: float          # mean longitude
    a: float
    e: float
    i: float
    node: float       # longitude of the ascending node
    perihelion: float  # longitude of the perihelion (varpi)

    @property
    def arg_perihelion(self) -> float:
        """omega = varpi - Omega"""
        return wrap_rad(self.perihelion - self.node)

    @property
    def mean_anomaly(self) -> float:
        """M = L - varpi"""
        return wrap_rad(self.L - self.perihelion)

    @property
    def L_deg(self) -> float: return math.degrees(self.L)
    @property
    def i_deg(self) -> float: return math.degrees(self.i)
    @property
    def node_deg(self) -> float: return math.degrees(self.node)
    @property
    def perihelion_deg(self) -> float: return math.degrees(self.perihelion)


def orbital_elements(planet: Planet | str, jd_tt: float) -> OrbitalElements:
    planet = Planet.parse(planet)
    T = aa.T_centuries(jd_tt)
    L, a, e, i, node, peri = (_poly(T, c) for c in _ELEMENTS[planet])
    return OrbitalElements(
        L=math.radians(wrap_deg(L)),
        a=a,
        e=e,
        i=math.radians(i),
        node=math.radians(wrap_deg(node)),
        perihelion=math.radians(wrap_deg(peri)),
    )


@dataclass(frozen=True)
class HeliocentricPosition:
    """Heliocentric ecliptic longitude, latitude (radians) and radius vector (AU)."""
    longitude: float
    latitude: float
    radius: float

    @property
    def longitude_deg(self) -> float: return math.degrees(self.longitude)
    @property
    def latitude_deg(self) -> float: return math.degrees(self.latitude)


def heliocentric_position(planet: Planet | str, jd_tt: float, config: SolverConfig | None = None) -> HeliocentricPosition:
    """Position of the planet on its mean Keplerian orbit, mean ecliptic and equinox of date."""
    el = orbital_elements(planet, jd_tt)
    E = solve_kepler(el.mean_anomaly, el.e, config)
    v = true_anomaly(E, el.e)
    r = el.a * (1.0 - el.e * math.cos(E))

    u = el.arg_perihelion + v
    lon = math.atan2(math.cos(el.i) * math.sin(u), math.cos(u)) + el.node
    lat = math.asin(math.sin(el.i) * math.sin(u))
    return HeliocentricPosition(longitude=wrap_rad(lon), latitude=lat, radius=r)


@dataclass(frozen=True)
class GeocentricPosition:
    """Geometric geocentric ecliptic position after the light-time correction."""
    longitude: float
    latitude: float
    distance: float      # AU
    light_time: float    # days
    iterations: int = 0

    @property
    def longitude_deg(self) -> float: return math.degrees(self.longitude)
    @property
    def latitude_deg(self) -> float: return math.degrees(self.latitude)


def geocentric_from_heliocentric(planet: HeliocentricPosition, earth: HeliocentricPosition) -> GeocentricPosition:
    """Rectangular difference of two heliocentric vectors, back to spherical (Meeus 33.1)."""
    l, b, r = planet.longitude, planet.latitude, planet.radius
    L0, B0, R0 = earth.longitude, earth.latitude, earth.radius
    x = r * math.cos(b) * math.cos(l) - R0 * math.cos(B0) * math.cos(L0)
    y = r * math.cos(b) * math.sin(l) - R0 * math.cos(B0) * math.sin(L0)
    z = r * math.sin(b) - R0 * math.sin(B0)
    dist = math.sqrt(x * x + y * y + z * z)
    return GeocentricPosition(
        longitude=wrap_rad(math.atan2(y, x)),
        latitude=math.atan2(z, math.hypot(x, y)),
        distance=dist,
        light_time=LIGHT_TIME_DAYS_PER_AU * dist,
    )


def geocentric_position(planet: Planet | str, jd_tt: float, config: SolverConfig | None = None) -> GeocentricPosition:
    """
    Geocentric position corrected for light time.

    The planet is recomputed at jd - tau, tau = 0.0057755183 * Delta, until
    tau changes by less than light_time_tolerance; ConvergenceError past
    light_time_max_iter rounds. The Earth stays at jd.
    """
    planet = Planet.parse(planet)
    if planet is Planet.EARTH:
        raise ValueError("geocentric position of the Earth is undefined")
    cfg = resolve(config)
    earth = heliocentric_position(Planet.EARTH, jd_tt, cfg)

    tau = 0.0
    delta = float("inf")
    for i in range(1, cfg.light_time_max_iter + 1):
        geo = geocentric_from_heliocentric(heliocentric_position(planet, jd_tt - tau, cfg), earth)
        delta = abs(geo.light_time - tau)
        tau = geo.light_time
        if delta < cfg.light_time_tolerance:
            log.debug("light time for %s converged in %d iterations (tau=%.9f d)", planet.value, i, tau)
            return GeocentricPosition(geo.longitude, geo.latitude, geo.distance, geo.light_time, i)

    log.warning("light time for %s did not converge after %d iterations", planet.value, cfg.light_time_max_iter)
    raise ConvergenceError(
        f"light-time iteration for {planet.value} did not converge",
        iterations=cfg.light_time_max_iter,
        last_delta=delta,
    )


@dataclass(frozen=True)
class ApparentPosition:
    eq: EqPoint
    ecl: EclPoint
    distance: float
    light_time: float


def _ecliptic_aberration(lon: float, lat: float, jd_tt: float) -> Tuple[float, float]:
    """Annual aberration in ecliptic coordinates (Meeus 23.2)."""
    T = aa.T_centuries(jd_tt)
    e = 0.016708634 - 0.000042037 * T - 0.0000001267 * T * T
    pi = math.radians(102.93735 + 1.71946 * T + 0.00046 * T * T)
    sun = heliocentric_position(Planet.EARTH, jd_tt)
    sun_long = wrap_rad(sun.longitude + math.pi)
    d_lon = (-_KAPPA * math.cos(sun_long - lon) + e * _KAPPA * math.cos(pi - lon)) / math.cos(lat)
    d_lat = -_KAPPA * math.sin(lat) * (math.sin(sun_long - lon) - e * math.sin(pi - lon))
    return d_lon, d_lat


def apparent_position(planet: Planet | str, jd_tt: float, config: SolverConfig | None = None) -> ApparentPosition:
    """
    Apparent geocentric position: light time, FK5 correction, aberration and
    nutation applied in that order; equatorial coordinates use the true obliquity.
    """
    geo = geocentric_position(planet, jd_tt, config)
    lon, lat = ecl_coords_to_fk5(jd_tt, geo.longitude, geo.latitude)
    d_lon, d_lat = _ecliptic_aberration(lon, lat, jd_tt)
    nut = nutation(jd_tt)
    lon = wrap_rad(lon + d_lon + nut.longitude)
    lat = lat + d_lat
    eps = aa.mean_obliquity(jd_tt) + nut.obliquity

    ecl = EclPoint(long=lon, lat=lat)
    return ApparentPosition(eq=eq_from_ecl(ecl, eps), ecl=ecl, distance=geo.distance, light_time=geo.light_time)


# ------------------------------------------------------------
# Semidiameters and illumination (Meeus ch. 41, 55)
# ------------------------------------------------------------

# semidiameter at 1 AU, arcsec
_SEMIDIAMETER_1AU = {
    Planet.MERCURY: 3.36,
    Planet.VENUS: 8.41,
    Planet.MARS: 4.68,
    Planet.JUPITER: 98.44,
    Planet.SATURN: 82.73,
    Planet.URANUS: 35.02,
    Planet.NEPTUNE: 33.50,
}

_POLAR_SEMIDIAMETER_1AU = {
    Planet.JUPITER: 92.06,
    Planet.SATURN: 73.82,
}


def semidiameter(planet: Planet | str, dist_au: float, polar: bool = False) -> float:
    """
    Geocentric semidiameter (radians) at dist_au from the Earth.

    polar=True gives the polar value for Jupiter and Saturn; for the other
    planets it is the same as the equatorial one.
    """
    planet = Planet.parse(planet)
    if planet is Planet.EARTH:
        raise ValueError("semidiameter of the Earth seen from the Earth is undefined")
    s = _SEMIDIAMETER_1AU[planet]
    if polar:
        s = _POLAR_SEMIDIAMETER_1AU.get(planet, s)
    return arcsec_to_rad(s / dist_au)


def saturn_apparent_polar_semidiameter(dist_au: float, earth_lat: float) -> float:
    """
    Apparent polar semidiameter of Saturn, foreshortened by the
    Saturnicentric latitude of the Earth earth_lat (Meeus ch. 55).
    """
    a = _SEMIDIAMETER_1AU[Planet.SATURN]
    b = _POLAR_SEMIDIAMETER_1AU[Planet.SATURN]
    k = 1.0 - (b / a) ** 2
    c = math.cos(earth_lat)
    return arcsec_to_rad(a / dist_au * math.sqrt(1.0 - k * c * c))


def phase_angle(r: float, delta: float, R: float) -> float:
    """Sun-planet-Earth angle i from the three distances (Meeus 41.1)."""
    return math.acos((r * r + delta * delta - R * R) / (2.0 * r * delta))


def illuminated_fraction(r: float, delta: float, R: float) -> float:
    """Illuminated fraction k of the planet's disk (Meeus 41.2)."""
    return ((r + delta) ** 2 - R * R) / (4.0 * r * delta)
