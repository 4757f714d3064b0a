from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .core.angle import wrap_rad
from .core.config import SolverConfig
from .core.time import CalendarKind, decimal_day, julian_day
from .core.types import EclPoint, EqPoint
from .reference import astro_args as aa
from .reference import lunar, planets, solar
from .reference.coords import eq_from_ecl
from .reference.nutation import nutation
from .reference.sidereal import apparent_sidereal_time, mean_sidereal_time

AU_KM = 149597870.7


def jd(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
    calendar: CalendarKind | str = "gregorian",
) -> float:
    """Julian Day of a calendar date and time of day."""
    return julian_day(year, month, decimal_day(day, hour, minute, second), calendar)


# ============================================================
# Reports
# ============================================================

@dataclass(frozen=True)
class NutationReport:
    jd: float
    nut_long: float
    nut_oblq: float
    mean_oblq: float
    true_oblq: float
    mean_sidereal: float
    apparent_sidereal: float

    @property
    def nut_long_arcsec(self) -> float: return math.degrees(self.nut_long) * 3600.0
    @property
    def nut_oblq_arcsec(self) -> float: return math.degrees(self.nut_oblq) * 3600.0


def nutation_report(jd: float) -> NutationReport:
    """
    Nutation, obliquity and sidereal time at jd.

    jd serves both as JDE for the nutation and as UT for sidereal time;
    the difference (delta T) is below the precision printed by the CLI.
    """
    nut = nutation(jd)
    eps0 = aa.mean_obliquity(jd)
    eps = eps0 + nut.obliquity
    mst = mean_sidereal_time(jd)
    return NutationReport(
        jd=jd,
        nut_long=nut.longitude,
        nut_oblq=nut.obliquity,
        mean_oblq=eps0,
        true_oblq=eps,
        mean_sidereal=mst,
        apparent_sidereal=apparent_sidereal_time(mst, nut.longitude, eps),
    )


@dataclass(frozen=True)
class SunReport:
    jd: float
    position: solar.SolarPosition
    semidiameter: float
    equation_of_time: float
    physical: solar.SolarEphemeris

    @property
    def equation_of_time_minutes(self) -> float:
        return math.degrees(self.equation_of_time) * 4.0


def sun_report(jd: float) -> SunReport:
    pos = solar.sun_position(jd)
    nut = nutation(jd)
    eps = aa.mean_obliquity(jd) + nut.obliquity

    # apparent longitude with aberration only, then with nutation as well
    lam = pos.true_long - math.radians(0.00569)
    phys = solar.ephemeris(jd, lam, lam + nut.longitude, eps)

    return SunReport(
        jd=jd,
        position=pos,
        semidiameter=solar.semidiameter(pos.radius),
        equation_of_time=solar.equation_of_time(jd, pos.eq.asc, nut.longitude, eps),
        physical=phys,
    )


@dataclass(frozen=True)
class MoonReport:
    jd: float
    position: lunar.LunarPosition
    apparent: EclPoint
    eq: EqPoint
    semidiameter: float
    illuminated_fraction: float
    bright_limb_angle: float
    libration: lunar.Libration
    axis_position_angle: float


def moon_report(jd: float) -> MoonReport:
    pos = lunar.moon_position(jd)
    nut = nutation(jd)
    eps = aa.mean_obliquity(jd) + nut.obliquity

    app = EclPoint(long=wrap_rad(pos.longitude + nut.longitude), lat=pos.latitude)
    moon_eq = eq_from_ecl(app, eps)
    sun = solar.sun_position(jd)

    lib = lunar.librations(jd, app.long, app.lat, nut.longitude)
    return MoonReport(
        jd=jd,
        position=pos,
        apparent=app,
        eq=moon_eq,
        semidiameter=lunar.semidiameter(pos.distance_km),
        illuminated_fraction=lunar.illuminated_fraction(moon_eq, sun.eq, pos.distance_km, sun.radius * AU_KM),
        bright_limb_angle=lunar.bright_limb_position_angle(moon_eq, sun.eq),
        libration=lib,
        axis_position_angle=lunar.position_angle_of_axis(jd, lib.total_lat, nut.longitude, eps, moon_eq.asc),
    )


@dataclass(frozen=True)
class PlanetReport:
    planet: planets.Planet
    jd: float
    heliocentric: planets.HeliocentricPosition
    apparent: planets.ApparentPosition
    phase_angle: float
    illuminated_fraction: float
    semidiameter: float


def planet_report(name: planets.Planet | str, jd: float, config: Optional[SolverConfig] = None) -> PlanetReport:
    planet = planets.Planet.parse(name)
    app = planets.apparent_position(planet, jd, config)
    helio = planets.heliocentric_position(planet, jd - app.light_time, config)
    R = planets.heliocentric_position(planets.Planet.EARTH, jd, config).radius
    return PlanetReport(
        planet=planet,
        jd=jd,
        heliocentric=helio,
        apparent=app,
        phase_angle=planets.phase_angle(helio.radius, app.distance, R),
        illuminated_fraction=planets.illuminated_fraction(helio.radius, app.distance, R),
        semidiameter=planets.semidiameter(planet, app.distance),
    )
