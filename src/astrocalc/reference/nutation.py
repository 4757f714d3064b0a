# reference/nutation.py

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.angle import arcsec_to_rad, rad_to_arcsec
from . import astro_args as aa
from .series import SeriesTerm, sum_series, terms_from_rows


# Meeus Table 22.A (IAU 1980 theory), units of 0.0001".
# (D, M, M', F, Omega), dpsi coef, dpsi rate per century, deps coef, deps rate per century
_NUTATION_ROWS = (
    ((0, 0, 0, 0, 1), -171996, -174.2, 92025, 8.9),
    ((-2, 0, 0, 2, 2), -13187, -1.6, 5736, -3.1),
    ((0, 0, 0, 2, 2), -2274, -0.2, 977, -0.5),
    ((0, 0, 0, 0, 2), 2062, 0.2, -895, 0.5),
    ((0, 1, 0, 0, 0), 1426, -3.4, 54, -0.1),
    ((0, 0, 1, 0, 0), 712, 0.1, -7, 0.0),
    ((-2, 1, 0, 2, 2), -517, 1.2, 224, -0.6),
    ((0, 0, 0, 2, 1), -386, -0.4, 200, 0.0),
    ((0, 0, 1, 2, 2), -301, 0.0, 129, -0.1),
    ((-2, -1, 0, 2, 2), 217, -0.5, -95, 0.3),
    ((-2, 0, 1, 0, 0), -158, 0.0, 0, 0.0),
    ((-2, 0, 0, 2, 1), 129, 0.1, -70, 0.0),
    ((0, 0, -1, 2, 2), 123, 0.0, -53, 0.0),
    ((2, 0, 0, 0, 0), 63, 0.0, 0, 0.0),
    ((0, 0, 1, 0, 1), 63, 0.1, -33, 0.0),
    ((2, 0, -1, 2, 2), -59, 0.0, 26, 0.0),
    ((0, 0, -1, 0, 1), -58, -0.1, 32, 0.0),
    ((0, 0, 1, 2, 1), -51, 0.0, 27, 0.0),
    ((-2, 0, 2, 0, 0), 48, 0.0, 0, 0.0),
    ((0, 0, -2, 2, 1), 46, 0.0, -24, 0.0),
    ((2, 0, 0, 2, 2), -38, 0.0, 16, 0.0),
    ((0, 0, 2, 2, 2), -31, 0.0, 13, 0.0),
    ((0, 0, 2, 0, 0), 29, 0.0, 0, 0.0),
    ((-2, 0, 1, 2, 2), 29, 0.0, -12, 0.0),
    ((0, 0, 0, 2, 0), 26, 0.0, 0, 0.0),
    ((-2, 0, 0, 2, 0), -22, 0.0, 0, 0.0),
    ((0, 0, -1, 2, 1), 21, 0.0, -10, 0.0),
    ((0, 2, 0, 0, 0), 17, -0.1, 0, 0.0),
    ((2, 0, -1, 0, 1), 16, 0.0, -8, 0.0),
    ((-2, 2, 0, 2, 2), -16, 0.1, 7, 0.0),
    ((0, 1, 0, 0, 1), -15, 0.0, 9, 0.0),
    ((-2, 0, 1, 0, 1), -13, 0.0, 7, 0.0),
    ((0, -1, 0, 0, 1), -12, 0.0, 6, 0.0),
    ((0, 0, 2, -2, 0), 11, 0.0, 0, 0.0),
    ((2, 0, -1, 2, 1), -10, 0.0, 5, 0.0),
    ((2, 0, 1, 2, 2), -8, 0.0, 3, 0.0),
    ((0, 1, 0, 2, 2), 7, 0.0, -3, 0.0),
    ((-2, 1, 1, 0, 0), -7, 0.0, 0, 0.0),
    ((0, -1, 0, 2, 2), -7, 0.0, 3, 0.0),
    ((2, 0, 0, 2, 1), -7, 0.0, 3, 0.0),
    ((2, 0, 1, 0, 0), 6, 0.0, 0, 0.0),
    ((-2, 0, 2, 2, 2), 6, 0.0, -3, 0.0),
    ((-2, 0, 1, 2, 1), 6, 0.0, -3, 0.0),
    ((2, 0, -2, 0, 1), -6, 0.0, 3, 0.0),
    ((2, 0, 0, 0, 1), -6, 0.0, 3, 0.0),
    ((0, -1, 1, 0, 0), 5, 0.0, 0, 0.0),
    ((-2, -1, 0, 2, 1), -5, 0.0, 3, 0.0),
    ((-2, 0, 0, 0, 1), -5, 0.0, 3, 0.0),
    ((0, 0, 2, 2, 1), -5, 0.0, 3, 0.0),
    ((-2, 0, 2, 0, 1), 4, 0.0, 0, 0.0),
    ((-2, 1, 0, 2, 1), 4, 0.0, 0, 0.0),
    ((0, 0, 1, -2, 0), 4, 0.0, 0, 0.0),
    ((-1, 0, 1, 0, 0), -4, 0.0, 0, 0.0),
    ((-2, 1, 0, 0, 0), -4, 0.0, 0, 0.0),
    ((1, 0, 0, 0, 0), -4, 0.0, 0, 0.0),
    ((0, 0, 1, 2, 0), 3, 0.0, 0, 0.0),
    ((0, 0, -2, 2, 2), -3, 0.0, 0, 0.0),
    ((-1, -1, 1, 0, 0), -3, 0.0, 0, 0.0),
    ((0, 1, 1, 0, 0), -3, 0.0, 0, 0.0),
    ((0, -1, 1, 2, 2), -3, 0.0, 0, 0.0),
    ((2, -1, -1, 2, 2), -3, 0.0, 0, 0.0),
    ((0, 0, 3, 2, 2), -3, 0.0, 0, 0.0),
    ((2, -1, 0, 2, 2), -3, 0.0, 0, 0.0),
)

NUTATION_TERMS: tuple[SeriesTerm, ...] = terms_from_rows(_NUTATION_ROWS)

_UNIT_ARCSEC = 0.0001


@dataclass(frozen=True)
class Nutation:
    """Nutation in ecliptic longitude (dpsi) and in obliquity (deps), radians."""
    longitude: float
    obliquity: float

    @property
    def longitude_arcsec(self) -> float: return rad_to_arcsec(self.longitude)
    @property
    def obliquity_arcsec(self) -> float: return rad_to_arcsec(self.obliquity)


def nutation(jd_tt: float) -> Nutation:
    """
    Nutation at JDE from the 63 terms of Meeus Table 22.A.

    Accurate to about 0.0003" against the full IAU 1980 theory.
    """
    T = aa.T_centuries(jd_tt)
    args = aa.nutation_args(T).as_tuple()
    dpsi, deps = sum_series(NUTATION_TERMS, args, T, scale=_UNIT_ARCSEC)
    return Nutation(longitude=arcsec_to_rad(dpsi), obliquity=arcsec_to_rad(deps))


def nutation_low_accuracy(jd_tt: float) -> Nutation:
    """
    Four-term nutation (Meeus ch. 22): 0.5" in dpsi and 0.1" in deps.

    L and L' are the mean longitudes of the Sun and the Moon.
    """
    T = aa.T_centuries(jd_tt)
    L = math.radians(280.4665 + 36000.7698 * T)
    Lp = math.radians(218.3165 + 481267.8813 * T)
    om = math.radians(aa.mean_lunar_node_deg(T))
    dpsi = (
        -17.20 * math.sin(om)
        - 1.32 * math.sin(2.0 * L)
        - 0.23 * math.sin(2.0 * Lp)
        + 0.21 * math.sin(2.0 * om)
    )
    deps = (
        9.20 * math.cos(om)
        + 0.57 * math.cos(2.0 * L)
        + 0.10 * math.cos(2.0 * Lp)
        - 0.09 * math.cos(2.0 * om)
    )
    return Nutation(longitude=arcsec_to_rad(dpsi), obliquity=arcsec_to_rad(deps))


def true_obliquity(jd_tt: float, model: str = "iau1980") -> float:
    """Mean obliquity plus nutation in obliquity (radians)."""
    return aa.mean_obliquity(jd_tt, model) + nutation(jd_tt).obliquity


def nutation_in_eq_coords(
    asc: float,
    dec: float,
    nut_long: float,
    nut_oblq: float,
    true_oblq: float,
) -> tuple[float, float]:
    """
    First-order nutation in right ascension and declination (Meeus 23.1).

    Returns (d_asc, d_dec) in radians. Not usable close to the celestial
    poles, where the tan(dec) terms blow up.
    """
    tan_d = math.tan(dec)
    d_asc = (
        (math.cos(true_oblq) + math.sin(true_oblq) * math.sin(asc) * tan_d) * nut_long
        - math.cos(asc) * tan_d * nut_oblq
    )
    d_dec = math.sin(true_oblq) * math.cos(asc) * nut_long + math.sin(asc) * nut_oblq
    return d_asc, d_dec
