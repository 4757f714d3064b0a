# reference/pluto.py

from __future__ import annotations

"""
astrocalc.reference.pluto

Heliocentric position of Pluto from the periodic series of Meeus ch. 37
(Table 37.A), mean ecliptic and equinox of J2000.0, plus its semidiameter,
magnitude and mean orbital elements.

The series is fitted to 1885-2099 only; outside that span it returns
numbers, not positions. Inside it the errors are below 0.07" in
longitude, 0.02" in latitude and 6e-6 AU in radius vector.
"""

import math
from dataclasses import dataclass

from ..core.angle import arcsec_to_rad, wrap_deg, wrap_rad
from ..core.time import julian_century
from .planets import HeliocentricPosition
from .series import sum_series, terms_from_rows

# Meeus Table 37.A. Multipliers of (J, S, P), then sine and cosine
# amplitudes of longitude and latitude (degrees) and radius vector (AU).
_TABLE_37A = (
    ((0, 0, 1), -19.799805, 19.850055, -5.452852, -14.974862, 6.6865439, 6.8951812),
    ((0, 0, 2), 0.897144, -4.954829, 3.527812, 1.672790, -1.1827535, -0.0332538),
    ((0, 0, 3), 0.611149, 1.211027, -1.050748, 0.327647, 0.1593179, -0.1438890),
    ((0, 0, 4), -0.341243, -0.189585, 0.178690, -0.292153, -0.0018444, 0.0483220),
    ((0, 0, 5), 0.129287, -0.034992, 0.018650, 0.100340, -0.0065977, -0.0085431),
    ((0, 0, 6), -0.038164, 0.030893, -0.030697, -0.025823, 0.0031174, -0.0006032),
    ((0, 1, -1), 0.020442, -0.009987, 0.004878, 0.011248, -0.0005794, 0.0022161),
    ((0, 1, 0), -0.004063, -0.005071, 0.000226, -0.000064, 0.0004601, 0.0004032),
    ((0, 1, 1), -0.006016, -0.003336, 0.002030, -0.000836, -0.0001729, 0.0000234),
    ((0, 1, 2), -0.003956, 0.003039, 0.000069, -0.000604, -0.0000415, 0.0000702),
    ((0, 1, 3), -0.000667, 0.003572, -0.000247, -0.000567, 0.0000239, 0.0000723),
    ((0, 2, -2), 0.001276, 0.000501, -0.000057, 0.000001, 0.0000067, -0.0000067),
    ((0, 2, -1), 0.001152, -0.000917, -0.000122, 0.000175, 0.0001034, -0.0000451),
    ((0, 2, 0), 0.000630, -0.001277, -0.000049, -0.000164, -0.0000129, 0.0000504),
    ((1, -1, 0), 0.002571, -0.000459, -0.000197, 0.000199, 0.0000480, -0.0000231),
    ((1, -1, 1), 0.000899, -0.001449, -0.000025, 0.000217, 0.0000002, -0.0000441),
    ((1, 0, -3), -0.001016, 0.001043, 0.000589, -0.000248, -0.0003359, 0.0000265),
    ((1, 0, -2), -0.002343, -0.001012, -0.000269, 0.000711, 0.0007856, -0.0007832),
    ((1, 0, -1), 0.007042, 0.000788, 0.000185, 0.000193, 0.0000036, 0.0045763),
    ((1, 0, 0), 0.001199, -0.000338, 0.000315, 0.000807, 0.0008663, 0.0008547),
    ((1, 0, 1), 0.000418, -0.000067, -0.000130, -0.000043, -0.0000809, -0.0000769),
    ((1, 0, 2), 0.000120, -0.000274, 0.000005, 0.000003, 0.0000263, -0.0000144),
    ((1, 0, 3), -0.000060, -0.000159, 0.000002, 0.000017, -0.0000126, 0.0000032),
    ((1, 0, 4), -0.000082, -0.000029, 0.000002, 0.000005, -0.0000035, -0.0000016),
    ((1, 1, -3), -0.000036, -0.000029, 0.000002, 0.000003, -0.0000019, -0.0000004),
    ((1, 1, -2), -0.000040, 0.000007, 0.000003, 0.000001, -0.0000015, 0.0000008),
    ((1, 1, -1), -0.000014, 0.000022, 0.000002, -0.000001, -0.0000004, 0.0000012),
    ((1, 1, 0), 0.000004, 0.000013, 0.000001, -0.000001, 0.0000005, 0.0000006),
    ((1, 1, 1), 0.000005, 0.000002, 0.0, -0.000001, 0.0000003, 0.0000001),
    ((1, 1, 3), -0.000001, 0.0, 0.0, 0.0, 0.0000006, -0.0000002),
    ((2, 0, -6), 0.000002, 0.0, 0.0, -0.000002, 0.0000002, 0.0000002),
    ((2, 0, -5), -0.000004, 0.000005, 0.000002, 0.000002, -0.0000002, -0.0000002),
    ((2, 0, -4), 0.000004, -0.000007, -0.000007, 0.0, 0.0000014, 0.0000013),
    ((2, 0, -3), 0.000014, 0.000024, 0.000010, -0.000008, -0.0000063, 0.0000013),
    ((2, 0, -2), -0.000049, -0.000034, -0.000003, 0.000020, 0.0000136, -0.0000236),
    ((2, 0, -1), 0.000163, -0.000048, 0.000006, 0.000005, 0.0000273, 0.0001065),
    ((2, 0, 0), 0.000009, -0.000024, 0.000014, 0.000017, 0.0000251, 0.0000149),
    ((2, 0, 1), -0.000004, 0.000001, -0.000002, 0.0, -0.0000025, -0.0000009),
    ((2, 0, 2), -0.000003, 0.000001, 0.0, 0.0, 0.0000009, -0.0000002),
    ((2, 0, 3), 0.000001, 0.000003, 0.0, 0.0, -0.0000008, 0.0000007),
    ((3, 0, -2), -0.000003, -0.000001, 0.0, 0.000001, 0.0000002, -0.0000010),
    ((3, 0, -1), 0.000005, -0.000003, 0.0, 0.0, 0.0000019, 0.0000035),
    ((3, 0, 0), 0.0, 0.0, 0.000001, 0.0, 0.0000010, 0.0000003),
)

_LONG_TERMS = terms_from_rows(((r[0], r[1], r[2]) for r in _TABLE_37A), channels="sin,cos")
_LAT_TERMS = terms_from_rows(((r[0], r[3], r[4]) for r in _TABLE_37A), channels="sin,cos")
_RADIUS_TERMS = terms_from_rows(((r[0], r[5], r[6]) for r in _TABLE_37A), channels="sin,cos")


def _arguments(T: float) -> tuple[float, float, float]:
    """Mean longitudes of Jupiter, Saturn and Pluto (Meeus 37), radians."""
    J = 34.35 + 3034.9057 * T
    S = 50.08 + 1222.1138 * T
    P = 238.96 + 144.9600 * T
    return tuple(math.radians(wrap_deg(x)) for x in (J, S, P))


def heliocentric_position(jd_tt: float) -> HeliocentricPosition:
    """
    Heliocentric (l, b, r) of Pluto, mean ecliptic and equinox of J2000.0
    (Meeus 37). Valid for 1885-2099.
    """
    T = julian_century(jd_tt)
    args = _arguments(T)

    s, c = sum_series(_LONG_TERMS, args)
    lon = 238.958116 + 144.96 * T + s + c
    s, c = sum_series(_LAT_TERMS, args)
    lat = -3.908239 + s + c
    s, c = sum_series(_RADIUS_TERMS, args)
    r = 40.7241346 + s + c

    return HeliocentricPosition(
        longitude=wrap_rad(math.radians(lon)),
        latitude=math.radians(lat),
        radius=r,
    )


def semidiameter(dist_au: float) -> float:
    """Geocentric semidiameter (radians), 2.07" at 1 AU."""
    return arcsec_to_rad(2.07 / dist_au)


def apparent_magnitude(dist_au: float, sun_dist_au: float) -> float:
    """Visual magnitude, Astronomical Almanac 1984: -1.0 + 5 log10(r delta)."""
    return -1.0 + 5.0 * math.log10(sun_dist_au * dist_au)


@dataclass(frozen=True)
class PlutoElements:
    a: float              # AU
    e: float
    i: float              # radians, to the ecliptic
    node: float           # longitude of the ascending node
    arg_perihelion: float

    @property
    def i_deg(self) -> float: return math.degrees(self.i)
    @property
    def node_deg(self) -> float: return math.degrees(self.node)
    @property
    def arg_perihelion_deg(self) -> float: return math.degrees(self.arg_perihelion)


# mean elements near 2000 AD, J2000.0 ecliptic (Meeus ch. 37)
MEAN_ELEMENTS_2000 = PlutoElements(
    a=39.543,
    e=0.249,
    i=math.radians(17.14),
    node=math.radians(110.307),
    arg_perihelion=math.radians(113.768),
)
