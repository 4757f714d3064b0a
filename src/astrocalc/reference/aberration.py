# reference/aberration.py

from __future__ import annotations

import math
from typing import Tuple, Union

from ..core.angle import arcsec_to_rad
from ..core.time import julian_century


# Speed of light in 1e-8 AU per day.
_C = 17314463350.0

# Mean longitudes of the planets and lunar arguments (Ron & Vondrak, radians):
# l2..l8 = Venus..Neptune, l1 = Moon, d, m1, f.
_ARGS = (
    (3.1761467, 1021.3285546),   # l2
    (1.7534703, 628.3075849),    # l3
    (6.2034809, 334.0612431),    # l4
    (0.5995465, 52.9690965),     # l5
    (0.8740168, 21.3299095),     # l6
    (5.4812939, 7.4781599),      # l7
    (5.3118863, 3.8133036),      # l8
    (3.8103444, 8399.6847337),   # l1
    (5.1984667, 7771.3771486),   # d
    (2.3555559, 8328.6914289),   # m1
    (1.6279052, 8433.4661601),   # f
)

Amp = Union[float, Tuple[float, float]]

# Meeus Table 23.A, units of 1e-8 AU/day.
# multipliers of (l2, l3, l4, l5, l6, l7, l8, l1, d, m1, f),
# then X sin, X cos, Y sin, Y cos, Z sin, Z cos; (a, b) means a + b*T.
_VELOCITY_TERMS: Tuple[Tuple[Tuple[int, ...], Amp, Amp, Amp, Amp, Amp, Amp], ...] = (
    ((0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0), (-1719914, -2), -25, (25, -13), (1578089, 156), (10, 32), (684185, -358)),
    ((0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0), (6434, 141), (28007, -107), (25697, -95), (-5904, -130), (11141, -48), (-2559, -55)),
    ((0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0), 715, 0, 6, -657, -15, -282),
    ((0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0), 715, 0, 0, -656, 0, -285),
    ((0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0), (486, -5), (-236, -4), (-216, -4), (-446, 5), -94, -193),
    ((0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0), 159, 0, 2, -147, -6, -61),
    ((0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1), 0, 0, 0, 26, 0, -59),
    ((0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0), 39, 0, 0, -36, 0, -16),
    ((0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0), 33, -10, -9, -30, -5, -13),
    ((0, 2, 0, -1, 0, 0, 0, 0, 0, 0, 0), 31, 1, 1, -28, 0, -12),
    ((0, 3, -8, 3, 0, 0, 0, 0, 0, 0, 0), 8, -28, 25, 8, 11, 3),
    ((0, 5, -8, 3, 0, 0, 0, 0, 0, 0, 0), 8, -28, -25, -8, -11, -3),
    ((2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0), 21, 0, 0, -19, 0, -8),
    ((1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0), -19, 0, 0, 17, 0, 8),
    ((0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0), 17, 0, 0, -16, 0, -7),
    ((0, 1, 0, -2, 0, 0, 0, 0, 0, 0, 0), 16, 0, 0, 15, 1, 7),
    ((0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0), 16, 0, 1, -15, -3, -6),
    ((0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0), 11, -1, -1, -10, -1, -5),
    ((2, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0), 0, -11, -10, 0, -4, 0),
    ((0, 1, 0, -1, 0, 0, 0, 0, 0, 0, 0), -11, -2, -2, 9, -1, 4),
    ((0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0), -7, -8, -8, 6, -3, 3),
    ((0, 3, 0, -2, 0, 0, 0, 0, 0, 0, 0), -10, 0, 0, 9, 0, 4),
    ((1, -2, 0, 0, 0, 0, 0, 0, 0, 0, 0), -9, 0, 0, -9, 0, -4),
    ((2, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0), -9, 0, 0, -8, 0, -4),
    ((0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0), 0, -9, -8, 0, -3, 0),
    ((2, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0), 0, -9, 8, 0, 3, 0),
    ((0, 3, -2, 0, 0, 0, 0, 0, 0, 0, 0), 8, 0, 0, -8, 0, -3),
    ((0, 0, 0, 0, 0, 0, 0, 1, 2, -1, 0), 8, 0, 0, -7, 0, -3),
    ((8, -12, 0, 0, 0, 0, 0, 0, 0, 0, 0), -4, -7, -6, 4, -3, 2),
    ((8, -14, 0, 0, 0, 0, 0, 0, 0, 0, 0), -4, -7, 6, -4, 3, -2),
    ((0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0), -6, -5, -4, 5, -2, 2),
    ((3, -4, 0, 0, 0, 0, 0, 0, 0, 0, 0), -1, -1, -2, -7, 1, -4),
    ((0, 2, 0, -2, 0, 0, 0, 0, 0, 0, 0), 4, -6, -5, -4, -2, -2),
    ((3, -3, 0, 0, 0, 0, 0, 0, 0, 0, 0), 0, -7, -6, 0, -3, 0),
    ((0, 2, -2, 0, 0, 0, 0, 0, 0, 0, 0), 5, -5, -4, -5, -2, -2),
    ((0, 0, 0, 0, 0, 0, 0, 1, -2, 0, 0), 5, 0, 0, -5, 0, -2),
)


def _amp(a: Amp, T: float) -> float:
    if isinstance(a, tuple):
        return a[0] + a[1] * T
    return a


def earth_velocity(jd_tt: float) -> Tuple[float, float, float]:
    """
    Velocity of the Earth (X', Y', Z') in 1e-8 AU/day, referred to the
    mean equator and equinox of J2000.0 (Ron & Vondrak, Meeus Table 23.A).
    """
    T = julian_century(jd_tt)
    args = tuple(a0 + a1 * T for a0, a1 in _ARGS)

    x = y = z = 0.0
    for mult, xs, xc, ys, yc, zs, zc in _VELOCITY_TERMS:
        A = sum(k * a for k, a in zip(mult, args) if k)
        sA, cA = math.sin(A), math.cos(A)
        x += _amp(xs, T) * sA + _amp(xc, T) * cA
        y += _amp(ys, T) * sA + _amp(yc, T) * cA
        z += _amp(zs, T) * sA + _amp(zc, T) * cA
    return x, y, z


def stellar_aberration(asc: float, dec: float, jd_tt: float) -> Tuple[float, float]:
    """
    Annual aberration (d_asc, d_dec) of a star in radians, from the
    Ron-Vondrak velocity of the Earth; accurate to about 0.001".
    """
    x, y, z = earth_velocity(jd_tt)
    ca, sa = math.cos(asc), math.sin(asc)
    d_asc = (y * ca - x * sa) / (_C * math.cos(dec))
    d_dec = -((x * ca + y * sa) * math.sin(dec) - z * math.cos(dec)) / _C
    return d_asc, d_dec


def solar_aberration(dist_au: float) -> float:
    """Aberration in the Sun's longitude, -20.4898"/R (radians)."""
    return arcsec_to_rad(-20.4898 / dist_au)
