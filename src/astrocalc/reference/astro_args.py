from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from ..core.angle import arcsec_to_deg, wrap_deg
from ..core.time import J2000


# ------------------------------------------------------------
# Time variable (TT)
# ------------------------------------------------------------

def T_centuries(jd_tt: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jd_tt - J2000) / 36525.0


def _rad(x_deg: float) -> float:
    """Degrees wrapped to [0,360) first, then radians."""
    return math.radians(wrap_deg(x_deg))


# ------------------------------------------------------------
# Fundamental arguments (radians, wrapped to [0, 2pi))
# ------------------------------------------------------------

@dataclass(frozen=True)
class FundamentalArgs:
    """
    Delaunay-style arguments of the periodic series.

    D: mean elongation of the Moon from the Sun
    M: mean anomaly of the Sun
    Mp: mean anomaly of the Moon
    F: Moon's argument of latitude
    Omega: longitude of the Moon's mean ascending node
    Lp: Moon's mean longitude (lunar series only; 0 for nutation)
    """
    D: float
    M: float
    Mp: float
    F: float
    Omega: float
    Lp: float = 0.0

    @property
    def D_deg(self) -> float: return math.degrees(self.D)
    @property
    def M_deg(self) -> float: return math.degrees(self.M)
    @property
    def Mp_deg(self) -> float: return math.degrees(self.Mp)
    @property
    def F_deg(self) -> float: return math.degrees(self.F)
    @property
    def Omega_deg(self) -> float: return math.degrees(self.Omega)
    @property
    def Lp_deg(self) -> float: return math.degrees(self.Lp)

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        """(D, M, M', F, Omega): the order the coefficient tables use."""
        return (self.D, self.M, self.Mp, self.F, self.Omega)


def nutation_args(T: float) -> FundamentalArgs:
    """
    Arguments of the IAU 1980 nutation theory (Meeus ch. 22):
      D  = 297.85036 + 445267.111480 T - 0.0019142 T^2 + T^3/189474
      M  = 357.52772 +  35999.050340 T - 0.0001603 T^2 - T^3/300000
      M' = 134.96298 + 477198.867398 T + 0.0086972 T^2 + T^3/56250
      F  =  93.27191 + 483202.017538 T - 0.0036825 T^2 + T^3/327270
      Om = 125.04452 -   1934.136261 T + 0.0020708 T^2 + T^3/450000
    """
    T2 = T * T
    T3 = T2 * T
    D = 297.85036 + 445267.111480 * T - 0.0019142 * T2 + T3 / 189474.0
    M = 357.52772 + 35999.050340 * T - 0.0001603 * T2 - T3 / 300000.0
    Mp = 134.96298 + 477198.867398 * T + 0.0086972 * T2 + T3 / 56250.0
    F = 93.27191 + 483202.017538 * T - 0.0036825 * T2 + T3 / 327270.0
    Omega = 125.04452 - 1934.136261 * T + 0.0020708 * T2 + T3 / 450000.0
    return FundamentalArgs(D=_rad(D), M=_rad(M), Mp=_rad(Mp), F=_rad(F), Omega=_rad(Omega))


def lunar_args(T: float) -> FundamentalArgs:
    """
    Mean arguments of the ELP-2000/82 lunar theory as printed by Meeus (47.1-47.5).

    Omega here is the mean ascending node of the lunar orbit (47.7).
    """
    T2 = T * T
    T3 = T2 * T
    T4 = T2 * T2

    Lp = (
        218.3164477
        + 481267.88123421 * T
        - 0.0015786 * T2
        + T3 / 538841.0
        - T4 / 65194000.0
    )
    D = (
        297.8501921
        + 445267.1114034 * T
        - 0.0018819 * T2
        + T3 / 545868.0
        - T4 / 113065000.0
    )
    M = (
        357.5291092
        + 35999.0502909 * T
        - 0.0001536 * T2
        + T3 / 24490000.0
    )
    Mp = (
        134.9633964
        + 477198.8675055 * T
        + 0.0087414 * T2
        + T3 / 69699.0
        - T4 / 14712000.0
    )
    F = (
        93.2720950
        + 483202.0175233 * T
        - 0.0036539 * T2
        - T3 / 3526000.0
        + T4 / 863310000.0
    )
    Omega = mean_lunar_node_deg(T)

    return FundamentalArgs(D=_rad(D), M=_rad(M), Mp=_rad(Mp), F=_rad(F), Omega=_rad(Omega), Lp=_rad(Lp))


def mean_lunar_node_deg(T: float) -> float:
    """Longitude of the mean ascending node of the Moon (47.7), unwrapped degrees."""
    T2 = T * T
    return (
        125.0445479
        - 1934.1362891 * T
        + 0.0020754 * T2
        + T2 * T / 467441.0
        - T2 * T2 / 60616000.0
    )


def eccentricity_factor(T: float) -> float:
    """
    Eccentricity factor E for the Earth's orbit (47.6).
    Scales lunar terms containing the Sun's mean anomaly M once per |M multiple|.
    """
    return 1.0 - 0.002516 * T - 0.0000074 * (T * T)


# ------------------------------------------------------------
# Mean obliquity
# ------------------------------------------------------------

_EPS0_ARCSEC = 84381.448   # 23°26'21.448"

# Laskar (Meeus 22.3), arcsec coefficients of U^1..U^10, U = T/100
_LASKAR = (-4680.93, -1.55, 1999.25, -51.38, -249.67, -39.05, 7.12, 27.87, 5.79, 2.45)


def mean_obliquity(jd_tt: float, model: Literal["iau1980", "laskar"] = "iau1980") -> float:
    """
    Mean obliquity of the ecliptic (radians).

    - 'iau1980' (Meeus 22.2), T in Julian centuries; error ~1" over 2000 years,
      ~10" over 4000 years:
        eps0 = 23°26'21.448" - 46.8150"T - 0.00059"T^2 + 0.001813"T^3
    - 'laskar' (Meeus 22.3), U = T/100 in units of 10000 years; 0.01" after
      1000 years and a few seconds after 10000 years, for |U| < 1.
    """
    T = T_centuries(jd_tt)
    if model == "iau1980":
        eps = _EPS0_ARCSEC - 46.8150 * T - 0.00059 * (T * T) + 0.001813 * (T * T * T)
    elif model == "laskar":
        U = T / 100.0
        eps = _EPS0_ARCSEC
        p = 1.0
        for c in _LASKAR:
            p *= U
            eps += c * p
    else:
        raise ValueError("model must be one of: iau1980, laskar")
    return math.radians(arcsec_to_deg(eps))
