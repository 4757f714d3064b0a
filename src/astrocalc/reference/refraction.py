from __future__ import annotations

"""
astrocalc.reference.refraction

Atmospheric refraction (Meeus ch. 16) for an observer at sea level with
1010 mbar and 10 °C. Altitudes and results are radians; none of the
validity ranges below is enforced.
"""

import math

from ..core.angle import arcsec_to_rad


def refraction_from_apparent_alt_15(apparent_alt: float) -> float:
    """
    Refraction to subtract from an apparent altitude (Meeus 16.1).

    Good to 0.001" only above 15 degrees of altitude.
    """
    t = math.tan(math.pi / 2.0 - apparent_alt)
    return arcsec_to_rad(58.294 * t - 0.0668 * t ** 3)


def refraction_from_true_alt_15(true_alt: float) -> float:
    """Refraction to add to a true altitude (Meeus 16.2); above 15 degrees only."""
    t = math.tan(math.pi / 2.0 - true_alt)
    return arcsec_to_rad(58.276 * t - 0.0824 * t ** 3)


def refraction_from_apparent_alt(apparent_alt: float) -> float:
    """
    Bennett's formula (Meeus 16.3), 0-90 degrees; 0.07' accuracy.

    Exactly 0 at the zenith.
    """
    h = math.degrees(apparent_alt)
    if h == 90.0:
        return 0.0
    R = 1.0 / math.tan(math.radians(h + 7.31 / (h + 4.4)))
    return math.radians(R / 60.0)


def refraction_from_true_alt(true_alt: float) -> float:
    """Saemundsson's formula (Meeus 16.4); consistent with Bennett's to 4"."""
    h = math.degrees(true_alt)
    if h == 90.0:
        return 0.0
    R = 1.02 / math.tan(math.radians(h + 10.3 / (h + 5.11)))
    return math.radians(R / 60.0)


def pressure_factor(pressure_mbar: float) -> float:
    """Multiplier on the refraction for a pressure other than 1010 mbar."""
    return pressure_mbar / 1010.0


def temperature_factor(temperature_k: float) -> float:
    """Multiplier on the refraction for a temperature other than 283 K."""
    return 283.0 / temperature_k
