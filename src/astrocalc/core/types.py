from __future__ import annotations

import math
from dataclasses import dataclass

from . import angle


@dataclass(frozen=True)
class EqPoint:
    """Equatorial point: right ascension and declination (radians)."""
    asc: float
    dec: float

    @property
    def asc_deg(self) -> float: return math.degrees(self.asc)
    @property
    def dec_deg(self) -> float: return math.degrees(self.dec)

    def separation(self, other: EqPoint) -> float:
        return angle.angular_separation_precise(self.asc, self.dec, other.asc, other.dec)


@dataclass(frozen=True)
class EclPoint:
    """Ecliptic point: longitude and latitude (radians)."""
    long: float
    lat: float

    @property
    def long_deg(self) -> float: return math.degrees(self.long)
    @property
    def lat_deg(self) -> float: return math.degrees(self.lat)

    def separation(self, other: EclPoint) -> float:
        return angle.angular_separation_precise(self.long, self.lat, other.long, other.lat)


@dataclass(frozen=True)
class GeographPoint:
    """
    Geographic point of an observer (radians).

    Longitude is positive WEST of Greenwich and negative east, the
    convention of Meeus; hour angles then come out as H = theta0 - L - alpha.
    """
    long: float
    lat: float

    @property
    def long_deg(self) -> float: return math.degrees(self.long)
    @property
    def lat_deg(self) -> float: return math.degrees(self.lat)

    def separation(self, other: GeographPoint) -> float:
        return angle.angular_separation_precise(self.long, self.lat, other.long, other.lat)


@dataclass(frozen=True)
class GalPoint:
    """Galactic point (B1950 system): longitude and latitude (radians)."""
    long: float
    lat: float

    @property
    def long_deg(self) -> float: return math.degrees(self.long)
    @property
    def lat_deg(self) -> float: return math.degrees(self.lat)


@dataclass(frozen=True)
class HzPoint:
    """Horizontal point: azimuth measured westward from SOUTH, and altitude (radians)."""
    az: float
    alt: float

    @property
    def az_deg(self) -> float: return math.degrees(self.az)
    @property
    def alt_deg(self) -> float: return math.degrees(self.alt)
