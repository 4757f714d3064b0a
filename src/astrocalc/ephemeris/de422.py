#ephemeris/de422.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..core.time import J2000
from ..reference.precession import precess_ecl_coords

# mean obliquity at J2000.0 (IAU 1980), the frame of the DE vectors
EPS_J2000_DEG = 23.4392911111
AU_KM = 149597870.7


def _rot_x_minus_eps(v) -> Tuple[float, float, float]:
    eps = math.radians(EPS_J2000_DEG)
    x, y, z = float(v[0]), float(v[1]), float(v[2])
    y2 =  math.cos(eps) * y + math.sin(eps) * z
    z2 = -math.sin(eps) * y + math.cos(eps) * z
    return (x, y2, z2)


def _spherical(v) -> Tuple[float, float, float]:
    x, y, z = v
    return math.atan2(y, x), math.atan2(z, math.hypot(x, y)), math.sqrt(x * x + y * y + z * z)


def _load_constants_dict(de422_mod) -> dict:
    # de422 package typically has constants.npy next to __file__
    import pathlib
    import numpy as np
    pkgdir = pathlib.Path(de422_mod.__file__).resolve().parent
    p = pkgdir / "constants.npy"
    if not p.exists():
        return {}
    c = np.load(str(p), allow_pickle=True)
    return c.item()


def _get_emrat(constants: dict) -> float:
    for k in ("EMRAT", "emrat"):
        if k in constants:
            return float(constants[k])
    # canonical DE422 value
    return 81.30056907419062


@dataclass(frozen=True)
class EclipticOfDate:
    """Geometric geocentric position, mean ecliptic and equinox of date (radians, km)."""
    longitude: float
    latitude: float
    distance_km: float

    @property
    def longitude_deg(self) -> float: return math.degrees(self.longitude) % 360.0
    @property
    def latitude_deg(self) -> float: return math.degrees(self.latitude)


@dataclass
class DE422Positions:
    """
    Geocentric Sun and Moon from DE422, rotated to the mean ecliptic of date.

    Requires optional deps:
      pip install "astrocalc[ephemeris]"
    """
    eph: object
    emrat: float

    # valid span of the DE422 file
    MIN_JD = 625648.5
    MAX_JD = 2816816.5

    @classmethod
    def load(cls) -> "DE422Positions":
        try:
            import de422  # type: ignore
            from jplephem import Ephemeris  # type: ignore
        except ImportError as e:
            raise RuntimeError(
                "DE422 ephemeris not available. Install extras:\n"
                "  pip install \"astrocalc[ephemeris]\""
            ) from e

        eph = Ephemeris(de422)
        emrat = _get_emrat(_load_constants_dict(de422))
        return cls(eph=eph, emrat=emrat)

    def _of_date(self, v_eq, jd_tt: float) -> EclipticOfDate:
        lon, lat, r = _spherical(_rot_x_minus_eps(v_eq))
        lon, lat = precess_ecl_coords(lon, lat, J2000, jd_tt)
        return EclipticOfDate(longitude=lon, latitude=lat, distance_km=r)

    def geocentric_vectors(self, jd_tt: float):
        """(Earth->Sun, Earth->Moon) in km, equatorial J2000 frame."""
        if not (self.MIN_JD < jd_tt < self.MAX_JD):
            raise ValueError(f"JD {jd_tt} outside DE422 range [{self.MIN_JD}, {self.MAX_JD}]")
        r_emb = self.eph.compute("earthmoon", jd_tt)[:3]
        r_em = self.eph.compute("moon", jd_tt)[:3]      # geocentric moon
        r_sun = self.eph.compute("sun", jd_tt)[:3]      # barycentric sun

        r_earth = r_emb - r_em / (self.emrat + 1.0)
        return r_sun - r_earth, r_em

    def sun(self, jd_tt: float) -> EclipticOfDate:
        r_es, _ = self.geocentric_vectors(jd_tt)
        return self._of_date(r_es, jd_tt)

    def moon(self, jd_tt: float) -> EclipticOfDate:
        _, r_em = self.geocentric_vectors(jd_tt)
        return self._of_date(r_em, jd_tt)
