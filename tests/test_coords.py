# tests/test_coords.py

import math
import random

import pytest

from astrocalc.core.angle import deg_from_dms, deg_from_hms
from astrocalc.core.types import EclPoint, EqPoint, GalPoint, HzPoint
from astrocalc.reference import coords, ecliptic, misc


def test_meeus_example_13a_ecliptic_from_equatorial():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 13.a.
    Pollux, J2000.0 mean obliquity 23.4392911 deg.
    """
    eq = EqPoint(asc=math.radians(116.328942), dec=math.radians(28.026183))
    oblq = math.radians(23.4392911)
    ecl = coords.ecl_from_eq(eq, oblq)
    assert ecl.long_deg == pytest.approx(113.215630, abs=1e-6)
    assert ecl.lat_deg == pytest.approx(6.684170, abs=1e-6)

    back = coords.eq_from_ecl(ecl, oblq)
    assert back.asc == pytest.approx(eq.asc, abs=1e-9)
    assert back.dec == pytest.approx(eq.dec, abs=1e-9)


def test_meeus_example_13b_horizontal():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 13.b.
    Venus from the U.S. Naval Observatory, 1987 April 10, 19h21m UT.
    """
    H = math.radians(64.352133)
    dec = math.radians(-6.719892)
    lat = math.radians(deg_from_dms(38, 55, 17))
    hz = coords.hz_from_eq(H, dec, lat)
    assert hz.az_deg == pytest.approx(68.0337, abs=1e-4)
    assert hz.alt_deg == pytest.approx(15.1249, abs=1e-4)

    H2, dec2 = coords.eq_from_hz(hz, lat)
    assert H2 == pytest.approx(H, abs=1e-9)
    assert dec2 == pytest.approx(dec, abs=1e-9)


def test_hour_angle_conventions():
    theta0 = math.radians(128.7378734)
    L = math.radians(deg_from_dms(77, 3, 56))
    asc = math.radians(deg_from_hms(23, 9, 16.641))
    H = coords.hour_angle_from_observer_long(theta0, L, asc)
    assert coords.hour_angle_from_local_sidereal(theta0 - L, asc) == pytest.approx(H)


def test_meeus_example_13c_galactic():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 13.c.
    Nova Serpentis 1978, B1950.0.
    """
    eq = EqPoint(
        asc=math.radians(deg_from_hms(17, 48, 59.74)),
        dec=math.radians(deg_from_dms(-14, 43, 8.2)),
    )
    gal = coords.gal_from_eq(eq)
    assert gal.long_deg == pytest.approx(12.9593, abs=1e-4)
    assert gal.lat_deg == pytest.approx(6.0463, abs=1e-4)

    back = coords.eq_from_gal(gal)
    assert back.asc == pytest.approx(eq.asc, abs=1e-9)
    assert back.dec == pytest.approx(eq.dec, abs=1e-9)


def test_coordinate_round_trips():
    random.seed(2024)
    oblq = math.radians(23.44)
    for _ in range(1000):
        a = random.uniform(0.0, 2.0 * math.pi)
        d = random.uniform(-1.2, 1.2)
        lat = random.uniform(-1.2, 1.2)

        ecl = coords.ecl_from_eq(EqPoint(asc=a, dec=d), oblq)
        eq = coords.eq_from_ecl(ecl, oblq)
        assert math.remainder(eq.asc - a, 2.0 * math.pi) == pytest.approx(0.0, abs=1e-8)
        assert eq.dec == pytest.approx(d, abs=1e-8)

        hz = coords.hz_from_eq(a, d, lat)
        H, d2 = coords.eq_from_hz(hz, lat)
        assert math.remainder(H - a, 2.0 * math.pi) == pytest.approx(0.0, abs=1e-8)
        assert d2 == pytest.approx(d, abs=1e-8)

        gal = coords.gal_from_eq(EqPoint(asc=a, dec=d))
        eq2 = coords.eq_from_gal(gal)
        assert math.remainder(eq2.asc - a, 2.0 * math.pi) == pytest.approx(0.0, abs=1e-8)
        assert eq2.dec == pytest.approx(d, abs=1e-8)


def test_outputs_are_wrapped():
    ecl = coords.ecl_from_eq(EqPoint(asc=-0.1, dec=0.0), math.radians(23.44))
    assert 0.0 <= ecl.long < 2.0 * math.pi
    hz = coords.hz_from_eq(-0.3, 0.1, 0.7)
    assert 0.0 <= hz.az < 2.0 * math.pi
    assert isinstance(hz, HzPoint)
    assert isinstance(coords.gal_from_eq(EqPoint(asc=1.0, dec=0.2)), GalPoint)
    assert isinstance(ecl, EclPoint)


def test_meeus_example_14a_ecliptic_and_horizon():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 14.a.
    """
    oblq = math.radians(23.44)
    lat = math.radians(51.0)
    theta = math.radians(75.0)
    p1, p2 = ecliptic.ecliptic_points_on_horizon(oblq, lat, theta)
    assert sorted((math.degrees(p1), math.degrees(p2))) == pytest.approx([169.358, 349.358], abs=2e-3)

    I = ecliptic.angle_between_ecliptic_and_horizon(oblq, lat, theta)
    assert math.degrees(I) == pytest.approx(61.9, abs=0.2)


def test_parallactic_angle():
    lat = math.radians(40.0)
    # on the meridian south of the zenith q = 0
    assert misc.parallactic_angle(0.0, math.radians(10.0), lat) == pytest.approx(0.0, abs=1e-12)
    # west of the meridian q > 0
    assert misc.parallactic_angle(0.5, math.radians(10.0), lat) > 0.0
    # on the celestial equator at the horizon, cos q = sin(lat)
    q0 = misc.parallactic_angle_on_horizon(0.0, lat)
    assert math.cos(q0) == pytest.approx(math.sin(lat))
