# tests/test_angle.py

import math
import random

import pytest

from astrocalc.core import angle as ang
from astrocalc.core.types import EqPoint


def test_wrap_ranges_and_idempotence():
    random.seed(7)
    for _ in range(2000):
        x = random.uniform(-5000.0, 5000.0)
        w = ang.wrap_deg(x)
        assert 0.0 <= w < 360.0
        assert ang.wrap_deg(w) == w
        r = ang.wrap_rad(math.radians(x))
        assert 0.0 <= r < 2.0 * math.pi
        assert ang.wrap_rad(r) == r
        h = ang.wrap180(x)
        assert -180.0 <= h < 180.0

    assert ang.wrap_deg(-1e-18) == 0.0
    assert ang.wrap_deg(-90.0) == 270.0
    assert ang.wrap180(190.0) == pytest.approx(-170.0)


def test_dms_round_trip():
    random.seed(11)
    for _ in range(2000):
        x = random.uniform(-400.0, 400.0)
        assert ang.deg_from_dms(*ang.dms_from_deg(x)) == pytest.approx(x, abs=1e-10)


def test_dms_sign_conventions():
    assert ang.deg_from_dms(-13, 30, 0) == pytest.approx(-13.5)
    assert ang.dms_from_deg(-0.5) == (0, -30, pytest.approx(0.0, abs=1e-9))
    assert ang.deg_from_dms_signed(True, 0, 30, 0) == pytest.approx(-0.5)
    assert ang.deg_from_dms_signed(False, 23, 26, 21.448) == pytest.approx(23.4392911, abs=1e-7)
    with pytest.raises(ValueError):
        ang.deg_from_dms_signed(False, 1, -2, 0)


def test_hms():
    # Meeus Example 1.a style: 9h14m55.8s
    assert ang.deg_from_hms(9, 14, 55.8) == pytest.approx(138.7325, abs=1e-9)
    h, m, s = ang.hms_from_deg(138.7325)
    assert (h, m) == (9, 14)
    assert s == pytest.approx(55.8, abs=1e-6)
    assert ang.rad_from_hms(6, 0, 0) == pytest.approx(math.pi / 2.0)
    assert ang.rad_from_dms(180, 0, 0) == pytest.approx(math.pi)


def test_arcsec_conversions():
    assert ang.arcsec_to_deg(3600.0) == 1.0
    assert ang.rad_to_arcsec(ang.arcsec_to_rad(1.25)) == pytest.approx(1.25)


def test_meeus_example_17a_angular_separation():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 17.a.
    Arcturus and Spica: 32.7930 degrees.
    """
    a1, d1 = math.radians(213.9154), math.radians(19.1825)
    a2, d2 = math.radians(201.2983), math.radians(-11.1614)
    for f in (ang.angular_separation, ang.angular_separation_haversine, ang.angular_separation_precise):
        assert math.degrees(f(a1, d1, a2, d2)) == pytest.approx(32.7930, abs=1e-4)

    p1 = EqPoint(asc=a1, dec=d1)
    p2 = EqPoint(asc=a2, dec=d2)
    assert math.degrees(p1.separation(p2)) == pytest.approx(32.7930, abs=1e-4)


def test_small_and_antipodal_separations():
    tiny = math.radians(1e-6)
    assert ang.angular_separation_precise(0.0, 0.0, tiny, 0.0) == pytest.approx(tiny, rel=1e-9)
    assert ang.angular_separation_haversine(0.0, 0.0, tiny, 0.0) == pytest.approx(tiny, rel=1e-6)
    assert ang.angular_separation_precise(0.0, 0.0, math.pi, 0.0) == pytest.approx(math.pi)
    assert ang.is_small_angle(0.001)
    assert not ang.is_small_angle(0.01)
