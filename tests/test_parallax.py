# tests/test_parallax.py

import math

import pytest

from astrocalc.core.angle import arcsec_to_rad, deg_from_dms, deg_from_hms, dms_from_deg, hms_from_deg, rad_to_arcsec
from astrocalc.core.types import EclPoint, EqPoint, GeographPoint
from astrocalc.reference import parallax, refraction


def test_eq_horizontal_parallax():
    assert rad_to_arcsec(parallax.eq_horizontal_parallax(1.0)) == pytest.approx(8.794, abs=1e-6)
    # Mars at 0.37276 AU, Meeus Example 40.a
    assert rad_to_arcsec(parallax.eq_horizontal_parallax(0.37276)) == pytest.approx(23.592, abs=1e-3)


def test_meeus_example_40a_topocentric_eq_coords():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 40.a.
    Mars from Palomar, 2003 August 28, 3h17m UT.
    """
    eq = EqPoint(asc=math.radians(339.530208), dec=math.radians(-15.771083))
    palomar = GeographPoint(long=math.radians(deg_from_hms(7, 47, 27)), lat=math.radians(33.356111))
    topo = parallax.topocentric_eq_coords(
        eq,
        arcsec_to_rad(23.592),
        palomar,
        1706.0,
        math.radians(deg_from_hms(1, 40, 45)),
    )

    h, m, s = hms_from_deg(topo.asc_deg)
    assert (h, m) == (22, 38)
    assert s == pytest.approx(8.54, abs=0.006)

    d, m, s = dms_from_deg(topo.dec_deg)
    assert (d, m) == (-15, 46)
    assert s == pytest.approx(30.0, abs=0.06)


def test_meeus_example_40b_topocentric_ecl_coords():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 40.b.
    The Moon from a place at latitude 50 05 07.8 N, sea level.
    """
    ecl = EclPoint(
        long=math.radians(deg_from_dms(181, 46, 22.5)),
        lat=math.radians(deg_from_dms(2, 17, 26.2)),
    )
    observer = GeographPoint(long=0.0, lat=math.radians(deg_from_dms(50, 5, 7.8)))
    topo, semidia = parallax.topocentric_ecl_coords(
        ecl,
        math.radians(deg_from_dms(0, 59, 27.7)),
        observer,
        0.0,
        math.radians(deg_from_dms(209, 46, 7.9)),
        math.radians(deg_from_dms(23, 28, 0.8)),
        math.radians(deg_from_dms(0, 16, 15.5)),
    )
    assert topo.long_deg == pytest.approx(deg_from_dms(181, 48, 5.0), abs=1.0 / 3600.0)
    assert topo.lat_deg == pytest.approx(deg_from_dms(1, 29, 7.1), abs=1.0 / 3600.0)
    assert math.degrees(semidia) == pytest.approx(deg_from_dms(0, 16, 25.5), abs=1.0 / 3600.0)


def test_no_parallax_leaves_position_unchanged():
    eq = EqPoint(asc=1.2, dec=-0.3)
    topo = parallax.topocentric_eq_coords(eq, 0.0, GeographPoint(long=0.5, lat=0.6), 100.0, 2.0)
    assert topo.asc == pytest.approx(eq.asc, abs=1e-12)
    assert topo.dec == pytest.approx(eq.dec, abs=1e-12)


@pytest.mark.parametrize("long_deg, lat_deg", [
    (10.0, 3.0),
    (120.0, -4.5),
    (181.77, 2.29),
    (250.0, -5.1),
    (359.0, 1.0),
])
def test_no_parallax_leaves_ecliptic_position_unchanged(long_deg, lat_deg):
    # the far side of the ecliptic has N < 0; latitude keeps its sign there
    ecl = EclPoint(long=math.radians(long_deg), lat=math.radians(lat_deg))
    observer = GeographPoint(long=0.0, lat=math.radians(50.0))
    s = math.radians(0.27)
    topo, semidia = parallax.topocentric_ecl_coords(ecl, 0.0, observer, 0.0, 3.6, math.radians(23.44), s)
    assert topo.long_deg == pytest.approx(long_deg, abs=1e-9)
    assert topo.lat_deg == pytest.approx(lat_deg, abs=1e-9)
    assert semidia == pytest.approx(s, abs=1e-12)


def test_meeus_example_16a_bennett_refraction():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 16.a.
    Apparent altitude 0.5 deg: R = 28.754'.
    """
    R = math.degrees(refraction.refraction_from_apparent_alt(math.radians(0.5))) * 60.0
    assert R == pytest.approx(28.754, abs=0.002)


@pytest.mark.parametrize("h_deg, tol_arcsec", [(0.5, 5.0), (10.0, 5.0), (30.0, 5.0), (60.0, 5.0)])
def test_bennett_and_saemundsson_agree(h_deg, tol_arcsec):
    h = math.radians(h_deg)
    R = refraction.refraction_from_apparent_alt(h)
    R2 = refraction.refraction_from_true_alt(h - R)
    assert rad_to_arcsec(R2) == pytest.approx(rad_to_arcsec(R), abs=tol_arcsec)


def test_refraction_at_zenith_is_zero():
    assert refraction.refraction_from_apparent_alt(math.radians(90.0)) == 0.0
    assert refraction.refraction_from_true_alt(math.radians(90.0)) == 0.0


def test_high_altitude_formulas():
    R = refraction.refraction_from_apparent_alt_15(math.radians(45.0))
    assert rad_to_arcsec(R) == pytest.approx(58.294 - 0.0668, abs=1e-6)
    R2 = refraction.refraction_from_true_alt_15(math.radians(45.0) - R)
    assert rad_to_arcsec(R2) == pytest.approx(rad_to_arcsec(R), abs=0.01)


def test_pressure_and_temperature_factors():
    assert refraction.pressure_factor(1010.0) == 1.0
    assert refraction.temperature_factor(283.0) == 1.0
    assert refraction.pressure_factor(505.0) == pytest.approx(0.5)
