# tests/test_earth.py

import math

import pytest

from astrocalc.core.angle import deg_from_dms
from astrocalc.core.types import GeographPoint
from astrocalc.reference import earth


def test_meeus_example_11a_rho_sin_cos_phi():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 11.a.
    Palomar Observatory: 33 21 22 N, 1706 m.
    """
    rs, rc = earth.rho_sin_cos_phi(math.radians(deg_from_dms(33, 21, 22)), 1706.0)
    assert rs == pytest.approx(0.546861, abs=1e-6)
    assert rc == pytest.approx(0.836339, abs=1e-6)


def test_meeus_example_11b_radii_at_42_degrees():
    lat = math.radians(42.0)
    assert earth.radius_of_parallel(lat) == pytest.approx(4747.001, abs=0.5)
    assert earth.linear_velocity_at_latitude(lat) == pytest.approx(0.34616, abs=1e-5)
    assert earth.radius_of_curvature_of_meridian(lat) == pytest.approx(6364.033, abs=0.01)


def test_meeus_example_11c_geodesic_distance():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 11.c.
    Paris Observatory to the U.S. Naval Observatory at Washington.
    """
    paris = GeographPoint(
        long=math.radians(deg_from_dms(-2, 20, 14)),
        lat=math.radians(deg_from_dms(48, 50, 11)),
    )
    washington = GeographPoint(
        long=math.radians(deg_from_dms(77, 3, 56)),
        lat=math.radians(deg_from_dms(38, 55, 17)),
    )
    assert earth.geodesic_distance(paris, washington) == pytest.approx(6181.63, abs=0.02)
    assert earth.geodesic_distance(washington, paris) == pytest.approx(6181.63, abs=0.02)
    assert earth.approx_geodesic_distance(paris, washington) == pytest.approx(6166.0, abs=1.0)
    assert earth.geodesic_distance(paris, paris) == 0.0


def test_figure_constants():
    assert earth.flattening() == pytest.approx(1.0 / 298.257223563)
    assert earth.eccentricity() == pytest.approx(0.0818191908, abs=1e-9)
    assert earth.rho(0.0) == pytest.approx(1.0, abs=1e-6)
    assert earth.rho(math.pi / 2.0) == pytest.approx(earth.POLAR_RADIUS_KM / earth.EQUATORIAL_RADIUS_KM, abs=1e-6)
    assert math.degrees(earth.geocentric_latitude_diff(math.radians(45.0))) * 3600.0 == pytest.approx(692.73, abs=1e-6)


def test_diurnal_path_is_vertical_at_the_equator():
    angle = earth.angle_between_diurnal_path_and_horizon(math.radians(20.0), 0.0)
    assert math.degrees(angle) == pytest.approx(90.0)
