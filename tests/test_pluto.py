# tests/test_pluto.py

import math

import pytest

from astrocalc.core.angle import rad_to_arcsec
from astrocalc.core.time import julian_day
from astrocalc.reference import pluto


def test_meeus_example_37a_heliocentric_position():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 37.a.
    Date: 1992 October 13, 0h TD.
    JD: 2448908.5
    """
    pos = pluto.heliocentric_position(2448908.5)
    assert pos.longitude_deg == pytest.approx(232.74009, abs=1e-3)
    assert pos.latitude_deg == pytest.approx(14.58782, abs=1e-5)
    assert pos.radius == pytest.approx(29.711111, abs=1e-5)


def test_position_stays_on_the_orbit_over_the_fitted_span():
    el = pluto.MEAN_ELEMENTS_2000
    q = el.a * (1.0 - el.e)
    Q = el.a * (1.0 + el.e)
    for year in range(1885, 2100, 5):
        pos = pluto.heliocentric_position(julian_day(year, 1, 1.0))
        assert q - 0.3 < pos.radius < Q + 0.3
        assert abs(pos.latitude_deg) < el.i_deg + 0.5
        assert 0.0 <= pos.longitude < 2.0 * math.pi


def test_semidiameter_and_magnitude():
    assert rad_to_arcsec(pluto.semidiameter(1.0)) == pytest.approx(2.07)
    assert rad_to_arcsec(pluto.semidiameter(30.0)) == pytest.approx(0.069)
    assert pluto.apparent_magnitude(10.0, 100.0) == pytest.approx(14.0)
    assert pluto.apparent_magnitude(29.0, 29.7) == pytest.approx(-1.0 + 5.0 * math.log10(29.0 * 29.7))


def test_mean_elements_2000():
    el = pluto.MEAN_ELEMENTS_2000
    assert el.a == 39.543
    assert el.e == 0.249
    assert el.i_deg == pytest.approx(17.14)
    assert el.node_deg == pytest.approx(110.307)
    assert el.arg_perihelion_deg == pytest.approx(113.768)
