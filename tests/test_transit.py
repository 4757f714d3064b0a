# tests/test_transit.py

import math

import pytest

from astrocalc.core.types import EqPoint, GeographPoint
from astrocalc.reference import interpolation, transit
from astrocalc.reference.transit import TransitBody, TransitEvent


def test_meeus_example_3a_interpolate_three():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 3.a.
    Distance of Mars, 1992 November 8 at 4h21m TT.
    """
    y = interpolation.interpolate_three(0.884226, 0.877366, 0.870531, 0.18125)
    assert y == pytest.approx(0.876125, abs=1e-6)


def test_interpolate_three_reproduces_table_and_rejects_far_factor():
    assert interpolation.interpolate_three(1.0, 4.0, 9.0, 0.0) == 4.0
    assert interpolation.interpolate_three(1.0, 4.0, 9.0, 1.0) == pytest.approx(9.0)
    assert interpolation.interpolate_three(1.0, 4.0, 9.0, -1.0) == pytest.approx(1.0)
    with pytest.raises(ValueError):
        interpolation.interpolate_three(1.0, 4.0, 9.0, 1.5)


def test_meeus_example_3b_interpolate_five():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 3.b.
    Latitude of the Moon, 1992 February 28 at 3h20m TD.
    """
    y = interpolation.interpolate_five(36.125, 24.606, 15.486, 8.694, 4.133, 0.2777778)
    assert y == pytest.approx(13.369, abs=5e-4)


def test_interpolate_five_is_exact_for_quartics():
    def f(x):
        return 0.5 * x ** 4 - x ** 3 + 2.0 * x + 3.0

    n = 0.37
    y = interpolation.interpolate_five(f(-2), f(-1), f(0), f(1), f(2), n)
    assert y == pytest.approx(f(n), abs=1e-12)


BOSTON = GeographPoint(long=math.radians(71.0833), lat=math.radians(42.3333))
VENUS_1988_MARCH = (
    EqPoint(asc=math.radians(40.68021), dec=math.radians(18.04761)),
    EqPoint(asc=math.radians(41.73129), dec=math.radians(18.44092)),
    EqPoint(asc=math.radians(42.78204), dec=math.radians(18.82742)),
)
THETA0 = math.radians(177.74208)


@pytest.mark.parametrize("event, expected", [
    (TransitEvent.RISE, 0.51766),
    (TransitEvent.TRANSIT, 0.81980),
    (TransitEvent.SET, 0.12130),
])
def test_meeus_example_15a_venus_at_boston(event, expected):
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 15.a.
    Venus at Boston, 1988 March 20: rise 12h25m, transit 19h40m, set 2h55m UT.
    """
    m = transit.rise_transit_set(
        event,
        TransitBody.STAR_OR_PLANET,
        BOSTON,
        *VENUS_1988_MARCH,
        THETA0,
        56.0,
    )
    assert m == pytest.approx(expected, abs=3e-4)


def test_circumpolar_body_has_no_rise():
    north = GeographPoint(long=0.0, lat=math.radians(80.0))
    star = EqPoint(asc=1.0, dec=math.radians(60.0))
    for event in (TransitEvent.RISE, TransitEvent.SET):
        assert transit.rise_transit_set(event, TransitBody.STAR_OR_PLANET, north, star, star, star, 0.0, 60.0) is None


def test_standard_altitudes():
    assert math.degrees(transit.standard_altitude(TransitBody.STAR_OR_PLANET)) == pytest.approx(-0.5667)
    assert math.degrees(transit.standard_altitude(TransitBody.SUN)) == pytest.approx(-0.8333)
    h0 = transit.standard_altitude(TransitBody.MOON, math.radians(0.95))
    assert math.degrees(h0) == pytest.approx(0.7275 * 0.95 - 0.5667)


def test_event_just_before_midnight():
    # n = m + delta_t/86400 runs past 1 here
    star = EqPoint(asc=0.9995 * 2.0 * math.pi, dec=math.radians(10.0))
    observer = GeographPoint(long=0.0, lat=math.radians(40.0))
    m = transit.rise_transit_set(TransitEvent.TRANSIT, TransitBody.STAR_OR_PLANET, observer, star, star, star, 0.0, 69.0)
    assert m == pytest.approx(0.9995 / 1.00273790935, abs=1e-4)


def test_event_times_stay_within_the_day():
    observer = GeographPoint(long=math.radians(-30.0), lat=math.radians(40.0))
    for k in range(200):
        star = EqPoint(asc=2.0 * math.pi * (k + 0.5) / 200.0, dec=math.radians(10.0))
        for event in TransitEvent:
            m = transit.rise_transit_set(event, TransitBody.STAR_OR_PLANET, observer, star, star, star, 1.1, 69.0)
            assert 0.0 <= m < 1.0
