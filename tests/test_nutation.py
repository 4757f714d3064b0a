# tests/test_nutation.py

import math

import pytest

from astrocalc.core.angle import arcsec_to_rad, deg_from_dms, deg_from_hms
from astrocalc.reference import astro_args as aa
from astrocalc.reference import nutation as nut
from astrocalc.reference import series
from astrocalc.reference.sidereal import apparent_sidereal_time, mean_sidereal_time


def test_meeus_example_22a_nutation_and_obliquity():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 22.a.
    Date: 1987 April 10, 0h TD (TT).
    JD: 2446895.5
    """
    jd = 2446895.5
    n = nut.nutation(jd)
    assert n.longitude_arcsec == pytest.approx(-3.788, abs=0.001)
    assert n.obliquity_arcsec == pytest.approx(9.443, abs=0.001)

    eps0 = math.degrees(aa.mean_obliquity(jd))
    assert eps0 == pytest.approx(deg_from_dms(23, 26, 27.407), abs=0.001 / 3600.0)

    eps = math.degrees(nut.true_obliquity(jd))
    assert eps == pytest.approx(deg_from_dms(23, 26, 36.850), abs=0.001 / 3600.0)


def test_low_accuracy_nutation_close_to_full_series():
    jd = 2446895.5
    full = nut.nutation(jd)
    low = nut.nutation_low_accuracy(jd)
    assert low.longitude_arcsec == pytest.approx(full.longitude_arcsec, abs=0.5)
    assert low.obliquity_arcsec == pytest.approx(full.obliquity_arcsec, abs=0.1)


def test_nutation_table_shape():
    assert len(nut.NUTATION_TERMS) == 63
    first = nut.NUTATION_TERMS[0]
    assert tuple(first.multipliers) == (0, 0, 0, 0, 1)
    assert first.sin_coef == -171996


def test_laskar_obliquity_and_unknown_model():
    jd = 2446895.5
    iau = aa.mean_obliquity(jd, model="iau1980")
    laskar = aa.mean_obliquity(jd, model="laskar")
    # the two models agree to a few hundredths of an arcsec near J2000
    assert abs(iau - laskar) < arcsec_to_rad(0.05)
    with pytest.raises(ValueError):
        aa.mean_obliquity(jd, model="iau2006")


def test_meeus_example_12a_sidereal_time():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 12.a.
    Date: 1987 April 10, 0h UT.
    """
    jd = 2446895.5
    mst = mean_sidereal_time(jd)
    assert math.degrees(mst) == pytest.approx(deg_from_hms(13, 10, 46.3668), abs=1e-4 / 240.0)

    n = nut.nutation(jd)
    ast = apparent_sidereal_time(mst, n.longitude, nut.true_obliquity(jd))
    assert math.degrees(ast) == pytest.approx(deg_from_hms(13, 10, 46.1351), abs=1e-3 / 240.0)


def test_meeus_example_12b_sidereal_time_any_instant():
    """1987 April 10, 19h21m00s UT: 8h34m57.0896s."""
    jd = 2446896.30625
    assert math.degrees(mean_sidereal_time(jd)) == pytest.approx(deg_from_hms(8, 34, 57.0896), abs=1e-3 / 240.0)


def test_meeus_example_23a_nutation_in_ra_dec():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 23.a.
    theta Persei, 2028 Nov 13.19 TD.
    """
    d_asc, d_dec = nut.nutation_in_eq_coords(
        math.radians(41.5555635),
        math.radians(49.3503415),
        arcsec_to_rad(14.861),
        arcsec_to_rad(2.705),
        math.radians(23.436),
    )
    assert math.degrees(d_asc) == pytest.approx(0.0044011, abs=2e-6)
    assert math.degrees(d_dec) == pytest.approx(0.001727, abs=2e-6)


def test_sum_series_channels_and_scaling():
    terms = series.terms_from_rows(
        [((1, 0), 2.0, 0.5, 3.0, 0.0), ((0, 1), 1.0, 0.0, -1.0, 0.25)],
    )
    args = (math.pi / 2.0, 0.0)
    T = 2.0
    s, c = series.sum_series(terms, args, T, scale=0.5)
    # sin: (2 + 0.5*2)*sin(pi/2) + 1*sin(0); cos: 3*cos(pi/2) + (-1 + 0.25*2)*cos(0)
    assert s == pytest.approx(0.5 * 3.0)
    assert c == pytest.approx(0.5 * -0.5)


def test_sum_series_eccentricity_factor():
    terms = series.terms_from_rows([((0, 2), 1.0), ((0, -1), 1.0), ((1, 0), 1.0)], channels="sin")
    args = (math.pi / 2.0, math.pi / 4.0)
    E = 0.9
    s, _ = series.sum_series(terms, args, e_factor=E)
    expected = E * E * math.sin(math.pi / 2.0) + E * math.sin(-math.pi / 4.0) + math.sin(math.pi / 2.0)
    assert s == pytest.approx(expected)


def test_terms_from_rows_rejects_bad_rows():
    with pytest.raises(ValueError):
        series.terms_from_rows([((1, 0), 1.0, 2.0)], channels="sin")
    with pytest.raises(ValueError):
        series.terms_from_rows([((1, 0), 1.0)], channels="tan")
