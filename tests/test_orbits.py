# tests/test_orbits.py

import dataclasses
import math
import random

import pytest

from astrocalc.core.config import DEFAULT_CONFIG
from astrocalc.core.errors import AstrocalcError, ConvergenceError
from astrocalc.core.time import julian_day
from astrocalc.reference import orbits
from astrocalc.reference.orbits import Node


def test_meeus_example_30a_kepler():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 30.a.
    M = 5 deg, e = 0.1.
    """
    E = orbits.solve_kepler(math.radians(5.0), 0.1)
    assert math.degrees(E) == pytest.approx(5.554589, abs=1e-6)
    assert E - 0.1 * math.sin(E) == pytest.approx(math.radians(5.0), abs=1e-12)


def test_kepler_high_eccentricity_needs_many_iterations():
    M = math.radians(2.0)
    with pytest.raises(ConvergenceError):
        orbits.solve_kepler(M, 0.9, dataclasses.replace(DEFAULT_CONFIG, kepler_max_iter=20))
    E = orbits.solve_kepler(M, 0.9)
    assert E - 0.9 * math.sin(E) == pytest.approx(M, abs=1e-11)


def test_kepler_converges_under_default_cap():
    random.seed(7)
    for _ in range(300):
        e = random.uniform(0.0, 0.99)
        M = random.uniform(-math.pi, math.pi)
        E = orbits.solve_kepler(M, e)
        assert E - e * math.sin(E) == pytest.approx(M, abs=1e-9)
    for M in (1e-6, 0.01, math.pi - 0.01, math.pi):
        E = orbits.solve_kepler(M, 0.99)
        assert E - 0.99 * math.sin(E) == pytest.approx(M, abs=1e-9)


def test_kepler_iterations_reports_the_step_count():
    M = math.radians(5.0)
    E, n = orbits.kepler_iterations(M, 0.1)
    assert E == orbits.solve_kepler(M, 0.1)
    assert 1 <= n <= 20
    _, n_high = orbits.kepler_iterations(M, 0.9)
    assert n_high > n
    cfg = dataclasses.replace(DEFAULT_CONFIG, kepler_max_iter=n_high)
    assert orbits.kepler_iterations(M, 0.9, cfg)[1] == n_high
    with pytest.raises(ConvergenceError):
        orbits.kepler_iterations(M, 0.9, dataclasses.replace(cfg, kepler_max_iter=n_high - 1))


def test_kepler_rejects_non_elliptic_eccentricity():
    with pytest.raises(ConvergenceError):
        orbits.solve_kepler(1.0, 1.0)
    with pytest.raises(ConvergenceError):
        orbits.solve_kepler(1.0, -0.1)


def test_kepler_cap_raises_with_diagnostics():
    cfg = dataclasses.replace(DEFAULT_CONFIG, kepler_max_iter=3)
    with pytest.raises(ConvergenceError) as excinfo:
        orbits.solve_kepler(math.radians(5.0), 0.9, cfg)
    err = excinfo.value
    assert err.iterations == 3
    assert err.last_delta > cfg.kepler_tolerance
    assert isinstance(err, AstrocalcError)
    assert isinstance(err, ArithmeticError)


def test_true_anomaly_and_radius_vector_agree():
    a, e = 2.0, 0.3
    E = orbits.solve_kepler(1.3, e)
    v = orbits.true_anomaly(E, e)
    r1 = orbits.radius_vector_from_ecc_anom(E, a, e)
    r2 = orbits.radius_vector_from_true_anom(v, a, e)
    assert r1 == pytest.approx(r2, rel=1e-12)


def test_meeus_example_33a_halley_velocities():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), chapter 33.
    Comet Halley, a = 17.9400782, e = 0.96727426.
    """
    a, e = 17.9400782, 0.96727426
    assert orbits.perihelion_velocity(a, e) == pytest.approx(54.52, abs=0.005)
    assert orbits.aphelion_velocity(a, e) == pytest.approx(0.91, abs=0.005)
    assert orbits.velocity(1.0, a) == pytest.approx(41.53, abs=0.005)


def test_ellipse_length():
    # a circle
    assert orbits.ellipse_length(1.0, 1.0) == pytest.approx(2.0 * math.pi)
    assert orbits.ellipse_length_ramanujan(1.0, 1.0) == pytest.approx(2.0 * math.pi)
    # orbit of comet Halley, about 77 AU around
    a = 17.9400782
    b = a * math.sqrt(1.0 - 0.96727426 ** 2)
    L1 = orbits.ellipse_length(a, b)
    L2 = orbits.ellipse_length_ramanujan(a, b)
    assert 77.0 < L1 < 77.2
    assert L1 == pytest.approx(L2, abs=0.1)


def test_semimajor_axis_and_mean_motion():
    assert orbits.semimajor_axis(0.5, 0.5) == pytest.approx(1.0)
    assert math.degrees(orbits.mean_motion(1.0)) == pytest.approx(0.9856076686, abs=1e-9)


def test_meeus_example_39a_elliptic_node_passage():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 39.a.
    Comet Halley, 1986.
    """
    T = julian_day(1986, 2, 9.45891)
    w = math.radians(111.84644)
    n = math.radians(0.01297082)
    a, e = 17.9400782, 0.96727426

    t_asc, r_asc = orbits.elliptic_node_passage(w, n, a, e, T, Node.ASCENDING)
    assert T - t_asc == pytest.approx(92.2998, abs=1e-4)
    assert r_asc == pytest.approx(1.8045, abs=1e-4)

    t_desc, r_desc = orbits.elliptic_node_passage(w, n, a, e, T, Node.DESCENDING)
    assert T - t_desc == pytest.approx(-28.9105, abs=1e-4)
    assert r_desc == pytest.approx(0.8493, abs=1e-4)


def test_meeus_example_34a_parabolic_position():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 34.a.
    Comet 1998 with q = 1.487469.
    """
    t = julian_day(1998, 8, 5.0)
    T = julian_day(1998, 4, 14.4358)
    v, r = orbits.parabolic_true_anomaly_and_radius(t, T, 1.487469)
    assert math.degrees(v) == pytest.approx(66.78862, abs=1e-5)
    assert r == pytest.approx(2.133911, abs=1e-6)


def test_meeus_example_39b_parabolic_node_passage():
    T = julian_day(1989, 8, 20.291)
    w = math.radians(154.9103)
    q = 1.324502

    t_asc, r_asc = orbits.parabolic_node_passage(w, q, T, Node.ASCENDING)
    assert T - t_asc == pytest.approx(4354.65, abs=0.01)
    assert r_asc == pytest.approx(28.07, abs=0.01)

    t_desc, r_desc = orbits.parabolic_node_passage(w, q, T, Node.DESCENDING)
    assert T - t_desc == pytest.approx(-28.3454, abs=1e-4)
    assert r_desc == pytest.approx(1.3901, abs=1e-4)


def test_meeus_example_35a_near_parabolic():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 35.a.
    e = 1, q = 0.921326, 138.4783 days after perihelion.
    """
    v, r = orbits.near_parabolic_true_anomaly_and_radius(138.4783, 0.0, 1.0, 0.921326)
    assert math.degrees(v) == pytest.approx(102.74426, abs=1e-5)
    assert r == pytest.approx(2.364192, abs=1e-6)


def test_near_parabolic_agrees_with_parabolic_and_kepler():
    q = 0.921326
    v_n, r_n = orbits.near_parabolic_true_anomaly_and_radius(138.4783, 0.0, 1.0, q)
    v_p, r_p = orbits.parabolic_true_anomaly_and_radius(138.4783, 0.0, q)
    assert math.remainder(v_n - v_p, 2.0 * math.pi) == pytest.approx(0.0, abs=1e-8)
    assert r_n == pytest.approx(r_p, abs=1e-8)

    # slightly elliptic: compare with Kepler's equation
    e = 0.99
    a = q / (1.0 - e)
    days = 50.0
    M = orbits.mean_motion(a) * days
    E = orbits.solve_kepler(M, e, dataclasses.replace(DEFAULT_CONFIG, kepler_max_iter=20000))
    v_k = orbits.true_anomaly(E, e)
    v, r = orbits.near_parabolic_true_anomaly_and_radius(days, 0.0, e, q)
    assert v == pytest.approx(v_k, abs=1e-7)
    assert r == pytest.approx(orbits.radius_vector_from_ecc_anom(E, a, e), abs=1e-7)


def test_near_parabolic_at_perihelion_and_before():
    assert orbits.near_parabolic_true_anomaly_and_radius(0.0, 0.0, 1.0, 0.5) == (0.0, 0.5)
    v, r = orbits.near_parabolic_true_anomaly_and_radius(-138.4783, 0.0, 1.0, 0.921326)
    assert math.degrees(math.remainder(v, 2.0 * math.pi)) == pytest.approx(-102.74426, abs=1e-5)
    assert r == pytest.approx(2.364192, abs=1e-6)


def test_near_parabolic_iteration_cap():
    cfg = dataclasses.replace(DEFAULT_CONFIG, near_parabolic_max_iter=1)
    with pytest.raises(ConvergenceError):
        orbits.near_parabolic_true_anomaly_and_radius(50.0, 0.0, 0.99, 0.921326, cfg)
