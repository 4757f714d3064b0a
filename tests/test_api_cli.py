# tests/test_api_cli.py

import dataclasses
import logging
import math
import random

import pytest

import astrocalc
from astrocalc import cli
from astrocalc.core.config import DEFAULT_CONFIG, SolverConfig
from astrocalc.diagnostics import kepler_convergence, round_trip
from astrocalc.reference import orbits


def test_solver_config_validation():
    assert DEFAULT_CONFIG.kepler_max_iter == 5000
    assert SolverConfig(kepler_tolerance=1e-8).kepler_tolerance == 1e-8
    with pytest.raises(ValueError):
        SolverConfig(kepler_max_iter=0)
    with pytest.raises(ValueError):
        SolverConfig(light_time_tolerance=0.0)
    with pytest.raises(ValueError):
        dataclasses.replace(DEFAULT_CONFIG, near_parabolic_max_iter=-1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.kepler_max_iter = 5


def test_jd_with_time_of_day():
    assert astrocalc.jd(2000, 1, 1, 12) == pytest.approx(2451545.0)
    assert astrocalc.jd(1957, 10, 4, 19, 26, 24.0) == pytest.approx(2436116.31, abs=1e-6)
    assert astrocalc.jd(837, 4, 10, 7, 12, calendar="julian") == pytest.approx(2026871.8, abs=1e-6)
    with pytest.raises(astrocalc.InvalidDateError):
        astrocalc.jd(2000, 13, 1)


def test_nutation_report_matches_meeus_22a():
    r = astrocalc.nutation_report(2446895.5)
    assert r.nut_long_arcsec == pytest.approx(-3.788, abs=0.001)
    assert r.nut_oblq_arcsec == pytest.approx(9.443, abs=0.001)
    assert r.true_oblq - r.mean_oblq == pytest.approx(r.nut_oblq)


def test_sun_report():
    r = astrocalc.sun_report(2448908.5)
    assert r.position.apparent_long_deg == pytest.approx(199.90895, abs=1e-5)
    assert r.equation_of_time_minutes == pytest.approx(13.7, abs=0.1)
    assert r.physical.P_deg == pytest.approx(26.27, abs=0.05)
    assert r.physical.B0_deg == pytest.approx(5.99, abs=0.05)


def test_moon_report_matches_meeus_1992_april_12():
    r = astrocalc.moon_report(2448724.5)
    assert r.apparent.long_deg == pytest.approx(133.167265, abs=1e-5)
    assert r.eq.asc_deg == pytest.approx(134.688470, abs=1e-4)
    assert r.eq.dec_deg == pytest.approx(13.768368, abs=1e-4)
    # Sun from the low-accuracy theory: k good to a few 1e-4
    assert r.illuminated_fraction == pytest.approx(0.6786, abs=2e-3)
    assert r.libration.total_long_deg == pytest.approx(-1.23, abs=0.01)
    assert r.libration.total_lat_deg == pytest.approx(4.20, abs=0.01)
    assert math.degrees(r.axis_position_angle) == pytest.approx(15.08, abs=0.01)


def test_planet_report():
    r = astrocalc.planet_report("venus", 2448976.5)
    assert r.planet is astrocalc.Planet.VENUS
    assert r.apparent.distance == pytest.approx(0.910947, abs=5e-4)
    assert 0.0 < r.illuminated_fraction < 1.0
    assert r.illuminated_fraction == pytest.approx(0.647, abs=0.01)
    with pytest.raises(ValueError):
        astrocalc.planet_report("vulcan", 2448976.5)


def test_cli_jd_and_date(capsys):
    assert cli.main(["jd", "2000", "1", "1.5"]) == 0
    out = capsys.readouterr().out
    assert "JD  = 2451545.000000" in out

    assert cli.main(["date", "2436116.31"]) == 0
    out = capsys.readouterr().out
    assert "1957-10-4.81" in out
    assert "Friday" in out


@pytest.mark.parametrize("argv, needle", [
    (["nutation", "--jd", "2446895.5"], "Nutation (arcsec)"),
    (["sun", "--jd", "2448908.5"], "Equation of Time"),
    (["moon", "--jd", "2448724.5"], "133.167"),
    (["planet", "mars", "--jd", "2451545.0"], "Mars at JDE"),
    (["phase", "1977.13"], "2443192.65"),
    (["distance", "-2.3372", "48.8364", "77.0656", "38.9214"], "ellipsoid"),
])
def test_cli_commands(capsys, argv, needle):
    assert cli.main(argv) == 0
    assert needle in capsys.readouterr().out


def test_cli_verbose_logs_light_time(caplog):
    with caplog.at_level(logging.DEBUG, logger="astrocalc"):
        assert cli.main(["--verbose", "planet", "jupiter", "--jd", "2451545.0"]) == 0
    assert any("light time" in rec.getMessage() for rec in caplog.records)


def test_diagnostic_helpers():
    random.seed(5)
    assert round_trip.date_round_trip(200, 0.0, 3000000.0, max_failures=1) == 0
    assert round_trip.dms_round_trip(200, max_failures=1) == 0
    assert kepler_convergence.count_iterations(math.radians(5.0), 0.1, 1e-12, 100) <= 20
    assert kepler_convergence.count_iterations(math.radians(5.0), 0.9, 1e-12, 3) == 4
    _, n = orbits.kepler_iterations(math.radians(5.0), 0.9)
    assert kepler_convergence.count_iterations(math.radians(5.0), 0.9, 1e-12, 5000) == n
