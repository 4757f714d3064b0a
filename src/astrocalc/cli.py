from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import math
import sys


def _fmt_hms(x_rad: float) -> str:
    from astrocalc.core.angle import hms_from_rad
    h, m, s = hms_from_rad(x_rad)
    return f"{h:02d}h{m:02d}m{s:07.4f}s"


def _fmt_dms(x_rad: float) -> str:
    from astrocalc.core.angle import dms_from_rad
    d, m, s = dms_from_rad(x_rad)
    sign = "-" if (d < 0 or m < 0 or s < 0) else "+"
    return f"{sign}{abs(d):d}°{abs(m):02d}'{abs(s):06.3f}\""


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_jd(argv: list[str]) -> int:
    import astrocalc

    p = argparse.ArgumentParser(prog="astrocalc jd", description="Calendar date -> Julian Day")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=float, help="day of month, may carry a fraction")
    p.add_argument("--time", default="0:0:0", help="H:M:S (default 0:0:0)")
    p.add_argument("--julian", action="store_true", help="date is in the Julian calendar")
    args = p.parse_args(argv)

    h, m, s = (float(x) for x in args.time.split(":"))
    kind = "julian" if args.julian else "gregorian"
    jd = astrocalc.jd(args.year, args.month, args.day, int(h), int(m), s, calendar=kind)
    print(f"{args.year}-{args.month:02d}-{args.day:g} {args.time} ({kind})")
    print(f"  JD  = {jd:.6f}")
    print(f"  MJD = {jd - 2400000.5:.6f}")
    return 0


def cmd_date(argv: list[str]) -> int:
    from astrocalc.core.time import date_from_julian_day, day_of_week

    p = argparse.ArgumentParser(prog="astrocalc date", description="Julian Day -> calendar date")
    p.add_argument("jd", type=float)
    args = p.parse_args(argv)

    d = date_from_julian_day(args.jd)
    h, m, s = d.time_of_day()
    weekdays = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
    print(f"JD {args.jd:.6f}")
    print(f"  {d.kind.value:9s} {d.year}-{d.month:02d}-{d.day:.6f}")
    print(f"  time      {h:02d}:{m:02d}:{s:06.3f}")
    print(f"  weekday   {weekdays[day_of_week(args.jd)]}")
    return 0


def cmd_nutation(argv: list[str]) -> int:
    import astrocalc

    p = argparse.ArgumentParser(prog="astrocalc nutation", description="Nutation, obliquity and sidereal time at a JD.")
    p.add_argument("--jd", type=float, default=2451545.0, help="Julian (Ephemeris) Day (default: J2000.0)")
    args = p.parse_args(argv)

    r = astrocalc.nutation_report(args.jd)
    print(f"JD = {r.jd:.6f}")
    print()
    print("Nutation (arcsec):")
    print(f"  in longitude  (dpsi) = {r.nut_long_arcsec:+.4f}")
    print(f"  in obliquity  (deps) = {r.nut_oblq_arcsec:+.4f}")
    print()
    print("Obliquity of the ecliptic:")
    print(f"  mean (eps0) = {_fmt_dms(r.mean_oblq)}")
    print(f"  true (eps)  = {_fmt_dms(r.true_oblq)}")
    print()
    print("Sidereal time at Greenwich:")
    print(f"  mean     = {_fmt_hms(r.mean_sidereal)}")
    print(f"  apparent = {_fmt_hms(r.apparent_sidereal)}")
    return 0


def cmd_sun(argv: list[str]) -> int:
    import astrocalc

    p = argparse.ArgumentParser(prog="astrocalc sun", description="Apparent position of the Sun and the equation of time.")
    p.add_argument("--jd", type=float, default=2451545.0, help="Julian Ephemeris Day")
    args = p.parse_args(argv)

    r = astrocalc.sun_report(args.jd)
    pos = r.position
    print(f"JDE = {r.jd:.6f}")
    print()
    print("Solar Position:")
    print(f"  True Longitude     = {pos.true_long_deg:.6f} deg")
    print(f"  Apparent Longitude = {pos.apparent_long_deg:.6f} deg")
    print(f"  Radius Vector      = {pos.radius:.7f} AU")
    print(f"  Right Ascension    = {_fmt_hms(pos.eq.asc)}")
    print(f"  Declination        = {_fmt_dms(pos.eq.dec)}")
    print(f"  Semidiameter       = {math.degrees(r.semidiameter) * 3600.0:.2f}\"")
    print()
    print(f"Equation of Time = {r.equation_of_time_minutes:+.4f} min")
    print()
    print("Physical ephemeris (deg):")
    print(f"  P  = {r.physical.P_deg:+.2f}")
    print(f"  B0 = {r.physical.B0_deg:+.2f}")
    print(f"  L0 = {r.physical.L0_deg:.2f}")
    return 0


def cmd_moon(argv: list[str]) -> int:
    import astrocalc

    p = argparse.ArgumentParser(prog="astrocalc moon", description="Position, illumination and libration of the Moon.")
    p.add_argument("--jd", type=float, default=2451545.0, help="Julian Ephemeris Day")
    args = p.parse_args(argv)

    r = astrocalc.moon_report(args.jd)
    print(f"JDE = {r.jd:.6f}")
    print()
    print("Lunar Position:")
    print(f"  Longitude (geometric) = {r.position.longitude_deg:.6f} deg")
    print(f"  Longitude (apparent)  = {r.apparent.long_deg % 360.0:.6f} deg")
    print(f"  Latitude              = {r.position.latitude_deg:+.6f} deg")
    print(f"  Distance              = {r.position.distance_km:.1f} km")
    print(f"  Parallax              = {r.position.parallax_deg:.6f} deg")
    print(f"  Right Ascension       = {_fmt_hms(r.eq.asc)}")
    print(f"  Declination           = {_fmt_dms(r.eq.dec)}")
    print()
    print(f"Illuminated fraction = {r.illuminated_fraction:.4f}")
    print(f"Bright limb angle    = {math.degrees(r.bright_limb_angle):.1f} deg")
    print()
    lib = r.libration
    print("Libration (deg):")
    print(f"  longitude = {lib.total_long_deg:+.3f}")
    print(f"  latitude  = {lib.total_lat_deg:+.3f}")
    print(f"  axis P    = {math.degrees(r.axis_position_angle):.2f}")
    return 0


def cmd_planet(argv: list[str]) -> int:
    import astrocalc
    from astrocalc.reference.planets import Planet

    p = argparse.ArgumentParser(prog="astrocalc planet", description="Apparent geocentric position of a planet.")
    p.add_argument("name", choices=[pl.value for pl in Planet if pl is not Planet.EARTH])
    p.add_argument("--jd", type=float, default=2451545.0, help="Julian Ephemeris Day")
    args = p.parse_args(argv)

    r = astrocalc.planet_report(args.name, args.jd)
    app = r.apparent
    print(f"{r.planet.value.capitalize()} at JDE {r.jd:.6f}")
    print()
    print("Heliocentric (mean equinox of date):")
    print(f"  l = {r.heliocentric.longitude_deg:.5f} deg")
    print(f"  b = {r.heliocentric.latitude_deg:+.5f} deg")
    print(f"  r = {r.heliocentric.radius:.6f} AU")
    print()
    print("Apparent geocentric:")
    print(f"  lambda     = {app.ecl.long_deg:.5f} deg")
    print(f"  beta       = {app.ecl.lat_deg:+.5f} deg")
    print(f"  RA         = {_fmt_hms(app.eq.asc)}")
    print(f"  Dec        = {_fmt_dms(app.eq.dec)}")
    print(f"  distance   = {app.distance:.6f} AU")
    print(f"  light time = {app.light_time * 1440.0:.3f} min")
    print()
    print(f"Phase angle          = {math.degrees(r.phase_angle):.2f} deg")
    print(f"Illuminated fraction = {r.illuminated_fraction:.3f}")
    print(f"Semidiameter         = {math.degrees(r.semidiameter) * 3600.0:.2f}\"")
    return 0


def cmd_phase(argv: list[str]) -> int:
    from astrocalc.core.time import date_from_julian_day
    from astrocalc.reference.lunar import Phase, time_of_phase

    names = {"new": Phase.NEW, "first": Phase.FIRST_QUARTER, "full": Phase.FULL, "last": Phase.LAST_QUARTER}
    p = argparse.ArgumentParser(prog="astrocalc phase", description="JDE of the lunar phase nearest a decimal year.")
    p.add_argument("year", type=float, help="decimal year, e.g. 1977.13")
    p.add_argument("--phase", choices=sorted(names), default="new")
    args = p.parse_args(argv)

    jde = time_of_phase(args.year, names[args.phase])
    d = date_from_julian_day(jde)
    h, m, s = d.time_of_day()
    print(f"{args.phase} moon nearest {args.year:g}")
    print(f"  JDE = {jde:.5f}")
    print(f"  TD  = {d.year}-{d.month:02d}-{d.day_of_month:02d} {h:02d}:{m:02d}:{s:04.1f}")
    return 0


def cmd_distance(argv: list[str]) -> int:
    from astrocalc.core.types import GeographPoint
    from astrocalc.reference.earth import approx_geodesic_distance, geodesic_distance

    p = argparse.ArgumentParser(prog="astrocalc distance", description="Geodesic distance between two places.")
    p.add_argument("lon1", type=float, help="degrees, positive west")
    p.add_argument("lat1", type=float)
    p.add_argument("lon2", type=float, help="degrees, positive west")
    p.add_argument("lat2", type=float)
    args = p.parse_args(argv)

    p1 = GeographPoint(long=math.radians(args.lon1), lat=math.radians(args.lat1))
    p2 = GeographPoint(long=math.radians(args.lon2), lat=math.radians(args.lat2))
    print(f"ellipsoid (WGS84) = {geodesic_distance(p1, p2):.2f} km")
    print(f"sphere            = {approx_geodesic_distance(p1, p2):.2f} km")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="astrocalc", description="Astronomical algorithms toolkit CLI.")
    p.add_argument("--verbose", action="store_true", help="log solver iterations")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("jd", help="Calendar date -> Julian Day")
    sub.add_parser("date", help="Julian Day -> calendar date")
    sub.add_parser("nutation", help="Nutation, obliquity and sidereal time at a JD.")
    sub.add_parser("sun", help="Apparent solar position and equation of time.")
    sub.add_parser("moon", help="Lunar position, illumination and libration.")
    sub.add_parser("planet", help="Apparent geocentric position of a planet.")
    sub.add_parser("phase", help="Time of a lunar phase.")
    sub.add_parser("distance", help="Geodesic distance between two places.")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["nutation-plot", "kepler-convergence", "round-trip", "validate-ref"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.cmd == "diag":
        tool_map = {
            "nutation-plot": "astrocalc.diagnostics.nutation_plot",
            "kepler-convergence": "astrocalc.diagnostics.kepler_convergence",
            "round-trip": "astrocalc.diagnostics.round_trip",
            "validate-ref": "astrocalc.diagnostics.validate_reference",
        }
        return _run_module_main(tool_map[args.tool], rest)

    commands = {
        "jd": cmd_jd,
        "date": cmd_date,
        "nutation": cmd_nutation,
        "sun": cmd_sun,
        "moon": cmd_moon,
        "planet": cmd_planet,
        "phase": cmd_phase,
        "distance": cmd_distance,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
