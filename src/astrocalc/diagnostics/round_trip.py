from __future__ import annotations

import argparse
import math
import random
from typing import List

from astrocalc.core.angle import deg_from_dms, dms_from_deg
from astrocalc.core.time import CalendarKind, date_from_julian_day, julian_day
from astrocalc.core.types import EclPoint, EqPoint
from astrocalc.reference.coords import ecl_from_eq, eq_from_ecl, eq_from_gal, eq_from_hz, gal_from_eq, hz_from_eq


def _ang_diff(a: float, b: float) -> float:
    return abs(math.remainder(a - b, 2.0 * math.pi))


def date_round_trip(N: int, jd_min: float, jd_max: float, *, max_failures: int) -> int:
    """jd -> calendar date -> jd, to 1e-6 day."""
    failures = 0
    for _ in range(N):
        jd0 = random.uniform(jd_min, jd_max)
        d = date_from_julian_day(jd0)
        jd1 = julian_day(d.year, d.month, d.day, d.kind)
        if abs(jd1 - jd0) > 1e-6:
            failures += 1
            print("\nFAIL (date)")
            print("jd0:", jd0)
            print("date:", d)
            print("jd1:", jd1)
            if failures >= max_failures:
                return failures
    return failures


def dms_round_trip(N: int, *, max_failures: int) -> int:
    failures = 0
    for _ in range(N):
        x = random.uniform(-360.0, 360.0)
        y = deg_from_dms(*dms_from_deg(x))
        if abs(x - y) > 1e-9:
            failures += 1
            print("\nFAIL (dms)", x, dms_from_deg(x), y)
            if failures >= max_failures:
                return failures
    return failures


def coords_round_trip(N: int, *, max_failures: int) -> int:
    """Equatorial <-> ecliptic, horizontal and galactic, to 1e-9 rad."""
    failures = 0
    for _ in range(N):
        eq = EqPoint(asc=random.uniform(0.0, 2.0 * math.pi), dec=random.uniform(-1.5, 1.5))
        eps = math.radians(random.uniform(22.0, 24.5))
        lat = random.uniform(-1.4, 1.4)
        H = random.uniform(0.0, 2.0 * math.pi)

        back_ecl = eq_from_ecl(ecl_from_eq(eq, eps), eps)
        back_gal = eq_from_gal(gal_from_eq(eq))
        H1, dec1 = eq_from_hz(hz_from_eq(H, eq.dec, lat), lat)

        errs = {
            "ecliptic": max(_ang_diff(back_ecl.asc, eq.asc), abs(back_ecl.dec - eq.dec)),
            "galactic": max(_ang_diff(back_gal.asc, eq.asc), abs(back_gal.dec - eq.dec)),
            "horizontal": max(_ang_diff(H1, H), abs(dec1 - eq.dec)),
        }
        for name, err in errs.items():
            if err > 1e-9:
                failures += 1
                print(f"\nFAIL ({name}) eq={eq} eps={eps} lat={lat} H={H} err={err:.3e}")
                if failures >= max_failures:
                    return failures
    return failures


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip checks of dates, DMS and coordinate transforms.")
    p.add_argument("--N", type=int, default=2000, help="Trials per check.")
    p.add_argument("--jd-min", type=float, default=0.0)
    p.add_argument("--jd-max", type=float, default=3000000.0)
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per check.")
    args = p.parse_args(argv)

    if args.jd_max < args.jd_min:
        raise SystemExit("--jd-max must be >= --jd-min")

    random.seed(args.seed)
    total_fail = 0
    print("Testing dates ...")
    total_fail += date_round_trip(args.N, args.jd_min, args.jd_max, max_failures=args.max_failures)
    print("Testing DMS ...")
    total_fail += dms_round_trip(args.N, max_failures=args.max_failures)
    print("Testing coordinates ...")
    total_fail += coords_round_trip(args.N, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
