#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from typing import List, Optional

from astrocalc.core.time import J2000
from astrocalc.ephemeris import require_ephemeris
from astrocalc.reference import lunar, solar


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "astrocalc[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "astrocalc[diagnostics]"') from e


def _arcsec_diff(a_rad: float, b_rad: float) -> float:
    return ((math.degrees(a_rad - b_rad) + 180.0) % 360.0 - 180.0) * 3600.0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate the analytic Sun and Moon against DE422.")
    p.add_argument("--year-start", type=int, default=1800)
    p.add_argument("--year-end", type=int, default=2200)
    p.add_argument("--step-days", type=float, default=20.0)
    p.add_argument("--out-png", default="reference_validation.png")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()
    require_ephemeris()
    from astrocalc.ephemeris.de422 import DE422Positions

    print("Loading DE422 Ephemeris...")
    de = DE422Positions.load()

    jd_start = max(J2000 + (args.year_start - 2000) * 365.25, de.MIN_JD + 1.0)
    jd_end = min(J2000 + (args.year_end - 2000) * 365.25, de.MAX_JD - 1.0)
    if jd_start > jd_end:
        raise ValueError(f"Requested range is outside valid ephemeris range [{de.MIN_JD}, {de.MAX_JD}]")

    jds = np.arange(jd_start, jd_end, args.step_days)
    years = 2000 + (jds - J2000) / 365.25
    print(f"Validating {len(jds)} points from {years[0]:.0f} to {years[-1]:.0f}...")

    err_sun_lon = []
    err_moon_lon = []
    err_moon_lat = []
    err_moon_dist = []

    for jd in jds:
        jd = float(jd)
        de_sun = de.sun(jd)
        de_moon = de.moon(jd)

        sun = solar.sun_position(jd)
        moon = lunar.moon_position(jd)

        err_sun_lon.append(_arcsec_diff(sun.true_long, de_sun.longitude))
        err_moon_lon.append(_arcsec_diff(moon.longitude, de_moon.longitude))
        err_moon_lat.append(math.degrees(moon.latitude - de_moon.latitude) * 3600.0)
        err_moon_dist.append(moon.distance_km - de_moon.distance_km)

    for name, errs, unit in (
        ("Sun longitude", err_sun_lon, '"'),
        ("Moon longitude", err_moon_lon, '"'),
        ("Moon latitude", err_moon_lat, '"'),
        ("Moon distance", err_moon_dist, " km"),
    ):
        a = np.asarray(errs)
        print(f"  {name:15s} mean {a.mean():+9.2f}{unit}  rms {np.sqrt((a * a).mean()):8.2f}{unit}  max {np.abs(a).max():8.2f}{unit}")

    fig, axs = plt.subplots(4, 1, figsize=(12, 12), sharex=True)
    panels = (
        (err_sun_lon, "Solar Longitude Error (ch. 25 - DE422)", "arcsec", "orange"),
        (err_moon_lon, "Lunar Longitude Error (ch. 47 - DE422)", "arcsec", "blue"),
        (err_moon_lat, "Lunar Latitude Error (ch. 47 - DE422)", "arcsec", "green"),
        (err_moon_dist, "Lunar Distance Error (ch. 47 - DE422)", "km", "purple"),
    )
    for ax, (errs, title, unit, color) in zip(axs, panels):
        ax.scatter(years, errs, s=1, alpha=0.5, color=color)
        ax.set_title(title)
        ax.set_ylabel(f"Error ({unit})")
        ax.grid(True, alpha=0.3)
    axs[-1].set_xlabel("Year")

    plt.suptitle(f"Reference Model Validation against DE422 ({years[0]:.0f} to {years[-1]:.0f})", fontsize=14)
    plt.tight_layout()
    plt.savefig(args.out_png, dpi=200)
    print(f"Validation complete. Plot saved to {args.out_png}")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
