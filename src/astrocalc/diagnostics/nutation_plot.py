#!/usr/bin/env python3
from __future__ import annotations

import argparse

from astrocalc.core.time import J2000


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


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plot nutation in longitude and obliquity (63-term series vs low accuracy).")
    p.add_argument("--y0", type=float, default=1990.0, help="start year")
    p.add_argument("--y1", type=float, default=2010.0, help="end year")
    p.add_argument("--step-days", type=float, default=5.0, help="sampling step in days")
    p.add_argument("--out", default="nutation.png", help="output image filename")
    args = p.parse_args(argv)

    if args.y1 < args.y0:
        raise SystemExit("--y1 must be >= --y0")

    np = _need_numpy()
    plt = _need_matplotlib()

    from astrocalc.reference.nutation import nutation, nutation_low_accuracy

    jds = np.arange(J2000 + (args.y0 - 2000.0) * 365.25, J2000 + (args.y1 - 2000.0) * 365.25, args.step_days)
    years = 2000.0 + (jds - J2000) / 365.25

    full = [nutation(float(jd)) for jd in jds]
    low = [nutation_low_accuracy(float(jd)) for jd in jds]
    dpsi = np.array([n.longitude_arcsec for n in full])
    deps = np.array([n.obliquity_arcsec for n in full])
    dpsi_low = np.array([n.longitude_arcsec for n in low])
    deps_low = np.array([n.obliquity_arcsec for n in low])

    fig, axs = plt.subplots(3, 1, figsize=(11, 9), sharex=True)
    axs[0].plot(years, dpsi, linewidth=1, label="dpsi")
    axs[0].plot(years, deps, linewidth=1, label="deps")
    axs[0].set_ylabel("arcsec")
    axs[0].set_title("Nutation (IAU 1980, 63 terms)")
    axs[0].legend()
    axs[0].grid(True, alpha=0.3)

    axs[1].plot(years, dpsi_low - dpsi, linewidth=1, color="tab:red")
    axs[1].set_ylabel("arcsec")
    axs[1].set_title("low accuracy - full, longitude")
    axs[1].grid(True, alpha=0.3)

    axs[2].plot(years, deps_low - deps, linewidth=1, color="tab:green")
    axs[2].set_ylabel("arcsec")
    axs[2].set_title("low accuracy - full, obliquity")
    axs[2].set_xlabel("Year")
    axs[2].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(args.out, dpi=160)
    print(f"max |dpsi low-full| = {np.abs(dpsi_low - dpsi).max():.3f}\"")
    print(f"max |deps low-full| = {np.abs(deps_low - deps).max():.3f}\"")
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
