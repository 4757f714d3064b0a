#!/usr/bin/env python3
from __future__ import annotations

"""
Iteration counts of the fixed-point Kepler solver over a grid of
eccentricity and mean anomaly. Cells where the solver gives up with
ConvergenceError are marked with the cap.
"""

import argparse
import dataclasses

from astrocalc.core.config import DEFAULT_CONFIG
from astrocalc.core.errors import ConvergenceError
from astrocalc.reference.orbits import kepler_iterations


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


def count_iterations(M: float, e: float, tol: float, cap: int) -> int:
    """Steps solve_kepler takes at (M, e); cap + 1 when it raises ConvergenceError."""
    cfg = dataclasses.replace(DEFAULT_CONFIG, kepler_tolerance=tol, kepler_max_iter=cap)
    try:
        return kepler_iterations(M, e, cfg)[1]
    except ConvergenceError:
        return cap + 1


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Kepler solver iteration counts vs eccentricity and mean anomaly.")
    p.add_argument("--cap", type=int, default=DEFAULT_CONFIG.kepler_max_iter)
    p.add_argument("--tol", type=float, default=DEFAULT_CONFIG.kepler_tolerance)
    p.add_argument("--n-e", type=int, default=100, help="eccentricity samples in [0, 0.99]")
    p.add_argument("--n-m", type=int, default=180, help="mean anomaly samples in [0, 180) deg")
    p.add_argument("--out", default="", help="output image filename (table only when empty)")
    args = p.parse_args(argv)

    np = _need_numpy()

    es = np.linspace(0.0, 0.99, args.n_e)
    Ms = np.radians(np.linspace(0.0, 180.0, args.n_m, endpoint=False))
    grid = np.array([[count_iterations(float(M), float(e), args.tol, args.cap) for M in Ms] for e in es])

    print(f"cap = {args.cap}, tol = {args.tol:g}")
    print(f"{'e':>6}  {'max':>5}  {'mean':>7}  {'failed':>6}")
    for e, row in zip(es[:: max(1, args.n_e // 20)], grid[:: max(1, args.n_e // 20)]):
        failed = int((row > args.cap).sum())
        print(f"{e:6.3f}  {int(row.max()):5d}  {row.mean():7.2f}  {failed:6d}")

    if args.out:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(10, 6))
        im = ax.imshow(
            grid,
            origin="lower",
            aspect="auto",
            extent=(0.0, 180.0, float(es[0]), float(es[-1])),
            vmax=args.cap + 1,
        )
        fig.colorbar(im, ax=ax, label="iterations (cap + 1 = ConvergenceError)")
        ax.set_xlabel("mean anomaly (deg)")
        ax.set_ylabel("eccentricity")
        ax.set_title("solve_kepler: fixed-point iterations")
        fig.tight_layout()
        fig.savefig(args.out, dpi=160)
        print(f"Saved: {args.out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
