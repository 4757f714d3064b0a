# reference/orbits.py

from __future__ import annotations

"""
astrocalc.reference.orbits

Elliptic, parabolic and near-parabolic motion (Meeus ch. 30, 33-35).

Distances in AU, times in days (JDE), angles in radians. The iterative
solvers take a SolverConfig and raise ConvergenceError instead of looping
forever.
"""

import logging
import math
from enum import Enum
from typing import Tuple

from ..core.angle import wrap_rad
from ..core.config import SolverConfig, resolve
from ..core.errors import ConvergenceError

log = logging.getLogger(__name__)

# Gaussian gravitational constant (rad/day)
GAUSS_K = 0.01720209895


class Node(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


def _node_true_anomaly(w: float, node: Node) -> float:
    return -w if node is Node.ASCENDING else math.pi - w


# ------------------------------------------------------------
# Elliptic motion
# ------------------------------------------------------------

def solve_kepler(mean_anom: float, ecc: float, config: SolverConfig | None = None) -> float:
    """
    Eccentric anomaly E from M = E - e sin E by fixed-point iteration
    E <- M + e sin E, started at E = M (Meeus 30, first method).

    Converges for 0 <= e < 1, slowly as e approaches 1. Raises
    ConvergenceError for e outside [0, 1) or when the cap is reached.
    """
    return kepler_iterations(mean_anom, ecc, config)[0]


def kepler_iterations(mean_anom: float, ecc: float, config: SolverConfig | None = None) -> Tuple[float, int]:
    """solve_kepler, also returning the number of steps taken."""
    cfg = resolve(config)
    if not (0.0 <= ecc < 1.0):
        log.warning("solve_kepler: eccentricity %r outside [0, 1)", ecc)
        raise ConvergenceError(f"Kepler's equation by iteration needs 0 <= e < 1, got e={ecc}")

    E = mean_anom
    delta = float("inf")
    for i in range(1, cfg.kepler_max_iter + 1):
        E_next = mean_anom + ecc * math.sin(E)
        delta = abs(E_next - E)
        E = E_next
        if delta < cfg.kepler_tolerance:
            log.debug("solve_kepler: e=%.6f converged in %d iterations", ecc, i)
            return E, i

    log.warning("solve_kepler: no convergence after %d iterations (e=%r, |dE|=%.3e)",
                cfg.kepler_max_iter, ecc, delta)
    raise ConvergenceError(
        f"Kepler's equation did not converge in {cfg.kepler_max_iter} iterations (e={ecc})",
        iterations=cfg.kepler_max_iter,
        last_delta=delta,
    )


def true_anomaly(ecc_anom: float, ecc: float) -> float:
    """True anomaly v from the eccentric anomaly (Meeus 30.1)."""
    return 2.0 * math.atan2(math.sqrt(1.0 + ecc) * math.tan(ecc_anom / 2.0), math.sqrt(1.0 - ecc))


def radius_vector_from_ecc_anom(ecc_anom: float, a: float, ecc: float) -> float:
    return a * (1.0 - ecc * math.cos(ecc_anom))


def radius_vector_from_true_anom(true_anom: float, a: float, ecc: float) -> float:
    return a * (1.0 - ecc * ecc) / (1.0 + ecc * math.cos(true_anom))


def velocity(r: float, a: float) -> float:
    """Instantaneous orbital velocity (km/s) at distance r (Meeus 33.A)."""
    return 42.1219 * math.sqrt(1.0 / r - 0.5 / a)


def perihelion_velocity(a: float, ecc: float) -> float:
    return 29.7847 * math.sqrt((1.0 + ecc) / ((1.0 - ecc) * a))


def aphelion_velocity(a: float, ecc: float) -> float:
    return 29.7847 * math.sqrt((1.0 - ecc) / ((1.0 + ecc) * a))


def ellipse_length(a: float, b: float) -> float:
    """
    Approximate perimeter of an ellipse (Meeus 33): pi(21A - 2G - 3H)/8
    from the arithmetic, geometric and harmonic means of a and b.
    Error below 0.001% for e < 0.88 but grows quickly near e = 1.
    """
    A = (a + b) / 2.0
    G = math.sqrt(a * b)
    H = 2.0 * a * b / (a + b)
    return math.pi * (21.0 * A - 2.0 * G - 3.0 * H) / 8.0


def ellipse_length_ramanujan(a: float, b: float) -> float:
    """Ramanujan's 1914 approximation of the perimeter."""
    return math.pi * (3.0 * (a + b) - math.sqrt((a + 3.0 * b) * (3.0 * a + b)))


def semimajor_axis(perihelion: float, ecc: float) -> float:
    return perihelion / (1.0 - ecc)


def mean_motion(a: float) -> float:
    """Mean daily motion n (radians/day) for semimajor axis a (AU)."""
    return GAUSS_K / a ** 1.5


def elliptic_node_passage(w: float, n: float, a: float, ecc: float, T: float, node: Node) -> Tuple[float, float]:
    """
    (time, radius vector) of passage through a node of an elliptic orbit (Meeus ch. 39).

    w argument of perihelion, n mean motion (rad/day), T time of perihelion.
    """
    v = _node_true_anomaly(w, node)
    E = 2.0 * math.atan2(math.sqrt(1.0 - ecc) * math.tan(v / 2.0), math.sqrt(1.0 + ecc))
    M = E - ecc * math.sin(E)
    return T + M / n, a * (1.0 - ecc * math.cos(E))


# ------------------------------------------------------------
# Parabolic motion (Meeus ch. 34)
# ------------------------------------------------------------

def parabolic_true_anomaly_and_radius(t: float, T: float, q: float) -> Tuple[float, float]:
    """(v, r) at time t for perihelion time T and perihelion distance q; Barker's equation solved directly."""
    W = 0.03649116245 * (t - T) / q ** 1.5
    G = W / 2.0
    Y = (G + math.sqrt(G * G + 1.0)) ** (1.0 / 3.0)
    s = Y - 1.0 / Y
    return 2.0 * math.atan(s), q * (1.0 + s * s)


def parabolic_node_passage(w: float, q: float, T: float, node: Node) -> Tuple[float, float]:
    v = _node_true_anomaly(w, node)
    s = math.tan(v / 2.0)
    return T + 27.403895 * q ** 1.5 * s * (s * s + 3.0), q * (1.0 + s * s)


# ------------------------------------------------------------
# Near-parabolic motion (Meeus ch. 35, Landgraf's method)
# ------------------------------------------------------------

_LANDGRAF_DIVERGENCE = 1000.0


def near_parabolic_true_anomaly_and_radius(
    t: float,
    T: float,
    ecc: float,
    q: float,
    config: SolverConfig | None = None,
) -> Tuple[float, float]:
    """
    (v, r) in an orbit with e close to 1, elliptic or hyperbolic.

    Works for e = 1 exactly and fails (ConvergenceError) far from
    perihelion when e is not close to 1; use solve_kepler there.
    """
    cfg = resolve(config)
    tol = cfg.near_parabolic_tolerance
    cap = cfg.near_parabolic_max_iter

    days = t - T
    if days == 0.0:
        return 0.0, q

    q1 = GAUSS_K * math.sqrt((1.0 + ecc) / q) / (2.0 * q)
    g = (1.0 - ecc) / (1.0 + ecc)
    q2 = q1 * days

    s = 2.0 / (3.0 * abs(q2))
    s = 2.0 / math.tan(2.0 * math.atan(math.tan(math.atan(s) / 2.0) ** (1.0 / 3.0)))
    if days < 0.0:
        s = -s

    if ecc != 1.0:
        outer = 0
        while True:
            s0 = s
            z = 1
            y = s * s
            g1 = -y * s
            q3 = q2 + 2.0 * g * s * y / 3.0
            while True:
                z += 1
                g1 = -g1 * g * y
                z1 = (z - (z + 1) * g) / (2.0 * z + 1.0)
                f = z1 * g1
                q3 += f
                if z > cap or abs(f) > _LANDGRAF_DIVERGENCE:
                    log.warning("near_parabolic: series diverged (terms=%d, |f|=%.3e)", z, abs(f))
                    raise ConvergenceError(
                        f"near-parabolic series did not converge (e={ecc}, t-T={days})",
                        iterations=z,
                        last_delta=abs(f),
                    )
                if abs(f) <= tol:
                    break

            outer += 1
            if outer > cap:
                log.warning("near_parabolic: no convergence after %d outer iterations", cap)
                raise ConvergenceError(
                    f"near-parabolic solution did not converge in {cap} iterations",
                    iterations=outer,
                    last_delta=abs(s - s0),
                )

            inner = 0
            while True:
                s1 = s
                s = (2.0 * s * s * s / 3.0 + q3) / (s * s + 1.0)
                inner += 1
                if abs(s - s1) <= tol:
                    break
                if inner > cap:
                    raise ConvergenceError(
                        "near-parabolic inner iteration did not converge",
                        iterations=inner,
                        last_delta=abs(s - s1),
                    )
            if abs(s - s0) <= tol:
                break
        log.debug("near_parabolic: converged after %d outer iterations", outer)

    v = wrap_rad(2.0 * math.atan(s))
    r = q * (1.0 + ecc) / (1.0 + ecc * math.cos(v))
    return v, r
