# reference/series.py

from __future__ import annotations

"""
astrocalc.reference.series

One evaluator for the trigonometric series of nutation (Meeus 22.A), of
the Moon (Meeus 47.A/B) and of Pluto (Meeus 37.A): each row carries
integer multipliers of the fundamental arguments and one or two
amplitudes, optionally with a secular rate per Julian century.
"""

import math
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple


class SeriesTerm(NamedTuple):
    """
    One row of a periodic series.

    multipliers multiply the fundamental arguments in table order.
    The sine channel receives (sin_coef + T*sin_rate) * sin(arg) and the
    cosine channel (cos_coef + T*cos_rate) * cos(arg).
    """
    multipliers: Tuple[int, ...]
    sin_coef: float
    sin_rate: float = 0.0
    cos_coef: float = 0.0
    cos_rate: float = 0.0


def terms_from_rows(rows: Iterable[tuple], *, channels: str = "sin,sin_rate,cos,cos_rate") -> Tuple[SeriesTerm, ...]:
    """
    Build SeriesTerm tuples from literal table rows (multipliers, *amplitudes).

    channels names the amplitude columns that follow the multipliers:
      'sin,sin_rate,cos,cos_rate'  nutation rows
      'sin,cos'                    lunar longitude/distance and Pluto rows
      'sin'                        lunar latitude rows
    """
    names = tuple(c.strip() for c in channels.split(","))
    allowed = {"sin", "sin_rate", "cos", "cos_rate"}
    if not names or any(n not in allowed for n in names):
        raise ValueError("channels must be drawn from: sin, sin_rate, cos, cos_rate")

    out = []
    for row in rows:
        mult, *amps = row
        if len(amps) != len(names):
            raise ValueError(f"row {row!r} does not match channels {channels!r}")
        kw = dict(zip(names, amps))
        out.append(SeriesTerm(
            multipliers=tuple(int(k) for k in mult),
            sin_coef=float(kw.get("sin", 0.0)),
            sin_rate=float(kw.get("sin_rate", 0.0)),
            cos_coef=float(kw.get("cos", 0.0)),
            cos_rate=float(kw.get("cos_rate", 0.0)),
        ))
    return tuple(out)


def term_argument(multipliers: Sequence[int], args: Sequence[float]) -> float:
    """Integer combination of the fundamental arguments (radians)."""
    return sum(k * a for k, a in zip(multipliers, args) if k)


def sum_series(
    terms: Iterable[SeriesTerm],
    args: Sequence[float],
    T: float = 0.0,
    *,
    scale: float = 1.0,
    e_factor: Optional[float] = None,
    e_index: int = 1,
) -> Tuple[float, float]:
    """
    Sum a periodic series into its (sine, cosine) channels.

    args are the fundamental arguments in radians, in the order of the
    table multipliers. When e_factor is given, a term whose multiplier at
    e_index (the Sun's mean anomaly) is +-1 is scaled by E and one with
    +-2 by E^2 (Meeus 47.6). scale is applied once to the finished sums.
    """
    s_sum = 0.0
    c_sum = 0.0
    for term in terms:
        arg = term_argument(term.multipliers, args)
        amp_s = term.sin_coef + T * term.sin_rate
        amp_c = term.cos_coef + T * term.cos_rate
        if e_factor is not None:
            k = abs(term.multipliers[e_index])
            if k == 1:
                amp_s *= e_factor
                amp_c *= e_factor
            elif k == 2:
                amp_s *= e_factor * e_factor
                amp_c *= e_factor * e_factor
        if amp_s:
            s_sum += amp_s * math.sin(arg)
        if amp_c:
            c_sum += amp_c * math.cos(arg)
    return s_sum * scale, c_sum * scale
