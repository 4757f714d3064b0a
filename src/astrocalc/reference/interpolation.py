from __future__ import annotations


def _three_point(y1: float, y2: float, y3: float, n: float) -> float:
    a = y2 - y1
    b = y3 - y2
    return y2 + n / 2.0 * (a + b + n * (b - a))


def interpolate_three(y1: float, y2: float, y3: float, n: float) -> float:
    """
    Value at n between tabular values y1, y2, y3 equally spaced in the
    argument (Meeus 3.3). n is measured from y2 in units of the interval;
    n > 0 toward y3.
    """
    if abs(n) > 1.0:
        raise ValueError(f"interpolating factor must be within [-1, 1], got {n}")
    return _three_point(y1, y2, y3, n)


def interpolate_five(y1: float, y2: float, y3: float, y4: float, y5: float, n: float) -> float:
    """Same from five values around y3 (Meeus 3.8)."""
    A = y2 - y1
    B = y3 - y2
    C = y4 - y3
    D = y5 - y4
    E = B - A
    F = C - B
    G = D - C
    H = F - E
    J = G - F
    K = J - H
    return y3 + n / 2.0 * (B + C) + n * n / 2.0 * F + n * (n * n - 1.0) / 12.0 * (H + J) + n * n * (n * n - 1.0) / 24.0 * K
