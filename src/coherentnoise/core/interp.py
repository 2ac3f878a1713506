from __future__ import annotations


def cubic_interp(n0: float, n1: float, n2: float, n3: float, a: float) -> float:
    """
    Cubic interpolation between n1 and n2, shaped by the outer values n0 and n3.

    Returns n1 when a == 0 and n2 when a == 1.
    """
    p = (n3 - n2) - (n0 - n1)
    q = (n0 - n1) - p
    r = n2 - n0
    s = n1
    return p * a * a * a + q * a * a + r * a + s


def linear_interp(n0: float, n1: float, a: float) -> float:
    return ((1.0 - a) * n0) + (a * n1)


def s_curve3(a: float) -> float:
    """3a^2 - 2a^3"""
    return a * a * (3.0 - 2.0 * a)


def s_curve5(a: float) -> float:
    """6a^5 - 15a^4 + 10a^3"""
    a3 = a * a * a
    a4 = a3 * a
    a5 = a4 * a
    return (6.0 * a5) - (15.0 * a4) + (10.0 * a3)
