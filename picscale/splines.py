"""Piecewise-polynomial resampling kernels: BC splines, cubic, spline-N, Lagrange, quadric, bilinear."""

from __future__ import annotations

import math

__all__ = [
    "bc_spline",
    "hermite_spline",
    "b_spline",
    "mitchell_netravalli",
    "catmull_rom",
    "robidoux",
    "robidoux_sharp",
    "cubic_spline",
    "bicubic_spline",
    "spline16",
    "spline36",
    "spline64",
    "lagrange",
    "lagrange2",
    "lagrange3",
    "quadric",
    "bilinear",
]

_SQRT2 = math.sqrt(2.0)

_ROBIDOUX_B = 12.0 / (19.0 + 9.0 * _SQRT2)
_ROBIDOUX_C = 13.0 / (58.0 + 216.0 * _SQRT2)
_ROBIDOUX_SHARP_B = 6.0 / (13.0 + 7.0 * _SQRT2)
_ROBIDOUX_SHARP_C = 7.0 / (2.0 + 12.0 * _SQRT2)


def bc_spline(d: float, b: float, c: float) -> float:
    """Mitchell-Netravali family cubic with parameters ``b`` and ``c``."""
    x = abs(d)
    dp = x * x
    tp = dp * x
    if x < 1.0:
        return (
            (12.0 - 9.0 * b - 6.0 * c) * tp
            + (-18.0 + 12.0 * b + 6.0 * c) * dp
            + (6.0 - 2.0 * b)
        ) * (1.0 / 6.0)
    if x < 2.0:
        return (
            (-b - 6.0 * c) * tp
            + (6.0 * b + 30.0 * c) * dp
            + (-12.0 * b - 48.0 * c) * x
            + (8.0 * b + 24.0 * c)
        ) * (1.0 / 6.0)
    return 0.0


def hermite_spline(x: float) -> float:
    """BC spline with B = 0, C = 0."""
    return bc_spline(x, 0.0, 0.0)


def b_spline(x: float) -> float:
    """Cubic B-spline (B = 1, C = 0)."""
    return bc_spline(x, 1.0, 0.0)


def mitchell_netravalli(x: float) -> float:
    """Mitchell-Netravali filter (B = C = 1/3)."""
    return bc_spline(x, 1.0 / 3.0, 1.0 / 3.0)


def catmull_rom(x: float) -> float:
    """Catmull-Rom spline (B = 0, C = 1/2)."""
    return bc_spline(x, 0.0, 0.5)


def robidoux(x: float) -> float:
    """Robidoux cubic filter."""
    return bc_spline(x, _ROBIDOUX_B, _ROBIDOUX_C)


def robidoux_sharp(x: float) -> float:
    """Sharpened Robidoux cubic filter."""
    return bc_spline(x, _ROBIDOUX_SHARP_B, _ROBIDOUX_SHARP_C)


def cubic_spline(d: float) -> float:
    """Uniform cubic B-spline kernel."""
    x = abs(d)
    if x < 1.0:
        return (4.0 + x * x * (3.0 * x - 6.0)) * (1.0 / 6.0)
    if x < 2.0:
        return (8.0 + x * (-12.0 + x * (6.0 - x))) * (1.0 / 6.0)
    return 0.0


def bicubic_spline(d: float) -> float:
    """Keys bicubic convolution kernel with a = -0.5."""
    a = -0.5
    modulo = abs(d)
    if modulo >= 2.0:
        return 0.0
    floatd = modulo * modulo
    triplet = floatd * modulo
    if modulo <= 1.0:
        return (a + 2.0) * triplet - (a + 3.0) * floatd + 1.0
    return a * triplet - 5.0 * a * floatd + 8.0 * a * modulo - 4.0 * a


def spline16(x: float) -> float:
    """Four-tap interpolating spline; ``x`` is a non-negative distance."""
    if x < 1.0:
        return ((x - 9.0 / 5.0) * x - 1.0 / 5.0) * x + 1.0
    u = x - 1.0
    return ((-1.0 / 3.0 * u + 4.0 / 5.0) * u - 7.0 / 15.0) * u


def spline36(x: float) -> float:
    """Six-tap interpolating spline; ``x`` is a non-negative distance."""
    if x < 1.0:
        return ((13.0 / 11.0 * x - 453.0 / 209.0) * x - 3.0 / 209.0) * x + 1.0
    if x < 2.0:
        u = x - 1.0
        return ((-6.0 / 11.0 * u + 270.0 / 209.0) * u - 156.0 / 209.0) * u
    u = x - 2.0
    return ((1.0 / 11.0 * u - 45.0 / 209.0) * u + 26.0 / 209.0) * u


def spline64(x: float) -> float:
    """Eight-tap interpolating spline; ``x`` is a non-negative distance."""
    if x < 1.0:
        return ((49.0 / 41.0 * x - 6387.0 / 2911.0) * x - 3.0 / 2911.0) * x + 1.0
    if x < 2.0:
        u = x - 1.0
        return ((-24.0 / 41.0 * u + 4032.0 / 2911.0) * u - 2328.0 / 2911.0) * u
    if x < 3.0:
        u = x - 2.0
        return ((6.0 / 41.0 * u - 1008.0 / 2911.0) * u + 582.0 / 2911.0) * u
    u = x - 3.0
    return ((-1.0 / 41.0 * u + 168.0 / 2911.0) * u - 97.0 / 2911.0) * u


def _to_index(value: float) -> int:
    """Truncate toward zero, saturating negatives and NaN to zero."""
    if not value > 0.0:
        return 0
    return math.trunc(value)


def lagrange(x: float, support: int) -> float:
    """Lagrange interpolation kernel of order ``2 * support``."""
    if x > support:
        return 0.0
    order = _to_index(2.0 * support)
    n = _to_index(support + x)
    value = 1.0
    for i in range(order):
        if i != n:
            value *= (n - i - x) / (n - i)
    return value


def lagrange2(x: float) -> float:
    """Lagrange kernel with support 2."""
    return lagrange(x, 2)


def lagrange3(x: float) -> float:
    """Lagrange kernel with support 3."""
    return lagrange(x, 3)


def quadric(x: float) -> float:
    """Quadratic B-spline kernel."""
    x = abs(x)
    if x < 0.5:
        return 0.75 - x * x
    if x < 1.5:
        t = x - 1.5
        return 0.5 * t * t
    return 0.0


def bilinear(x: float) -> float:
    """Triangle (tent) kernel."""
    x = abs(x)
    if x < 1.0:
        return 1.0 - x
    return 0.0