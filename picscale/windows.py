"""Windowed and trigonometric resampling kernels."""

from __future__ import annotations

import math

__all__ = [
    "bartlett",
    "bartlett_hann",
    "blackman_window",
    "blackman",
    "bohman",
    "gaussian",
    "hann",
    "hamming",
    "hanning",
    "bessel_i0",
    "kaiser",
    "sinc",
    "sphinx",
    "welch",
]

_KAISER_BETA = 6.33


def bartlett(x: float) -> float:
    """Bartlett (triangular) window."""
    if 0.0 <= x <= 1.0:
        return 2.0 * x
    return 2.0 - 2.0 * x


def bartlett_hann(x: float) -> float:
    """Bartlett-Hann window over a support of two."""
    x = abs(x)
    if x > 2.0:
        return 0.0
    length = 2.0
    fac = abs(x / (length - 1.0) - 0.5)
    return 0.62 - 0.4832 * fac + 0.38 * math.cos(2.0 * math.pi * fac)


def blackman_window(x: float) -> float:
    """Three-term Blackman window."""
    pi = math.pi
    return (
        0.42
        - 0.49656062 * math.cos(2.0 * pi * x)
        + 0.07684867 * math.cos(4.0 * pi * x)
    )


def blackman(x: float) -> float:
    """Sinc kernel tapered by a Blackman window, support two."""
    x = abs(x)
    if x < 2.0:
        return sinc(x) * blackman_window(x / 2.0)
    return 0.0


def bohman(x: float) -> float:
    """Bohman window on [-1, 1]."""
    if x < -1.0 or x > 1.0:
        return 0.0
    ax = abs(x)
    dx = math.pi * ax
    return (1.0 - ax) * math.cos(dx) + (1.0 / math.pi) * math.sin(dx)


def gaussian(x: float) -> float:
    """Gaussian-shaped kernel with sigma 0.35."""
    sigma = 0.35
    den = 2.0 * sigma * sigma
    den *= den
    return (1.0 / (math.sqrt(2.0 * math.pi) * sigma)) * math.exp(-x / den)


def hann(x: float) -> float:
    """Hann window with a length of two, scaled by the inverse window size."""
    length = 2.0
    size = length * 2.0
    size_scale = 1.0 / size
    part = math.pi / size
    if abs(x) > length:
        return 0.0
    r = math.cos(x * part)
    return r * r * size_scale


def hamming(x: float) -> float:
    """Hamming window on [-1, 1]."""
    x = abs(x)
    if x == 0.0:
        return 1.0
    if x >= 1.0:
        return 0.0
    return 0.54 + 0.46 * math.cos(x * math.pi)


def hanning(x: float) -> float:
    """Hanning window on [-1, 1]."""
    x = abs(x)
    if x == 0.0:
        return 1.0
    if x >= 1.0:
        return 0.0
    return 0.5 + 0.5 * math.cos(x * math.pi)


def bessel_i0(x: float) -> float:
    """Modified Bessel function of the first kind, order zero, by power series."""
    s = 1.0
    y = x * x / 4.0
    t = y
    i = 2.0
    while t > 1e-12:
        s += t
        t *= y / (i * i)
        i += 1.0
    return s


def kaiser(x: float) -> float:
    """Kaiser window with beta 6.33."""
    if x > 1.0:
        return 0.0
    i0a = 1.0 / bessel_i0(_KAISER_BETA)
    arg = 1.0 - x * x
    root = math.sqrt(arg) if arg >= 0.0 else math.nan
    return bessel_i0(_KAISER_BETA * root) * i0a


def sinc(x: float) -> float:
    """Unnormalised sinc, ``sin(x) / x`` with value one at the origin."""
    if x == 0.0:
        return 1.0
    return math.sin(x) / x


def sphinx(x: float) -> float:
    """Sphinx (spherical Bessel) kernel."""
    if abs(x) < 1e-8:
        return 1.0
    x = x * math.pi
    return 3.0 * (math.sin(x) - x * math.cos(x)) / (x * x * x)


def welch(x: float) -> float:
    """Welch (parabolic) window."""
    if x == 0.0:
        return 1.0
    if x >= 1.0:
        return 0.0
    return 1.0 - x * x