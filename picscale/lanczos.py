"""Lanczos resampling kernels windowed by sinc or jinc."""

from __future__ import annotations

import math

from picscale.bessel import jinc
from picscale.windows import sinc

__all__ = [
    "lanczos_jinc",
    "lanczos2_jinc",
    "lanczos3_jinc",
    "lanczos4_jinc",
    "lanczos6_jinc",
    "lanczos_sinc",
    "lanczos2",
    "lanczos3",
    "lanczos4",
    "lanczos6",
]

# Beyond this point the jinc-based kernel is treated as vanishing.
_JINC_CUTOFF = 16.247661874700962


def lanczos_jinc(x: float, a: float) -> float:
    """Jinc-windowed jinc kernel with support ``a``; zero at the origin."""
    scale_a = 1.0 / a
    if x == 0.0 or x > _JINC_CUTOFF:
        return 0.0
    if abs(x) < a:
        d = math.pi * x
        return jinc(d) * jinc(d * scale_a)
    return 0.0


def lanczos2_jinc(x: float) -> float:
    """Jinc Lanczos kernel with support 2."""
    return lanczos_jinc(x, 2.0)


def lanczos3_jinc(x: float) -> float:
    """Jinc Lanczos kernel with support 3."""
    return lanczos_jinc(x, 3.0)


def lanczos4_jinc(x: float) -> float:
    """Jinc Lanczos kernel with support 4."""
    return lanczos_jinc(x, 4.0)


def lanczos6_jinc(x: float) -> float:
    """Jinc Lanczos kernel with support 6."""
    return lanczos_jinc(x, 6.0)


def lanczos_sinc(x: float, a: float) -> float:
    """Classic sinc-windowed sinc Lanczos kernel with support ``a``."""
    scale_a = 1.0 / a
    if abs(x) < a:
        d = math.pi * x
        return sinc(d) * sinc(d * scale_a)
    return 0.0


def lanczos2(x: float) -> float:
    """Lanczos kernel with support 2."""
    return lanczos_sinc(x, 2.0)


def lanczos3(x: float) -> float:
    """Lanczos kernel with support 3."""
    return lanczos_sinc(x, 3.0)


def lanczos4(x: float) -> float:
    """Lanczos kernel with support 4."""
    return lanczos_sinc(x, 4.0)


def lanczos6(x: float) -> float:
    """Lanczos kernel with support 6."""
    return lanczos_sinc(x, 6.0)