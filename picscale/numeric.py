"""Rounding, saturating conversion and multiply-add helpers."""

from __future__ import annotations

import math

__all__ = ["cpu_round", "to_u8", "to_u16", "mlaf"]


def cpu_round(x: float) -> float:
    """Round to nearest integer, halves away from zero."""
    if not math.isfinite(x):
        return x
    t = float(math.trunc(x))
    if abs(x - t) >= 0.5:
        t += math.copysign(1.0, x)
    return t


def _saturate(x: float, upper: int) -> int:
    r = cpu_round(x)
    if math.isnan(r):
        return 0
    return int(min(max(r, 0.0), float(upper)))


def to_u8(x: float) -> int:
    """Round and clamp a float to the 0..255 range."""
    return _saturate(x, 255)


def to_u16(x: float, bit_depth: int) -> int:
    """Round and clamp a float to the range of ``bit_depth`` bits."""
    return _saturate(x, (1 << bit_depth) - 1)


def mlaf(acc: float, a: float, b: float) -> float:
    """Multiply-accumulate: ``acc + a * b``."""
    return acc + a * b