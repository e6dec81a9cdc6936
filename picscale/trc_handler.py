"""In-place conversion of interleaved images between gamma-encoded and linear light."""

from __future__ import annotations

import math
from typing import Callable, MutableSequence

from picscale.trc import TransferFunction

__all__ = [
    "image_to_linear",
    "linear_to_gamma_image",
    "image16_to_linear16",
    "linear16_to_gamma_image16",
    "image_f32_to_linear_f32",
    "linear_f32_to_gamma_image_f32",
]


def _color_offsets(channels: int) -> tuple[int, ...]:
    """Offsets of the colour samples in a pixel; alpha, when present, is last."""
    if not 1 <= channels <= 4:
        raise ValueError("Channels must be 1..=4")
    return (0,) if channels <= 2 else (0, 1, 2)


def _check_bit_depth(bit_depth: int) -> None:
    if not 1 <= bit_depth <= 16:
        raise ValueError("Bit depth must be 1..=16")


def _quantize(value: float, upper: int) -> int:
    """Clamp to ``upper`` then truncate toward zero, saturating at zero."""
    if math.isnan(value):
        value = float(upper)
    value = min(value, float(upper))
    if not value > 0.0:
        return 0
    return math.trunc(value)


def _build_lut(convert: Callable[[float], float], max_colors: int) -> list[int]:
    step = 1.0 / max_colors
    return [
        _quantize(convert(i * step) * max_colors, max_colors)
        for i in range(max_colors + 1)
    ]


def _apply(
    image: MutableSequence,
    channels: int,
    offsets: tuple[int, ...],
    convert: Callable,
) -> None:
    # Only whole pixels are touched; a trailing partial pixel is left as is.
    usable = len(image) - len(image) % channels
    for start in range(0, usable, channels):
        for offset in offsets:
            index = start + offset
            image[index] = convert(image[index])


def image_to_linear(image: MutableSequence[int], channels: int, trc: TransferFunction) -> None:
    """Convert an 8-bit image to linear light in place."""
    offsets = _color_offsets(channels)
    lut = _build_lut(trc.linearize, 255)
    _apply(image, channels, offsets, lut.__getitem__)


def linear_to_gamma_image(
    image: MutableSequence[int], channels: int, trc: TransferFunction
) -> None:
    """Convert a linear 8-bit image to gamma-encoded values in place."""
    offsets = _color_offsets(channels)
    lut = _build_lut(trc.gamma, 255)
    _apply(image, channels, offsets, lut.__getitem__)


def image16_to_linear16(
    image: MutableSequence[int], channels: int, bit_depth: int, trc: TransferFunction
) -> None:
    """Convert an image of 1 to 16 bits per sample to linear light in place."""
    offsets = _color_offsets(channels)
    _check_bit_depth(bit_depth)
    lut = _build_lut(trc.linearize, (1 << bit_depth) - 1)
    _apply(image, channels, offsets, lut.__getitem__)


def linear16_to_gamma_image16(
    image: MutableSequence[int], channels: int, bit_depth: int, trc: TransferFunction
) -> None:
    """Convert a linear image of 1 to 16 bits per sample to gamma-encoded values in place."""
    offsets = _color_offsets(channels)
    _check_bit_depth(bit_depth)
    lut = _build_lut(trc.gamma, (1 << bit_depth) - 1)
    _apply(image, channels, offsets, lut.__getitem__)


def image_f32_to_linear_f32(
    image: MutableSequence[float], channels: int, trc: TransferFunction
) -> None:
    """Convert a floating-point image to linear light in place."""
    offsets = _color_offsets(channels)
    _apply(image, channels, offsets, trc.linearize)


def linear_f32_to_gamma_image_f32(
    image: MutableSequence[float], channels: int, trc: TransferFunction
) -> None:
    """Convert a linear floating-point image to gamma-encoded values in place."""
    offsets = _color_offsets(channels)
    _apply(image, channels, offsets, trc.gamma)