"""Nearest-neighbour resizing of interleaved images."""

from __future__ import annotations

import struct
from typing import Sequence

__all__ = ["resize_nearest"]

_F32 = struct.Struct("<f")


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return _F32.unpack(_F32.pack(value))[0]


def _source_index(position: int, scale: float, clip: float) -> int:
    centre = _f32(_f32(_f32(position + 0.5) * scale) - 0.5)
    return int(max(min(centre, clip), 0.0))


def resize_nearest(
    src: Sequence,
    src_width: int,
    src_height: int,
    dst_width: int,
    dst_height: int,
    channels: int,
) -> list:
    """Resize an interleaved image by picking the nearest source pixel."""
    if channels < 1:
        raise ValueError("Invalid count of channels")
    if min(src_width, src_height, dst_width, dst_height) <= 0:
        raise ValueError("Image size must not be zero")
    required = src_width * src_height * channels
    if len(src) < required:
        raise ValueError(
            f"Source must hold width * channels * height ({required}) samples "
            f"but got {len(src)}"
        )

    x_scale = _f32(_f32(src_width) / _f32(dst_width))
    y_scale = _f32(_f32(src_height) / _f32(dst_height))
    clip_width = _f32(src_width - 1.0)
    clip_height = _f32(src_height - 1.0)

    columns = [_source_index(x, x_scale, clip_width) for x in range(dst_width)]
    rows = [_source_index(y, y_scale, clip_height) for y in range(dst_height)]

    src_stride = src_width * channels
    result: list = []
    for src_y in rows:
        row_offset = src_y * src_stride
        for src_x in columns:
            offset = row_offset + src_x * channels
            result.extend(src[offset : offset + channels])
    return result