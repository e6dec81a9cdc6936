"""Resampling function selection and the filter descriptions they map to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional

from picscale import splines, windows
from picscale.bessel import jinc
from picscale.lanczos import (
    lanczos2,
    lanczos2_jinc,
    lanczos3,
    lanczos3_jinc,
    lanczos4,
    lanczos4_jinc,
    lanczos6,
    lanczos6_jinc,
)

__all__ = [
    "box_weight",
    "ResamplingFunction",
    "ResamplingWindow",
    "ResamplingFilter",
]

Kernel = Callable[[float], float]


def box_weight(x: float) -> float:
    """Constant unit weight."""
    return 1.0


@dataclass(frozen=True)
class ResamplingWindow:
    """A window function applied on top of a resampling kernel."""

    window: Kernel
    window_size: float
    blur: float
    taper: float


@dataclass(frozen=True)
class ResamplingFilter:
    """Kernel, optional window and sizing information for a resampler."""

    kernel: Kernel
    min_kernel_size: float
    window: Optional[ResamplingWindow] = None
    is_resizable_kernel: bool = True
    is_area_filter: bool = False


class ResamplingFunction(IntEnum):
    """Describes the resampling function used for scaling."""

    BILINEAR = 0
    NEAREST = 1
    CUBIC = 2
    MITCHELL_NETRAVALLI = 3
    CATMULL_ROM = 4
    HERMITE = 5
    B_SPLINE = 6
    HANN = 7
    BICUBIC = 8
    HAMMING = 9
    HANNING = 10
    BLACKMAN = 11
    WELCH = 12
    QUADRIC = 13
    GAUSSIAN = 14
    SPHINX = 15
    BARTLETT = 16
    ROBIDOUX = 17
    ROBIDOUX_SHARP = 18
    SPLINE16 = 19
    SPLINE36 = 20
    SPLINE64 = 21
    KAISER = 22
    BARTLETT_HANN = 23
    BOX = 24
    BOHMAN = 25
    LANCZOS2 = 26
    LANCZOS3 = 27
    LANCZOS4 = 28
    LANCZOS2_JINC = 29
    LANCZOS3_JINC = 30
    LANCZOS4_JINC = 31
    GINSENG = 32
    HAASN_SOFT = 33
    LAGRANGE2 = 34
    LAGRANGE3 = 35
    LANCZOS6 = 36
    LANCZOS6_JINC = 37
    # Replicates the INTER_AREA behaviour known from OpenCV.
    AREA = 38

    @classmethod
    def from_value(cls, value: int) -> "ResamplingFunction":
        """Look up a function by its numeric code; unknown codes give bilinear."""
        try:
            return cls(value)
        except ValueError:
            return cls.BILINEAR

    def resampling_filter(self) -> ResamplingFilter:
        """The filter description used to compute weights for this function."""
        return _FILTERS[self]


_FILTERS: dict[ResamplingFunction, ResamplingFilter] = {
    ResamplingFunction.BILINEAR: ResamplingFilter(splines.bilinear, 1.0),
    ResamplingFunction.AREA: ResamplingFilter(box_weight, 0.5, is_area_filter=True),
    # Nearest never convolves; this is only a placeholder filter.
    ResamplingFunction.NEAREST: ResamplingFilter(splines.bilinear, 2.0),
    ResamplingFunction.CUBIC: ResamplingFilter(splines.cubic_spline, 2.0),
    ResamplingFunction.MITCHELL_NETRAVALLI: ResamplingFilter(
        splines.mitchell_netravalli, 2.0
    ),
    ResamplingFunction.LANCZOS3: ResamplingFilter(lanczos3, 3.0),
    ResamplingFunction.CATMULL_ROM: ResamplingFilter(splines.catmull_rom, 2.0),
    ResamplingFunction.HERMITE: ResamplingFilter(splines.hermite_spline, 2.0),
    ResamplingFunction.B_SPLINE: ResamplingFilter(splines.b_spline, 2.0),
    ResamplingFunction.HANN: ResamplingFilter(windows.hann, 3.0),
    ResamplingFunction.BICUBIC: ResamplingFilter(splines.bicubic_spline, 2.0),
    ResamplingFunction.LANCZOS4: ResamplingFilter(lanczos4, 4.0),
    ResamplingFunction.LANCZOS2: ResamplingFilter(lanczos2, 2.0),
    ResamplingFunction.HAMMING: ResamplingFilter(windows.hamming, 1.0),
    ResamplingFunction.HANNING: ResamplingFilter(windows.hanning, 2.0),
    ResamplingFunction.WELCH: ResamplingFilter(windows.welch, 2.0),
    ResamplingFunction.QUADRIC: ResamplingFilter(splines.quadric, 2.0),
    ResamplingFunction.GAUSSIAN: ResamplingFilter(windows.gaussian, 2.0),
    ResamplingFunction.SPHINX: ResamplingFilter(windows.sphinx, 2.0),
    ResamplingFunction.BARTLETT: ResamplingFilter(windows.bartlett, 2.0),
    ResamplingFunction.ROBIDOUX: ResamplingFilter(splines.robidoux, 2.0),
    ResamplingFunction.ROBIDOUX_SHARP: ResamplingFilter(splines.robidoux_sharp, 2.0),
    ResamplingFunction.SPLINE16: ResamplingFilter(
        splines.spline16, 2.0, is_resizable_kernel=False
    ),
    ResamplingFunction.SPLINE36: ResamplingFilter(
        splines.spline36, 4.0, is_resizable_kernel=False
    ),
    ResamplingFunction.SPLINE64: ResamplingFilter(
        splines.spline64, 6.0, is_resizable_kernel=False
    ),
    ResamplingFunction.KAISER: ResamplingFilter(windows.kaiser, 2.0),
    ResamplingFunction.BARTLETT_HANN: ResamplingFilter(windows.bartlett_hann, 2.0),
    ResamplingFunction.BOX: ResamplingFilter(box_weight, 2.0),
    ResamplingFunction.BOHMAN: ResamplingFilter(windows.bohman, 2.0),
    ResamplingFunction.LANCZOS2_JINC: ResamplingFilter(lanczos2_jinc, 2.0),
    ResamplingFunction.LANCZOS3_JINC: ResamplingFilter(lanczos3_jinc, 3.0),
    ResamplingFunction.LANCZOS4_JINC: ResamplingFilter(lanczos4_jinc, 4.0),
    ResamplingFunction.BLACKMAN: ResamplingFilter(windows.blackman, 2.0),
    ResamplingFunction.GINSENG: ResamplingFilter(
        windows.sinc, 3.0, window=ResamplingWindow(jinc, 3.0, 1.0, 0.0)
    ),
    ResamplingFunction.HAASN_SOFT: ResamplingFilter(
        jinc, 3.0, window=ResamplingWindow(windows.hanning, 3.0, 1.11, 0.0)
    ),
    ResamplingFunction.LAGRANGE2: ResamplingFilter(splines.lagrange2, 2.0),
    ResamplingFunction.LAGRANGE3: ResamplingFilter(splines.lagrange3, 3.0),
    ResamplingFunction.LANCZOS6_JINC: ResamplingFilter(lanczos6_jinc, 6.0),
    ResamplingFunction.LANCZOS6: ResamplingFilter(lanczos6, 6.0),
}