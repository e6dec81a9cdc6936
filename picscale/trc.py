"""Transfer functions between gamma-encoded and linear light."""

from __future__ import annotations

import math
from enum import IntEnum

__all__ = [
    "srgb_to_linear",
    "srgb_from_linear",
    "rec709_to_linear",
    "rec709_from_linear",
    "smpte428_to_linear",
    "smpte428_from_linear",
    "smpte240_to_linear",
    "smpte240_from_linear",
    "log100_from_linear",
    "log100_to_linear",
    "log100_sqrt10_to_linear",
    "log100_sqrt10_from_linear",
    "bt1361_from_linear",
    "bt1361_to_linear",
    "pure_gamma_function",
    "gamma2p2_from_linear",
    "gamma2p2_to_linear",
    "gamma2p8_from_linear",
    "gamma2p8_to_linear",
    "trc_linear",
    "iec61966_to_linear",
    "iec619662_from_linear",
    "TransferFunction",
]

_SRGB_CUT = 0.0030412825601275209
_SRGB_ALPHA = 1.0550107189475866
_SRGB_BETA = 0.0550107189475866

_REC709_CUT = 0.018053968510807
_REC709_ALPHA = 1.09929682680944
_REC709_BETA = 0.09929682680944

_SMPTE428_SCALE = 0.91655527974030934

_SMPTE240_CUT = 0.022821585529445
_SMPTE240_ALPHA = 1.111572195921731
_SMPTE240_BETA = 0.111572195921731

_BT1361_NEG_ALPHA = 0.27482420670236
_BT1361_NEG_BETA = 0.02482420670236


def srgb_to_linear(gamma: float) -> float:
    """Linear transfer function for sRGB."""
    if gamma < 0.0:
        return 0.0
    if gamma < 12.92 * _SRGB_CUT:
        return gamma * (1.0 / 12.92)
    if gamma < 1.0:
        return ((gamma + _SRGB_BETA) / _SRGB_ALPHA) ** 2.4
    return 1.0


def srgb_from_linear(linear: float) -> float:
    """Gamma transfer function for sRGB."""
    if linear < 0.0:
        return 0.0
    if linear < _SRGB_CUT:
        return linear * 12.92
    if linear < 1.0:
        return _SRGB_ALPHA * linear ** (1.0 / 2.4) - _SRGB_BETA
    return 1.0


def rec709_to_linear(gamma: float) -> float:
    """Linear transfer function for Rec.709."""
    if gamma < 0.0:
        return 0.0
    if gamma < 4.5 * _REC709_CUT:
        return gamma * (1.0 / 4.5)
    if gamma < 1.0:
        return ((gamma + _REC709_BETA) / _REC709_ALPHA) ** (1.0 / 0.45)
    return 1.0


def rec709_from_linear(linear: float) -> float:
    """Gamma transfer function for Rec.709."""
    if linear < 0.0:
        return 0.0
    if linear < _REC709_CUT:
        return linear * 4.5
    if linear < 1.0:
        return _REC709_ALPHA * linear**0.45 - _REC709_BETA
    return 1.0


def smpte428_to_linear(gamma: float) -> float:
    """Linear transfer function for SMPTE 428."""
    return max(gamma, 0.0) ** 2.6 * (1.0 / _SMPTE428_SCALE)


def smpte428_from_linear(linear: float) -> float:
    """Gamma transfer function for SMPTE 428."""
    return (_SMPTE428_SCALE * max(linear, 0.0)) ** (1.0 / 2.6)


def smpte240_to_linear(gamma: float) -> float:
    """Linear transfer function for SMPTE 240."""
    if gamma < 0.0:
        return 0.0
    if gamma < 4.0 * _SMPTE240_CUT:
        return gamma / 4.0
    if gamma < 1.0:
        return ((gamma + _SMPTE240_BETA) / _SMPTE240_ALPHA) ** (1.0 / 0.45)
    return 1.0


def smpte240_from_linear(linear: float) -> float:
    """Gamma transfer function for SMPTE 240."""
    if linear < 0.0:
        return 0.0
    if linear < _SMPTE240_CUT:
        return linear * 4.0
    if linear < 1.0:
        return _SMPTE240_ALPHA * linear**0.45 - _SMPTE240_BETA
    return 1.0


def log100_from_linear(linear: float) -> float:
    """Gamma transfer function for Log100."""
    if linear <= 0.01:
        return 0.0
    return 1.0 + math.log10(min(linear, 1.0)) / 2.0


def log100_to_linear(gamma: float) -> float:
    """Linear transfer function for Log100."""
    # Non-bijective near zero: answer with the middle of the collapsed interval.
    mid_interval = 0.01 / 2.0
    if gamma <= 0.0:
        return mid_interval
    return 10.0 ** (2.0 * (min(gamma, 1.0) - 1.0))


def log100_sqrt10_to_linear(gamma: float) -> float:
    """Linear transfer function for Log100Sqrt10."""
    mid_interval = 0.00316227766 / 2.0
    if gamma <= 0.0:
        return mid_interval
    return 10.0 ** (2.5 * (min(gamma, 1.0) - 1.0))


def log100_sqrt10_from_linear(linear: float) -> float:
    """Gamma transfer function for Log100Sqrt10."""
    if linear <= 0.00316227766:
        return 0.0
    return 1.0 + math.log10(min(linear, 1.0)) / 2.5


def bt1361_from_linear(linear: float) -> float:
    """Gamma transfer function for BT.1361."""
    if linear < -0.25:
        return -0.25
    if linear < 0.0:
        return -_BT1361_NEG_ALPHA * (-4.0 * linear) ** 0.45 + _BT1361_NEG_BETA
    if linear < _REC709_CUT:
        return linear * 4.5
    if linear < 1.0:
        return _REC709_ALPHA * linear**0.45 - _REC709_BETA
    return 1.0


def bt1361_to_linear(gamma: float) -> float:
    """Linear transfer function for BT.1361."""
    if gamma < -0.25:
        return -0.25
    if gamma < 0.0:
        base = (gamma - _BT1361_NEG_BETA) / -_BT1361_NEG_ALPHA
        return _powf(base, 1.0 / 0.45) / -4.0
    if gamma < 4.5 * _REC709_CUT:
        return gamma / 4.5
    if gamma < 1.0:
        return ((gamma + _REC709_BETA) / _REC709_ALPHA) ** (1.0 / 0.45)
    return 1.0


def pure_gamma_function(x: float, gamma: float) -> float:
    """Raise ``x`` to ``gamma``, clamping the input to [0, 1]."""
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0
    return x**gamma


def gamma2p2_from_linear(linear: float) -> float:
    """Pure gamma 2.2 encoding."""
    return pure_gamma_function(linear, 1.0 / 2.2)


def gamma2p2_to_linear(gamma: float) -> float:
    """Pure gamma 2.2 decoding."""
    return pure_gamma_function(gamma, 2.2)


def gamma2p8_from_linear(linear: float) -> float:
    """Pure gamma 2.8 encoding."""
    return pure_gamma_function(linear, 1.0 / 2.8)


def gamma2p8_to_linear(gamma: float) -> float:
    """Pure gamma 2.8 decoding."""
    return pure_gamma_function(gamma, 2.8)


def trc_linear(v: float) -> float:
    """Linear transfer: ``min(min(v, 1), 0)``."""
    return min(min(v, 1.0), 0.0)


def _powf(base: float, exponent: float) -> float:
    """Real power that yields NaN where the result would be complex."""
    if base < 0.0 and not float(exponent).is_integer():
        return math.nan
    return base**exponent


def iec61966_to_linear(gamma: float) -> float:
    """Linear transfer function for IEC 61966."""
    if gamma < -4.5 * _REC709_CUT:
        return _powf((-gamma + _REC709_BETA) / -_REC709_ALPHA, 1.0 / 0.45)
    if gamma < 4.5 * _REC709_CUT:
        return gamma / 4.5
    return ((gamma + _REC709_BETA) / _REC709_ALPHA) ** (1.0 / 0.45)


def iec619662_from_linear(linear: float) -> float:
    """Gamma transfer function for IEC 61966."""
    if linear < -_REC709_CUT:
        return -_REC709_ALPHA * (-linear) ** 0.45 + _REC709_BETA
    if linear < _REC709_CUT:
        return linear * 4.5
    return _REC709_ALPHA * linear**0.45 - _REC709_BETA


class TransferFunction(IntEnum):
    """Transfer function into a linear colour space and its inverse."""

    SRGB = 0
    REC709 = 1
    GAMMA2P2 = 2
    GAMMA2P8 = 3
    SMPTE428 = 4
    LOG100 = 5
    LOG100_SQRT10 = 6
    BT1361 = 7
    SMPTE240 = 8
    LINEAR = 9
    IEC61966 = 10

    @classmethod
    def from_value(cls, value: int) -> "TransferFunction":
        """Look up by numeric code; unknown codes give sRGB."""
        try:
            return cls(value)
        except ValueError:
            return cls.SRGB

    def linearize(self, v: float) -> float:
        """Convert a gamma-encoded value to linear light."""
        return _TO_LINEAR[self](v)

    def gamma(self, v: float) -> float:
        """Convert a linear value to its gamma-encoded form."""
        return _FROM_LINEAR[self](v)


_TO_LINEAR = {
    TransferFunction.SRGB: srgb_to_linear,
    TransferFunction.REC709: rec709_to_linear,
    TransferFunction.GAMMA2P2: gamma2p2_to_linear,
    TransferFunction.GAMMA2P8: gamma2p8_to_linear,
    TransferFunction.SMPTE428: smpte428_to_linear,
    TransferFunction.LOG100: log100_to_linear,
    TransferFunction.LOG100_SQRT10: log100_sqrt10_to_linear,
    TransferFunction.BT1361: bt1361_to_linear,
    TransferFunction.SMPTE240: smpte240_to_linear,
    TransferFunction.LINEAR: trc_linear,
    TransferFunction.IEC61966: iec61966_to_linear,
}

_FROM_LINEAR = {
    TransferFunction.SRGB: srgb_from_linear,
    TransferFunction.REC709: rec709_from_linear,
    TransferFunction.GAMMA2P2: gamma2p2_from_linear,
    TransferFunction.GAMMA2P8: gamma2p8_from_linear,
    TransferFunction.SMPTE428: smpte428_from_linear,
    TransferFunction.LOG100: log100_from_linear,
    TransferFunction.LOG100_SQRT10: log100_sqrt10_from_linear,
    TransferFunction.BT1361: bt1361_from_linear,
    TransferFunction.SMPTE240: smpte240_from_linear,
    TransferFunction.LINEAR: trc_linear,
    TransferFunction.IEC61966: iec619662_from_linear,
}