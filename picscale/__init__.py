"""Resampling kernels and filter descriptions, transfer functions, gamma/linear image conversion and nearest-neighbour resizing."""

__version__ = "0.1.7"