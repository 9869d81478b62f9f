"""Conversion between polypiece and scipy.interpolate."""

from .scipy_ppoly import from_scipy_ppoly, shift_polynomial, to_scipy_ppoly

__all__ = [
    "from_scipy_ppoly",
    "shift_polynomial",
    "to_scipy_ppoly",
]
