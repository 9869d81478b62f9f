"""
Visualization Module

Plotting helpers for polynomials and piecewise polynomials.
"""

from .plot import plot_piecewise, plot_polynomial

__all__ = [
    "plot_piecewise",
    "plot_polynomial",
]
