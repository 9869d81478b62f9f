"""
Plotting Module

Draws polynomials and piecewise polynomials with matplotlib.
"""

import math
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from .. import config
from ..core import PiecewisePolynomial, Polynomial
from ..errors import DomainError


def _check_range(lower: float, upper: float) -> None:
    if not (math.isfinite(lower) and math.isfinite(upper)) or lower >= upper:
        raise DomainError(
            f"plot range must be finite and non-empty, got [{lower}, {upper}]"
        )


def plot_polynomial(
    ax: Optional[plt.Axes],
    polynomial: Polynomial,
    lower: float,
    upper: float,
    num: Optional[int] = None,
    **kwargs,
) -> plt.Axes:
    """Plot ``polynomial`` on ``[lower, upper]``. Extra kwargs go to ``ax.plot``."""
    _check_range(lower, upper)
    if ax is None:
        _, ax = plt.subplots()
    xs = np.linspace(lower, upper, num or config.DEFAULT_PLOT_POINTS)
    ax.plot(xs, polynomial(xs), **kwargs)
    return ax


def plot_piecewise(
    ax: Optional[plt.Axes],
    func: PiecewisePolynomial,
    lower: float,
    upper: float,
    num: Optional[int] = None,
    show_knots: bool = True,
    color_segments: bool = True,
    **kwargs,
) -> plt.Axes:
    """
    Plot a piecewise polynomial on ``[lower, upper]``.

    Each segment is drawn on its own interval so jumps at knots stay
    visible.

    Parameters
    ----------
    ax : plt.Axes, optional
        Target axes; a new figure is created if None
    func : PiecewisePolynomial
        Function to plot
    lower, upper : float
        Finite plot range
    num : int, optional
        Total number of samples over the range (default: config.DEFAULT_PLOT_POINTS)
    show_knots : bool, optional
        Draw dashed vertical lines at knots inside the range (default: True)
    color_segments : bool, optional
        Color each segment from the "C<k>" cycle (default: True)
    **kwargs
        Passed to ``ax.plot``; a ``label`` is only attached to the first segment

    Returns
    -------
    plt.Axes
        The axes drawn on
    """
    _check_range(lower, upper)
    if ax is None:
        _, ax = plt.subplots()
    num = num or config.DEFAULT_PLOT_POINTS
    label = kwargs.pop("label", None)

    for i, (seg_lower, seg_upper, polynomial) in enumerate(func.intervals()):
        start = max(seg_lower, lower)
        stop = min(seg_upper, upper)
        if stop <= start:
            continue
        count = max(2, int((stop - start) / (upper - lower) * num))
        xs = np.linspace(start, stop, count)

        style = dict(kwargs)
        if color_segments:
            style.setdefault("color", "C" + str(i % 10))
        if label is not None:
            style["label"] = label
            label = None
        ax.plot(xs, polynomial(xs), **style)

    if show_knots:
        for knot in func.knots:
            if lower <= knot <= upper:
                ax.axvline(knot, color="gray", linestyle="--", alpha=0.5)

    return ax
