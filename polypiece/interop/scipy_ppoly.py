"""
scipy Interoperability

Converts between ``PiecewisePolynomial`` (global ascending coefficients,
unbounded outer segments) and ``scipy.interpolate.PPoly`` (local
coefficients around each breakpoint, highest power first, finite range).
"""

import logging
import math

import numpy
import scipy.interpolate

from ..core import PiecewisePolynomial, Polynomial
from ..errors import DomainError

logger = logging.getLogger(__name__)


def shift_polynomial(polynomial: Polynomial, a: float) -> Polynomial:
    """
    Return ``q`` with ``q(s) = p(s + a)``.

    Expands ``sum c_i (s + a)^i`` with Horner's scheme on polynomials.
    """
    base = Polynomial([a, 1.0])
    result = Polynomial([0.0])
    for coefficient in reversed(polynomial.coefficients):
        result.mul_(base).add_(Polynomial([coefficient]))
    # keep the stored length of the input
    return Polynomial(result.coefficients[: len(polynomial.coefficients)])


def to_scipy_ppoly(
    pp: PiecewisePolynomial, lower: float, upper: float
) -> scipy.interpolate.PPoly:
    """
    Convert ``pp`` restricted to ``[lower, upper]`` into a scipy ``PPoly``.

    Parameters
    ----------
    pp : PiecewisePolynomial
        Function to convert
    lower, upper : float
        Finite range with ``lower < upper``

    Returns
    -------
    scipy.interpolate.PPoly
        Breakpoints are ``lower``, the knots strictly inside the range and
        ``upper``. Zero-width segments are dropped.

    Raises
    ------
    DomainError
        If the range is empty or not finite.
    """
    if not (math.isfinite(lower) and math.isfinite(upper)) or lower >= upper:
        raise DomainError(
            f"conversion range must be finite and non-empty, got [{lower}, {upper}]"
        )

    breakpoints = [lower]
    segments = []
    for seg_lower, seg_upper, polynomial in pp.intervals():
        start = max(seg_lower, lower)
        stop = min(seg_upper, upper)
        if stop <= start:
            continue
        breakpoints.append(stop)
        segments.append(shift_polynomial(polynomial, start))

    order = max(len(s.coefficients) for s in segments)
    c = numpy.zeros((order, len(segments)))
    for i, segment in enumerate(segments):
        c[order - len(segment.coefficients) :, i] = segment.coefficients[::-1]

    logger.debug(
        "converted %d segments on [%s, %s] to scipy PPoly with %d intervals",
        len(pp.polynomials),
        lower,
        upper,
        len(segments),
    )
    return scipy.interpolate.PPoly(c, numpy.array(breakpoints))


def from_scipy_ppoly(sp: scipy.interpolate.PPoly) -> PiecewisePolynomial:
    """
    Convert a scipy ``PPoly`` into a ``PiecewisePolynomial``.

    Interior breakpoints become knots. The first and last interval extend
    to infinity, as with scipy's default extrapolation.

    Raises
    ------
    DomainError
        If ``sp`` is vector valued or has descending breakpoints.
    """
    x = numpy.asarray(sp.x, dtype=float)
    c = numpy.asarray(sp.c, dtype=float)
    if c.ndim != 2:
        raise DomainError("only scalar valued PPoly objects can be converted")
    if len(x) > 1 and x[0] > x[-1]:
        raise DomainError("PPoly breakpoints must be in increasing order")

    polynomials = [
        shift_polynomial(Polynomial(c[::-1, i]), -x[i]) for i in range(c.shape[1])
    ]
    logger.debug("converted scipy PPoly with %d intervals", c.shape[1])
    return PiecewisePolynomial(polynomials, x[1:-1].tolist())
