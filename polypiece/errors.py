"""
Exception Hierarchy

All errors raised by polypiece derive from ``PolynomialError``. Structural
errors also derive from ``ValueError`` so callers catching the builtin keep
working.
"""


class PolynomialError(Exception):
    """Base class for polynomial and piecewise polynomial errors."""

    pass


class KnotCountMismatchError(PolynomialError, ValueError):
    """Number of segments does not match the number of knots plus one.

    Raised when a ``PiecewisePolynomial`` is constructed from ``n``
    polynomials and a knot list whose length is not ``n - 1``.
    """

    def __init__(self, num_polynomials: int, num_knots: int):
        self.num_polynomials = num_polynomials
        self.num_knots = num_knots
        super().__init__(
            f"number of polynomials ({num_polynomials}) must be one more than "
            f"number of knots ({num_knots}), expected {num_knots + 1}"
        )


class DomainError(PolynomialError, ValueError):
    """Range or input outside what an operation supports.

    Raised when converting or plotting over an empty or unbounded range,
    or when converting an unsupported ``scipy.interpolate.PPoly``.
    """

    pass
