"""polypiece: polynomial and piecewise polynomial algebra"""

import logging

# Core algorithms and function types
from .core import (
    PiecewisePolynomial,
    Polynomial,
    create_exact_finder,
    create_max_less_finder,
    create_max_less_or_equal_finder,
    create_min_greater_finder,
    create_min_greater_or_equal_finder,
    find_knot_exact,
    find_knot_max_less,
    find_knot_max_less_or_equal,
    find_knot_min_greater,
    find_knot_min_greater_or_equal,
    merge_knots,
    numeric_compare,
)
from .errors import DomainError, KnotCountMismatchError, PolynomialError

# scipy conversion
from .interop import from_scipy_ppoly, to_scipy_ppoly
from .logger import setup_logger

# Visualization
from .visualization import plot_piecewise, plot_polynomial

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core
    "Polynomial",
    "PiecewisePolynomial",
    "merge_knots",
    # Index finders
    "create_exact_finder",
    "create_max_less_finder",
    "create_max_less_or_equal_finder",
    "create_min_greater_finder",
    "create_min_greater_or_equal_finder",
    "numeric_compare",
    "find_knot_exact",
    "find_knot_max_less",
    "find_knot_max_less_or_equal",
    "find_knot_min_greater",
    "find_knot_min_greater_or_equal",
    # Errors
    "PolynomialError",
    "KnotCountMismatchError",
    "DomainError",
    # Interop
    "to_scipy_ppoly",
    "from_scipy_ppoly",
    # Visualization
    "plot_piecewise",
    "plot_polynomial",
    # Logging
    "setup_logger",
]
