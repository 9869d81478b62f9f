"""
polypiece Core Module

This module provides the computational components:
- Dense-coefficient polynomials (Polynomial)
- Piecewise polynomials and knot merging (PiecewisePolynomial)
- Binary search index finders
"""

from .polynomial import Polynomial
from .ppoly import PiecewisePolynomial, merge_knots
from .search import (
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
    numeric_compare,
)

__all__ = [
    # Functions
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
    # Knot finders
    "find_knot_exact",
    "find_knot_max_less",
    "find_knot_max_less_or_equal",
    "find_knot_min_greater",
    "find_knot_min_greater_or_equal",
]
