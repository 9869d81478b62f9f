"""
Configuration Constants

Module-level settings read at call time, so tests and callers may patch
them (e.g. ``polypiece.config.LINEAR_SEARCH_MAX_KNOTS = 0``).
"""

# Knot count up to which PiecewisePolynomial.evaluate scans linearly
# instead of using binary search.
LINEAR_SEARCH_MAX_KNOTS = 200

# Tokens rendered for the open ends of the first and last segment.
NEGATIVE_INFINITY_TOKEN = "-∞"
POSITIVE_INFINITY_TOKEN = "∞"

# Default number of samples per plotted range.
DEFAULT_PLOT_POINTS = 1000
