"""
Binary Search Index Finders

Factories building O(log n) index finders over a sequence sorted in
ascending order under a three-way comparator ``comp(a, b)``:

- ``comp(a, b) < 0`` if ``a < b``
- ``comp(a, b) > 0`` if ``a > b``
- ``comp(a, b) == 0`` otherwise

Every finder returns ``-1`` when no element satisfies its query. Passing an
unsorted sequence gives an unspecified index, it is not detected.
"""

from typing import Any, Callable, Sequence

Comparator = Callable[[Any, Any], float]
Finder = Callable[[Sequence[Any], Any], int]


def numeric_compare(a: float, b: float) -> float:
    """Three-way comparator for real numbers."""
    return a - b


def create_exact_finder(comp: Comparator) -> Finder:
    """
    Create a finder returning the index of an element equal to the target.

    With duplicates any matching index may be returned.
    """

    def find(seq: Sequence[Any], target: Any) -> int:
        l = 0
        r = len(seq) - 1

        while l <= r:
            m = (l + r + 1) // 2
            c = comp(seq[m], target)

            if c == 0:
                return m

            if c > 0:
                r = m - 1
            else:
                l = m + 1

        return -1

    return find


def create_max_less_finder(comp: Comparator) -> Finder:
    """Create a finder returning the index of the maximum element < target."""

    def find(seq: Sequence[Any], target: Any) -> int:
        if len(seq) == 0:
            return -1

        l = 0
        r = len(seq) - 1

        # upward-rounded midpoint, converges towards r
        while l < r:
            m = (l + r + 1) // 2

            if comp(seq[m], target) >= 0:
                r = m - 1
            else:
                l = m

        if comp(seq[r], target) >= 0:
            return -1

        return r

    return find


def create_max_less_or_equal_finder(comp: Comparator) -> Finder:
    """Create a finder returning the index of the maximum element <= target."""

    def find(seq: Sequence[Any], target: Any) -> int:
        if len(seq) == 0:
            return -1

        l = 0
        r = len(seq) - 1

        while l < r:
            m = (l + r + 1) // 2

            if comp(seq[m], target) > 0:
                r = m - 1
            else:
                l = m

        if comp(seq[r], target) > 0:
            return -1

        return r

    return find


def create_min_greater_finder(comp: Comparator) -> Finder:
    """Create a finder returning the index of the minimum element > target."""

    def find(seq: Sequence[Any], target: Any) -> int:
        if len(seq) == 0:
            return -1

        l = 0
        r = len(seq) - 1

        # downward-rounded midpoint, converges towards l
        while l < r:
            m = (l + r) // 2

            if comp(seq[m], target) <= 0:
                l = m + 1
            else:
                r = m

        if comp(seq[r], target) <= 0:
            return -1

        return r

    return find


def create_min_greater_or_equal_finder(comp: Comparator) -> Finder:
    """Create a finder returning the index of the minimum element >= target."""

    def find(seq: Sequence[Any], target: Any) -> int:
        if len(seq) == 0:
            return -1

        l = 0
        r = len(seq) - 1

        while l < r:
            m = (l + r) // 2

            if comp(seq[m], target) < 0:
                l = m + 1
            else:
                r = m

        if comp(seq[r], target) < 0:
            return -1

        return r

    return find


# Finders over real-valued knot sequences
find_knot_exact = create_exact_finder(numeric_compare)
find_knot_max_less = create_max_less_finder(numeric_compare)
find_knot_max_less_or_equal = create_max_less_or_equal_finder(numeric_compare)
find_knot_min_greater = create_min_greater_finder(numeric_compare)
find_knot_min_greater_or_equal = create_min_greater_or_equal_finder(numeric_compare)
