from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Callable, Iterator, List, Sequence, Tuple, Union

import numpy

from .. import config
from ..errors import KnotCountMismatchError
from .polynomial import Polynomial, format_number
from .search import find_knot_max_less_or_equal

logger = logging.getLogger(__name__)

# Writes op(p1, p2) into the destination, e.g. Polynomial.sum_into.
IntoOperation = Callable[[Polynomial, Polynomial, Polynomial], Polynomial]


# Class representing a piecewise polynomial function over the real line.
class PiecewisePolynomial:
    """Initialize an n-piece polynomial with n - 1 knots.

    ``polynomials[k]`` is active on ``[knots[k - 1], knots[k])``; the first
    piece extends to negative infinity and the last to positive infinity.

    Parameters
    ----------
    polynomials : sequence of Polynomial, length n
        Independent segments.
    knots : sequence of float, length n - 1
        Breakpoints, sorted in non-decreasing order. Duplicates are allowed
        and describe zero-width segments. Unsorted knots are not detected.

    Raises
    ------
    KnotCountMismatchError
        If ``len(polynomials) != len(knots) + 1``.
    """

    def __init__(
        self, polynomials: Sequence[Polynomial], knots: Sequence[float]
    ) -> None:
        polynomials = list(polynomials)
        knots = [float(k) for k in knots]
        if len(polynomials) - len(knots) != 1:
            raise KnotCountMismatchError(len(polynomials), len(knots))

        self.polynomials: List[Polynomial] = polynomials
        self.knots: List[float] = knots

    def clone(self) -> "PiecewisePolynomial":
        return PiecewisePolynomial(
            [p.clone() for p in self.polynomials], list(self.knots)
        )

    def segment_index(self, t: float) -> int:
        """Index of the segment whose interval contains ``t``."""
        if len(self.knots) <= config.LINEAR_SEARCH_MAX_KNOTS:
            index = 0
            for knot in self.knots:
                if knot > t:
                    break
                index += 1
            return index
        # knot index below t, shifted by one since segment 0 has no lower knot
        return find_knot_max_less_or_equal(self.knots, t) + 1

    def evaluate(self, t: Union[float, numpy.ndarray]) -> Union[float, numpy.ndarray]:
        """
        Evaluate the function at ``t``.

        Scalars are located by binary search (linear scan for few knots).
        Arrays are evaluated elementwise, grouping samples by segment.
        """
        if numpy.ndim(t) == 0:
            return self.polynomials[self.segment_index(t)].evaluate(t)

        ts = numpy.asarray(t, dtype=float)
        indices = numpy.searchsorted(self.knots, ts, side="right")
        result = numpy.empty(ts.shape)
        for index in numpy.unique(indices):
            mask = indices == index
            result[mask] = self.polynomials[index].evaluate(ts[mask])
        return result

    def intervals(self) -> Iterator[Tuple[float, float, Polynomial]]:
        """Yield ``(lower, upper, polynomial)`` for every segment."""
        bounds = [-math.inf] + self.knots + [math.inf]
        for i, polynomial in enumerate(self.polynomials):
            yield bounds[i], bounds[i + 1], polynomial

    def scale(self, x: float) -> "PiecewisePolynomial":
        return PiecewisePolynomial(
            [p.scale(x) for p in self.polynomials], list(self.knots)
        )

    def add(self, p: Union[Polynomial, "PiecewisePolynomial"]) -> "PiecewisePolynomial":
        """
        Return ``self + p``.

        A ``Polynomial`` is added to every piece. For a ``PiecewisePolynomial``
        the knots are merged in O(n) first.
        """
        return self._operate(p, Polynomial.sum_into)

    def sub(self, p: Union[Polynomial, "PiecewisePolynomial"]) -> "PiecewisePolynomial":
        """Return ``self - p``, see ``add``."""
        return self._operate(p, Polynomial.difference_into)

    def mul(self, p: Union[Polynomial, "PiecewisePolynomial"]) -> "PiecewisePolynomial":
        """Return ``self * p``, see ``add``."""
        return self._operate(p, Polynomial.product_into)

    # (Internal helper function.)
    # Dispatches on the operand type: uniform polynomial or piecewise.
    def _operate(
        self, p: Union[Polynomial, "PiecewisePolynomial"], op: IntoOperation
    ) -> "PiecewisePolynomial":
        if isinstance(p, PiecewisePolynomial):
            return self._operate_piecewise(p, op)
        if isinstance(p, Polynomial):
            return self._operate_uniform(p, op)
        raise TypeError(
            "operand must be Polynomial or PiecewisePolynomial, got {}".format(
                type(p).__name__
            )
        )

    def _operate_uniform(self, p: Polynomial, op: IntoOperation) -> "PiecewisePolynomial":
        polynomials = []
        for polynomial in self.polynomials:
            segment = polynomial.clone()
            polynomials.append(op(segment, p, segment))
        return PiecewisePolynomial(polynomials, list(self.knots))

    def _operate_piecewise(
        self, p: "PiecewisePolynomial", op: IntoOperation
    ) -> "PiecewisePolynomial":
        new_knots = merge_knots(self.knots, p.knots)
        left = self.split(new_knots)
        right = p.split(new_knots)
        logger.debug(
            "combining %d and %d segments over %d merged knots",
            len(self.polynomials),
            len(p.polynomials),
            len(new_knots),
        )
        # split returns fresh clones, so the left pieces can be overwritten
        for a, b in zip(left.polynomials, right.polynomials):
            op(a, b, a)
        return left

    def split(self, new_knots: Sequence[float]) -> "PiecewisePolynomial":
        """
        Return a copy of ``self`` refined to ``new_knots``.

        ``new_knots`` must contain every knot of ``self`` (with multiplicity)
        plus the extra breakpoints. Each new segment is a clone of the
        original segment covering it. Invalid refinements are not detected.
        """
        new_knots = [float(k) for k in new_knots]
        old = 0
        polynomials = []
        for knot in new_knots:
            polynomials.append(self.polynomials[old].clone())
            # consume one original knot per equal new knot, keeping duplicates
            if old < len(self.knots) and self.knots[old] == knot:
                old += 1
        polynomials.append(self.polynomials[old].clone())

        return PiecewisePolynomial(polynomials, new_knots)

    # Unary minus operator.
    def __neg__(self) -> "PiecewisePolynomial":
        return self.scale(-1)

    # Binary operators. Scalars act as constant polynomials for + and -,
    # and as scale factors for *.
    def __add__(self, other: Any) -> "PiecewisePolynomial":
        if isinstance(other, (Polynomial, PiecewisePolynomial)):
            return self.add(other)
        if isinstance(other, numbers.Real):
            return self.add(Polynomial([other]))
        return NotImplemented

    def __radd__(self, other: Any) -> "PiecewisePolynomial":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "PiecewisePolynomial":
        if isinstance(other, (Polynomial, PiecewisePolynomial)):
            return self.sub(other)
        if isinstance(other, numbers.Real):
            return self.sub(Polynomial([other]))
        return NotImplemented

    def __rsub__(self, other: Any) -> "PiecewisePolynomial":
        if isinstance(other, Polynomial):
            return (-self).add(other)
        if isinstance(other, numbers.Real):
            return (-self).add(Polynomial([other]))
        return NotImplemented

    def __mul__(self, other: Any) -> "PiecewisePolynomial":
        if isinstance(other, (Polynomial, PiecewisePolynomial)):
            return self.mul(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "PiecewisePolynomial":
        return self.__mul__(other)

    # Call operator, evaluates the function.
    def __call__(self, t: Union[float, numpy.ndarray]) -> Union[float, numpy.ndarray]:
        return self.evaluate(t)

    def __len__(self) -> int:
        return len(self.polynomials)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PiecewisePolynomial):
            return NotImplemented
        return self.knots == other.knots and self.polynomials == other.polynomials

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return "PiecewisePolynomial({!r}, {!r})".format(self.polynomials, self.knots)

    # Allow conversion to a string, one line per segment, e.g. "\n0 ~ 1: t".
    def __str__(self) -> str:
        result = ""
        for lower, upper, polynomial in self.intervals():
            result += "\n{} ~ {}: {}".format(
                _render_bound(lower), _render_bound(upper), polynomial
            )
        return result


def _render_bound(value: float) -> str:
    if value == -math.inf:
        return config.NEGATIVE_INFINITY_TOKEN
    if value == math.inf:
        return config.POSITIVE_INFINITY_TOKEN
    return format_number(value)


def merge_knots(knots0: Sequence[float], knots1: Sequence[float]) -> List[float]:
    """
    Merge two non-decreasing knot sequences.

    Every knot keeps its multiplicity. Equal heads are emitted once and
    consume one knot from each side, so ``[0, 0]`` and ``[0, 1, 1]`` give
    ``[0, 0, 1, 1]``.
    """
    knots: List[float] = []

    i0 = 0
    i1 = 0
    while i0 < len(knots0) and i1 < len(knots1):
        if knots0[i0] == knots1[i1]:
            knots.append(knots0[i0])
            i0 += 1
            i1 += 1
        elif knots0[i0] < knots1[i1]:
            knots.append(knots0[i0])
            i0 += 1
        else:
            knots.append(knots1[i1])
            i1 += 1
    knots.extend(knots0[i0:])
    knots.extend(knots1[i1:])

    logger.debug(
        "merged %d and %d knots into %d", len(knots0), len(knots1), len(knots)
    )
    return knots
