from __future__ import annotations

import numbers
import operator
from typing import Any, Callable, Optional, Sequence, Union

import numpy
import numpy.polynomial.polynomial as npoly


# Class representing a single polynomial by its dense coefficient vector.
class Polynomial:
    """Initialize a polynomial from coefficients in ascending degree order.

    Parameters
    ----------
    coefficients : sequence of float, optional
        ``coefficients[i]`` is the coefficient of ``t**i``. If omitted or
        empty, the zero polynomial ``[0]`` is used.

    Notes
    -----
    Trailing zero coefficients are kept as given, so ``degree`` may overstate
    the mathematical degree (``Polynomial([1, 0]).degree == 1``).
    """

    def __init__(self, coefficients: Optional[Sequence[float]] = None) -> None:
        if coefficients is None:
            coefficients = [0]
        c = numpy.array(coefficients, dtype=float).reshape(-1)
        if c.size == 0:
            c = numpy.zeros(1)
        self.coefficients: numpy.ndarray = c

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def clone(self) -> "Polynomial":
        return Polynomial(self.coefficients.copy())

    def evaluate(self, t: Union[float, numpy.ndarray]) -> Union[float, numpy.ndarray]:
        """Evaluate P(t). ``t`` may be a scalar or an array."""
        result = npoly.polyval(t, self.coefficients)
        if numpy.ndim(result) == 0:
            return float(result)
        return result

    # Scaling.
    def scale(self, x: float) -> "Polynomial":
        return Polynomial(self.coefficients * x)

    def scale_(self, x: float) -> "Polynomial":
        """Scale ``self`` by ``x`` in place and return ``self``."""
        self.coefficients *= x
        return self

    # (Internal helper function.)
    # Writes computed coefficients into the destination polynomial.
    @staticmethod
    def _store(out: "Polynomial", values: numpy.ndarray) -> "Polynomial":
        if out.coefficients.shape == values.shape:
            out.coefficients[:] = values
        else:
            out.coefficients = values
        return out

    @staticmethod
    def _termwise_values(
        op: Callable[[float, float], float], p1: "Polynomial", p2: "Polynomial"
    ) -> numpy.ndarray:
        c1 = p1.coefficients
        c2 = p2.coefficients
        length = max(len(c1), len(c2))
        return numpy.array(
            [
                op(
                    c1[i] if i < len(c1) else 0.0,
                    c2[i] if i < len(c2) else 0.0,
                )
                for i in range(length)
            ],
            dtype=float,
        )

    @staticmethod
    def operate_termwise(
        op: Callable[[float, float], float], p1: "Polynomial", p2: "Polynomial"
    ) -> "Polynomial":
        """
        Apply ``op`` to each same-degree coefficient pair of ``p1`` and ``p2``.

        The result has ``max(len(p1), len(p2))`` coefficients; a coefficient
        missing from the shorter operand is treated as zero.
        """
        return Polynomial(Polynomial._termwise_values(op, p1, p2))

    @staticmethod
    def operate_termwise_into(
        op: Callable[[float, float], float],
        p1: "Polynomial",
        p2: "Polynomial",
        out: "Polynomial",
    ) -> "Polynomial":
        """
        Same as ``operate_termwise`` but writes into ``out`` and returns it.

        ``out`` may be ``p1`` or ``p2``. Its coefficient array is overwritten,
        changing length if needed.
        """
        return Polynomial._store(out, Polynomial._termwise_values(op, p1, p2))

    # Addition.
    def add(self, p: "Polynomial") -> "Polynomial":
        return Polynomial.sum(self, p)

    def add_(self, p: "Polynomial") -> "Polynomial":
        """Add ``p`` to ``self`` in place and return ``self``."""
        return Polynomial.sum_into(self, p, self)

    @staticmethod
    def sum(p1: "Polynomial", p2: "Polynomial") -> "Polynomial":
        return Polynomial.operate_termwise(operator.add, p1, p2)

    @staticmethod
    def sum_into(p1: "Polynomial", p2: "Polynomial", out: "Polynomial") -> "Polynomial":
        return Polynomial.operate_termwise_into(operator.add, p1, p2, out)

    # Subtraction.
    def sub(self, p: "Polynomial") -> "Polynomial":
        return Polynomial.difference(self, p)

    def sub_(self, p: "Polynomial") -> "Polynomial":
        """Subtract ``p`` from ``self`` in place and return ``self``."""
        return Polynomial.difference_into(self, p, self)

    @staticmethod
    def difference(p1: "Polynomial", p2: "Polynomial") -> "Polynomial":
        return Polynomial.operate_termwise(operator.sub, p1, p2)

    @staticmethod
    def difference_into(
        p1: "Polynomial", p2: "Polynomial", out: "Polynomial"
    ) -> "Polynomial":
        return Polynomial.operate_termwise_into(operator.sub, p1, p2, out)

    # Multiplication.
    def mul(self, p: "Polynomial") -> "Polynomial":
        return Polynomial.product(self, p)

    def mul_(self, p: "Polynomial") -> "Polynomial":
        """Multiply ``self`` by ``p`` in place and return ``self``."""
        return Polynomial.product_into(self, p, self)

    @staticmethod
    def product(p1: "Polynomial", p2: "Polynomial") -> "Polynomial":
        """Full convolution of both coefficient vectors, length m + n - 1."""
        return Polynomial(numpy.convolve(p1.coefficients, p2.coefficients))

    @staticmethod
    def product_into(
        p1: "Polynomial", p2: "Polynomial", out: "Polynomial"
    ) -> "Polynomial":
        return Polynomial._store(
            out, numpy.convolve(p1.coefficients, p2.coefficients)
        )

    # Unary minus operator.
    def __neg__(self) -> "Polynomial":
        return self.scale(-1)

    # Binary operators. Scalars act as constant polynomials for + and -,
    # and as scale factors for *.
    def __add__(self, other: Any) -> "Polynomial":
        if isinstance(other, Polynomial):
            return self.add(other)
        if isinstance(other, numbers.Real):
            return self.add(Polynomial([other]))
        return NotImplemented

    def __radd__(self, other: Any) -> "Polynomial":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Polynomial":
        if isinstance(other, Polynomial):
            return self.sub(other)
        if isinstance(other, numbers.Real):
            return self.sub(Polynomial([other]))
        return NotImplemented

    def __rsub__(self, other: Any) -> "Polynomial":
        if isinstance(other, numbers.Real):
            return Polynomial([other]).sub(self)
        return NotImplemented

    def __mul__(self, other: Any) -> "Polynomial":
        if isinstance(other, Polynomial):
            return self.mul(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Polynomial":
        return self.__mul__(other)

    # In-place operators map to the mutating variants.
    def __iadd__(self, other: Any) -> "Polynomial":
        if isinstance(other, Polynomial):
            return self.add_(other)
        if isinstance(other, numbers.Real):
            return self.add_(Polynomial([other]))
        return NotImplemented

    def __isub__(self, other: Any) -> "Polynomial":
        if isinstance(other, Polynomial):
            return self.sub_(other)
        if isinstance(other, numbers.Real):
            return self.sub_(Polynomial([other]))
        return NotImplemented

    def __imul__(self, other: Any) -> "Polynomial":
        if isinstance(other, Polynomial):
            return self.mul_(other)
        if isinstance(other, numbers.Real):
            return self.scale_(other)
        return NotImplemented

    # Call operator, evaluates the polynomial.
    def __call__(self, t: Union[float, numpy.ndarray]) -> Union[float, numpy.ndarray]:
        return self.evaluate(t)

    # Exact comparison of the stored coefficients, trailing zeros included.
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return bool(numpy.array_equal(self.coefficients, other.coefficients))

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return "Polynomial({!r})".format(self.coefficients.tolist())

    # Allow conversion to a string, highest degree first, e.g. "2t^2 + -t + 1".
    def __str__(self) -> str:
        terms = [
            _render_term(coefficient, order)
            for order, coefficient in enumerate(self.coefficients)
        ]
        return " + ".join(term for term in reversed(terms) if term) or "0"


def format_number(value: float) -> str:
    """Shortest round-trip text for ``value``, e.g. ``2``, ``2.5``, ``1e-7``."""
    value = float(value)
    if value == 0:
        # drop the sign of -0.0
        value = 0.0
    mantissa, _, exponent = repr(value).partition("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    if not exponent:
        return mantissa
    sign = exponent[0] if exponent[0] in "+-" else ""
    return "{}e{}{}".format(mantissa, sign, exponent.lstrip("+-").lstrip("0") or "0")


def _render_term(coefficient: float, order: int) -> str:
    if coefficient == 0:
        return ""

    if order == 0:
        return format_number(coefficient)

    if coefficient == 1:
        text_coefficient = ""
    elif coefficient == -1:
        text_coefficient = "-"
    else:
        text_coefficient = format_number(coefficient)
    text_order = "" if order == 1 else "^{}".format(order)

    return "{}t{}".format(text_coefficient, text_order)
