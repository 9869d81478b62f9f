"""
Tests for conversion to and from scipy.interpolate.PPoly.
"""

import unittest

import numpy as np
import scipy.interpolate

from polypiece.core.polynomial import Polynomial
from polypiece.core.ppoly import PiecewisePolynomial
from polypiece.errors import DomainError
from polypiece.interop import from_scipy_ppoly, shift_polynomial, to_scipy_ppoly


class TestShiftPolynomial(unittest.TestCase):
    def test_shift(self):
        # p(s + 1) for p(t) = 1 + 2t + 3t^2 is 6 + 8s + 3s^2
        q = shift_polynomial(Polynomial([1, 2, 3]), 1)
        np.testing.assert_allclose(q.coefficients, [6, 8, 3])

    def test_keeps_length(self):
        q = shift_polynomial(Polynomial([4, 0, 0]), 2.5)
        self.assertEqual(len(q.coefficients), 3)
        np.testing.assert_allclose(q.coefficients, [4, 0, 0])


class TestToScipy(unittest.TestCase):
    def setUp(self):
        self.pp = PiecewisePolynomial(
            [Polynomial([1]), Polynomial([0, 1]), Polynomial([1, 0, 1])], [0, 1]
        )

    def test_values_match(self):
        sp = to_scipy_ppoly(self.pp, -1, 2)
        np.testing.assert_allclose(sp.x, [-1, 0, 1, 2])
        ts = np.linspace(-1, 2, 31)
        np.testing.assert_allclose(sp(ts), self.pp(ts), atol=1e-12)

    def test_range_inside_one_segment(self):
        sp = to_scipy_ppoly(self.pp, 0.25, 0.75)
        np.testing.assert_allclose(sp.x, [0.25, 0.75])
        self.assertAlmostEqual(float(sp(0.5)), 0.5)

    def test_zero_width_segments_dropped(self):
        pp = PiecewisePolynomial(
            [Polynomial([0]), Polynomial([5]), Polynomial([1])], [0, 0]
        )
        sp = to_scipy_ppoly(pp, -1, 1)
        np.testing.assert_allclose(sp.x, [-1, 0, 1])
        self.assertAlmostEqual(float(sp(0.5)), 1.0)

    def test_invalid_range(self):
        with self.assertRaises(DomainError):
            to_scipy_ppoly(self.pp, 1, 1)
        with self.assertRaises(DomainError):
            to_scipy_ppoly(self.pp, -np.inf, 1)


class TestFromScipy(unittest.TestCase):
    def test_cubic_spline(self):
        x = np.array([0.0, 1.0, 2.5, 4.0])
        spline = scipy.interpolate.CubicSpline(x, np.sin(x))
        pp = from_scipy_ppoly(spline)
        self.assertEqual(pp.knots, [1.0, 2.5])
        ts = np.linspace(-1, 5, 49)
        np.testing.assert_allclose(pp(ts), spline(ts), atol=1e-9)

    def test_round_trip(self):
        pp = PiecewisePolynomial(
            [Polynomial([2, -1]), Polynomial([0, 0, 3]), Polynomial([-4])], [-1, 2]
        )
        back = from_scipy_ppoly(to_scipy_ppoly(pp, -3, 5))
        self.assertEqual(back.knots, [-1, 2])
        ts = np.linspace(-3, 5, 33)
        np.testing.assert_allclose(back(ts), pp(ts), atol=1e-9)

    def test_vector_valued_rejected(self):
        c = np.zeros((2, 1, 3))
        sp = scipy.interpolate.PPoly(c, [0.0, 1.0])
        with self.assertRaises(DomainError):
            from_scipy_ppoly(sp)


if __name__ == "__main__":
    unittest.main()
