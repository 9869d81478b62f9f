#!/usr/bin/env python3
"""
Simple Example - polypiece

Builds a trapezoidal velocity profile from piecewise polynomials, combines
it with a second profile and plots the result.
"""

import logging

from polypiece import PiecewisePolynomial, Polynomial, setup_logger
from polypiece.interop import to_scipy_ppoly
from polypiece.visualization import plot_piecewise


def trapezoid(accel_end: float, cruise_end: float, stop: float, speed: float):
    """Velocity ramping up, cruising at `speed`, ramping down to zero."""
    up = Polynomial([0, speed / accel_end])
    down = Polynomial([speed * stop / (stop - cruise_end), -speed / (stop - cruise_end)])
    return PiecewisePolynomial(
        [Polynomial([0]), up, Polynomial([speed]), down, Polynomial([0])],
        [0, accel_end, cruise_end, stop],
    )


def example1_profiles(visualize=False):
    """Example 1: Sum of two overlapping velocity profiles."""
    first = trapezoid(1.0, 3.0, 4.0, speed=2.0)
    second = trapezoid(0.5, 2.0, 2.5, speed=1.0)

    total = first + second
    print(total)
    print("v(1.5) =", total(1.5))

    # same function as scipy PPoly on [0, 4], e.g. for integration
    sp = to_scipy_ppoly(total, 0, 4)
    print("distance travelled:", float(sp.integrate(0, 4)))

    if visualize:
        print("\nGenerating visualization...")
        ax = plot_piecewise(None, total, -0.5, 4.5, label="v(t)")
        ax.legend()
        ax.figure.savefig("example_simple_visualization.png", dpi=150, bbox_inches="tight")
        print("Saved: example_simple_visualization.png")

    return total


if __name__ == "__main__":
    setup_logger(level=logging.DEBUG)
    print("\n" + "#" * 70)
    print("#  polypiece - Simple Examples")
    print("#" * 70)

    example1_profiles(visualize=True)
