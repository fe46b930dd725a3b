"""Test module for the adaptive length estimation of quadratic and cubic Bezier segments

The tests are run using pytest.
Reference lengths are computed from a dense polyline of the curve.
"""

import math

import numpy as np
import pytest

from curvespeed.bezier import Bezier, Bezier2, Bezier3


def polyline_length(curve, steps=20000):
    """Length of a dense polyline through the curve, a tight lower bound of the arc length."""
    points = np.array([curve.value_at(t) for t in np.linspace(0.0, 1.0, steps + 1)])
    return float(np.sum(np.linalg.norm(np.diff(points, axis=0), axis=1)))


QUADRATIC = Bezier2((0.0, 0.0), (50.0, 200.0), (200.0, 0.0))
CUBIC = Bezier3((0.0, 0.0), (50.0, 200.0), (150.0, -100.0), (200.0, 0.0))

###############################################################################
# Bounds
###############################################################################


class TestLengthBounds:
    """Test the chord and control polygon bounds."""

    def test_quadratic_bounds(self):
        """min is the chord, max the control polygon."""
        low, high = Bezier2((0.0, 0.0), (3.0, 4.0), (6.0, 0.0)).length_bounds()
        assert low == pytest.approx(6.0)
        assert high == pytest.approx(10.0)

    def test_cubic_bounds(self):
        """min is the chord, max the control polygon."""
        low, high = Bezier3((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)).length_bounds()
        assert low == pytest.approx(1.0)
        assert high == pytest.approx(3.0)

    @pytest.mark.parametrize("curve", [QUADRATIC, CUBIC])
    @pytest.mark.parametrize("precision", [1.0, 0.1, 0.01, 1e-4])
    def test_estimate_within_bounds(self, curve, precision):
        """Every estimate lies between the bounds of the whole segment."""
        low, high = curve.length_bounds()
        estimate = curve.estimate_length(precision)
        assert low <= estimate <= high


###############################################################################
# Precision
###############################################################################


class TestLengthPrecision:
    """Test convergence of the estimation."""

    @pytest.mark.parametrize("curve", [QUADRATIC, CUBIC])
    def test_converges_to_arc_length(self, curve):
        """A small precision gives the arc length to a matching relative error."""
        reference = polyline_length(curve)
        assert curve.estimate_length(1e-6) == pytest.approx(reference, rel=1e-5)

    @pytest.mark.parametrize("curve", [QUADRATIC, CUBIC])
    def test_error_shrinks_with_precision(self, curve):
        """The gap to the arc length does not grow when the precision gets finer."""
        reference = polyline_length(curve)
        errors = [abs(curve.estimate_length(p) - reference) for p in (0.5, 0.1, 0.01, 0.001, 1e-5)]
        assert errors[-1] <= errors[0]
        assert errors[-1] < 1e-3 * reference

    def test_infinite_precision_is_one_step(self):
        """With an infinite precision the average of the bounds is returned."""
        curve = Bezier2((0.0, 0.0), (3.0, 4.0), (6.0, 0.0))
        assert curve.estimate_length(math.inf) == pytest.approx(8.0)

    def test_straight_curve_is_exact(self):
        """Collinear, evenly spaced control points give the exact length at once."""
        curve = Bezier3((0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0))
        assert curve.estimate_length(1e-9) == pytest.approx(3.0 * math.sqrt(2.0))

    def test_scalar_points(self):
        """1D curves are measured by absolute differences."""
        curve = Bezier2(0.0, 2.0, 1.0)
        # moves 0 -> 4/3 and back to 1
        assert curve.estimate_length(1e-6) == pytest.approx(4.0 / 3.0 + 1.0 / 3.0, rel=1e-5)

    def test_deterministic(self):
        """The same segment and precision give the same estimate."""
        assert CUBIC.estimate_length(1e-3) == CUBIC.estimate_length(1e-3)

    def test_wrapper_forwards_estimation(self):
        """The Bezier wrapper gives the same estimate as its segment."""
        assert Bezier(CUBIC).estimate_length(1e-3) == CUBIC.estimate_length(1e-3)


###############################################################################
# Degenerate input
###############################################################################


class TestLengthDegenerate:
    """Test degenerate segments and invalid precision."""

    def test_all_points_equal(self):
        """A control polygon of zero length gives exactly zero."""
        assert Bezier3((1.0, 1.0), (1.0, 1.0), (1.0, 1.0), (1.0, 1.0)).estimate_length(1e-6) == 0.0
        assert Bezier2(2.0, 2.0, 2.0).estimate_length(1e-6) == 0.0

    def test_closed_loop(self):
        """A loop returning to its start point has a zero chord but a positive length."""
        curve = Bezier3((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (0.0, 0.0))
        estimate = curve.estimate_length(1e-5)
        assert estimate == pytest.approx(polyline_length(curve), rel=1e-4)

    @pytest.mark.parametrize("precision", [0.0, -0.1, math.nan])
    def test_invalid_precision(self, precision):
        """The precision must be a positive number."""
        with pytest.raises(ValueError):
            QUADRATIC.estimate_length(precision)
