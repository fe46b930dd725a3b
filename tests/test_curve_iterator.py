"""Test module for curvespeed.curve_iterator

The tests are run using pytest.
"""

import pytest
from numpy.testing import assert_allclose

from curvespeed.bezier import Bezier1, Bezier3
from curvespeed.curve_iterator import CurveIterator


def test_exclusive_iteration():
    """Without include_last the point at t = 1 is not yielded."""
    points = list(Bezier1(0.0, 4.0).iter_points(4))
    assert points == [0.0, 1.0, 2.0, 3.0]


def test_inclusive_iteration():
    """With include_last the point at t = 1 ends the iteration."""
    points = list(Bezier1(0.0, 4.0).iter_points(4, include_last=True))
    assert points == [0.0, 1.0, 2.0, 3.0, 4.0]


def test_iterator_is_exhausted():
    """An iterator yields its points only once."""
    iterator = CurveIterator(Bezier1(0.0, 1.0), 2)
    assert len(list(iterator)) == 2
    assert not list(iterator)


def test_length_hint():
    """The length hint counts the remaining points."""
    iterator = CurveIterator(Bezier1(0.0, 1.0), 3, include_last=True)
    assert iterator.__length_hint__() == 4
    next(iterator)
    assert iterator.__length_hint__() == 3


@pytest.mark.parametrize("steps_count", [0, -2])
def test_invalid_steps_count(steps_count):
    """At least one step is needed."""
    with pytest.raises(ValueError):
        CurveIterator(Bezier1(0.0, 1.0), steps_count)


def test_to_array():
    """Points of a 2D curve are collected row by row."""
    curve = Bezier3((0.0, 0.0), (0.0, 1.0), (2.0, -1.0), (2.0, 0.0))
    points = curve.iter_points(2, include_last=True).to_array()
    assert points.shape == (3, 2)
    assert_allclose(points, [[0.0, 0.0], [1.0, 0.0], [2.0, 0.0]], atol=1e-12)


def test_to_array_scalar_points():
    """Points of a 1D curve give a flat array."""
    points = Bezier1(0.0, 2.0).iter_points(4).to_array()
    assert points.shape == (4,)
    assert_allclose(points, [0.0, 0.5, 1.0, 1.5])
