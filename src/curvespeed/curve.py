"""Abstract curve interface shared by Bezier segments, composed curves and LinearSpeed."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from curvespeed.common import DEFAULT_STEPS_COUNT, DEFAULT_TABLE_SIZE, PointLike, Scalar

if TYPE_CHECKING:
    from curvespeed.bezier import Bezier0, Bezier1, Bezier2, Bezier3
    from curvespeed.composed_curve import ComposedCurve
    from curvespeed.curve_iterator import CurveIterator
    from curvespeed.linear_speed import LinearSpeed


class Curve(ABC):
    """A parametric function mapping a value ``t`` in range 0..1 to a point in space."""

    @abstractmethod
    def value_at(self, t: Scalar) -> PointLike:
        """Get the point at a given value ``t`` in range from 0 to 1."""

    @abstractmethod
    def tangent_at(self, t: Scalar) -> PointLike:
        """Get the derivative at a given value ``t`` in range from 0 to 1."""

    def start_point(self) -> PointLike:
        """Point at ``t = 0``."""
        return self.value_at(0.0)

    def end_point(self) -> PointLike:
        """Point at ``t = 1``."""
        return self.value_at(1.0)

    @abstractmethod
    def estimate_length(self, precision: Scalar) -> Scalar:
        """Estimate the length of the curve as the average of a ``min`` and ``max`` estimation.

        The precision is the maximum tolerated ratio ``(max - min) / max``:
            - ``math.inf``: the estimation is done in one step
            - ``1.0``: ``max`` and ``min`` may differ by up to 100%
            - ``0.1``: the same as above with 10%, and so on
        """

    ###########################################################################
    # Factories
    ###########################################################################

    @staticmethod
    def dot(p0: PointLike) -> Bezier0:
        """Create a dot, at any ``t`` it returns the same value."""
        from curvespeed.bezier import Bezier0  # pylint: disable=import-outside-toplevel

        return Bezier0(p0)

    @staticmethod
    def line(p0: PointLike, p1: PointLike) -> Bezier1:
        """Create a line."""
        from curvespeed.bezier import Bezier1  # pylint: disable=import-outside-toplevel

        return Bezier1(p0, p1)

    @staticmethod
    def quad_bezier(p0: PointLike, p1: PointLike, p2: PointLike) -> Bezier2:
        """Create a quadratic Bezier curve."""
        from curvespeed.bezier import Bezier2  # pylint: disable=import-outside-toplevel

        return Bezier2(p0, p1, p2)

    @staticmethod
    def cubic_bezier(p0: PointLike, p1: PointLike, p2: PointLike, p3: PointLike) -> Bezier3:
        """Create a cubic Bezier curve."""
        from curvespeed.bezier import Bezier3  # pylint: disable=import-outside-toplevel

        return Bezier3(p0, p1, p2, p3)

    @staticmethod
    def composed_curve(start_point: PointLike) -> ComposedCurve:
        """Create a composed curve, a sequence of segments starting at ``start_point``.

        Each segment takes an equal ``t`` range: with three segments they cover
        ``0 - 0.33``, ``0.33 - 0.66`` and ``0.66 - 1.0``.
        """
        from curvespeed.composed_curve import ComposedCurve  # pylint: disable=import-outside-toplevel

        return ComposedCurve(start_point)

    ###########################################################################
    # Adapters
    ###########################################################################

    def iter_points(self, steps_count: int, include_last: bool = False) -> CurveIterator:
        """Iterate over points of the curve at ``t = i / steps_count``.

        Args:
            steps_count: Number of parameter steps
            include_last: If True the point at ``t = 1`` is yielded as well
        """
        from curvespeed.curve_iterator import CurveIterator  # pylint: disable=import-outside-toplevel

        return CurveIterator(self, steps_count, include_last)

    def linear_speed(self, table_size: int = DEFAULT_TABLE_SIZE, steps_count: int = DEFAULT_STEPS_COUNT) -> LinearSpeed:
        """Wrap the curve to move along it with a constant speed.

        Especially useful to animate a movement along a composed curve.

        Args:
            table_size: Size of the distance -> parameter lookup table, bigger is more precise
            steps_count: Number of uniform parameter steps used to measure the curve,
                intermediate values are interpolated
        """
        from curvespeed.linear_speed import LinearSpeed  # pylint: disable=import-outside-toplevel

        return LinearSpeed(self, table_size, steps_count)
