"""Bezier segments of degree 0 to 3 and the degree-tagged Bezier wrapper.

Every segment provides closed-form evaluation of its Bernstein polynomial
(``value_at``), of its hodograph (``tangent_at``) and a length estimation.
Quadratic and cubic segments estimate their length adaptively:

    min = distance(first point, last point)          (chord)
    max = sum of distances between consecutive points (control polygon)

The true length lies in ``[min, max]``. While ``(max - min) / max`` is not below the
requested precision the segment is bisected by de Casteljau subdivision and both
halves are estimated the same way. The estimate of an accepted piece is
``(min + max) / 2``.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterator, List, Tuple, Type

from curvespeed import point as pt
from curvespeed.common import DEFAULT_PRECISION, PointLike, Scalar
from curvespeed.curve import Curve

logger = logging.getLogger(__name__)


def _check_precision(precision: Scalar) -> None:
    # also rejects NaN
    if not precision > 0.0:
        raise ValueError(f"Length precision must be a positive number, got {precision}")


def _lerp(a: PointLike, b: PointLike, t: Scalar) -> PointLike:
    return pt.add(pt.scale(a, 1.0 - t), pt.scale(b, t))


###############################################################################
# Segment base
###############################################################################
class BezierSegment(Curve):
    """Common storage and protocol of the fixed-degree Bezier segments.

    A segment holds exactly ``degree + 1`` control points, copied on construction.
    It is immutable, so all queries are pure functions of ``(segment, t)``.
    """

    degree: int = -1

    def __init__(self, *points: PointLike):
        if len(points) != self.degree + 1:
            raise ValueError(
                f"{type(self).__name__} needs {self.degree + 1} control point(s), got {len(points)}"
            )
        self._points: Tuple[PointLike, ...] = tuple(pt.as_point(p) for p in points)

    @property
    def points(self) -> Tuple[PointLike, ...]:
        """The control points in order."""
        return self._points

    def start_point(self) -> PointLike:
        return self._points[0]

    def end_point(self) -> PointLike:
        return self._points[-1]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[PointLike]:
        return iter(self._points)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):  # pylint: disable=unidiomatic-typecheck
            return NotImplemented
        return all(pt.points_equal(a, b) for a, b in zip(self._points, other.points))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(p) for p in self._points)})"


###############################################################################
# Bezier0 .. Bezier3
###############################################################################
class Bezier0(BezierSegment):
    """Single point, at any ``t`` it returns the same value."""

    degree = 0

    def value_at(self, t: Scalar) -> PointLike:
        return self._points[0]

    def tangent_at(self, t: Scalar) -> PointLike:
        return pt.zero_like(self._points[0])

    def estimate_length(self, precision: Scalar = DEFAULT_PRECISION) -> Scalar:
        return 0.0


class Bezier1(BezierSegment):
    """Line"""

    degree = 1

    def value_at(self, t: Scalar) -> PointLike:
        p0, p1 = self._points
        return pt.add(p0, pt.scale(pt.sub(p1, p0), t))

    def tangent_at(self, t: Scalar) -> PointLike:
        p0, p1 = self._points
        return pt.sub(p1, p0)

    def estimate_length(self, precision: Scalar = DEFAULT_PRECISION) -> Scalar:
        p0, p1 = self._points
        return pt.distance(p0, p1)

    def split(self, t: Scalar = 0.5) -> Tuple[Bezier1, Bezier1]:
        """Split the line at ``t`` into the lines covering ``[0, t]`` and ``[t, 1]``."""
        p0, p1 = self._points
        m = _lerp(p0, p1, t)
        return Bezier1(p0, m), Bezier1(m, p1)


class _AdaptiveLengthMixin:
    """Adaptive length estimation for segments providing ``length_bounds`` and ``split``."""

    def length_bounds(self) -> Tuple[float, float]:
        """Lower (chord) and upper (control polygon) bound of the arc length."""
        points = self._points  # type: ignore[attr-defined]
        low = pt.distance(points[0], points[-1])
        high = math.fsum(pt.distance(a, b) for a, b in zip(points[:-1], points[1:]))
        return low, high

    def estimate_length(self, precision: Scalar = DEFAULT_PRECISION) -> Scalar:
        """Estimate the arc length until the bounds of every piece are within ``precision``.

        Args:
            precision: Maximum relative gap ``(max - min) / max`` of an accepted piece,
                ``math.inf`` accepts the first estimation

        Returns:
            The summed estimation of all accepted pieces

        Raises:
            ValueError: If precision is not a positive number
        """
        _check_precision(precision)

        total = 0.0
        pending: List[_AdaptiveLengthMixin] = [self]
        splits = 0
        while pending:
            segment = pending.pop()
            low, high = segment.length_bounds()
            if high == 0.0:
                continue
            if not math.isfinite(high):
                # non-finite control points, subdivision can not converge
                return high
            if (high - low) / high < precision:
                total += (low + high) * 0.5
                continue
            first, second = segment.split(0.5)  # type: ignore[attr-defined]
            pending.append(second)
            pending.append(first)
            splits += 1

        logger.debug("Estimated length %s of %r with %d subdivision(s)", total, self, splits)
        return total


class Bezier2(_AdaptiveLengthMixin, BezierSegment):
    """Quadratic Bezier curve"""

    degree = 2

    def value_at(self, t: Scalar) -> PointLike:
        p0, p1, p2 = self._points
        nt = 1.0 - t
        return pt.add(pt.add(pt.scale(p0, nt * nt), pt.scale(p1, 2.0 * nt * t)), pt.scale(p2, t * t))

    def tangent_at(self, t: Scalar) -> PointLike:
        p0, p1, p2 = self._points
        t2 = t + t
        return pt.add(pt.scale(pt.sub(p1, p0), 2.0 - t2), pt.scale(pt.sub(p2, p1), t2))

    def split(self, t: Scalar = 0.5) -> Tuple[Bezier2, Bezier2]:
        """De Casteljau subdivision at ``t`` into the curves covering ``[0, t]`` and ``[t, 1]``."""
        p0, p1, p2 = self._points
        m01 = _lerp(p0, p1, t)
        m12 = _lerp(p1, p2, t)
        m = _lerp(m01, m12, t)
        return Bezier2(p0, m01, m), Bezier2(m, m12, p2)


class Bezier3(_AdaptiveLengthMixin, BezierSegment):
    """Cubic Bezier curve"""

    degree = 3

    def value_at(self, t: Scalar) -> PointLike:
        # B(t) = (1-t)^3*P0 + 3*(1-t)^2*t*P1 + 3*(1-t)*t^2*P2 + t^3*P3
        p0, p1, p2, p3 = self._points
        nt = 1.0 - t
        nt2 = nt * nt
        t2 = t * t
        return pt.add(
            pt.add(pt.scale(p0, nt2 * nt), pt.scale(p1, 3.0 * nt2 * t)),
            pt.add(pt.scale(p2, 3.0 * nt * t2), pt.scale(p3, t2 * t)),
        )

    def tangent_at(self, t: Scalar) -> PointLike:
        # B'(t) = 3*(1-t)^2*(P1-P0) + 6*(1-t)*t*(P2-P1) + 3*t^2*(P3-P2)
        p0, p1, p2, p3 = self._points
        nt = 1.0 - t
        v1 = pt.scale(pt.sub(p1, p0), 3.0 * nt * nt)
        v2 = pt.scale(pt.sub(p2, p1), 6.0 * nt * t)
        v3 = pt.scale(pt.sub(p3, p2), 3.0 * t * t)
        return pt.add(pt.add(v1, v2), v3)

    def split(self, t: Scalar = 0.5) -> Tuple[Bezier3, Bezier3]:
        """De Casteljau subdivision at ``t`` into the curves covering ``[0, t]`` and ``[t, 1]``."""
        p0, p1, p2, p3 = self._points
        m01 = _lerp(p0, p1, t)
        m12 = _lerp(p1, p2, t)
        m23 = _lerp(p2, p3, t)
        m012 = _lerp(m01, m12, t)
        m123 = _lerp(m12, m23, t)
        m = _lerp(m012, m123, t)
        return Bezier3(p0, m01, m012, m), Bezier3(m, m123, m23, p3)


###############################################################################
# Bezier
###############################################################################
_SEGMENT_BY_DEGREE: Dict[int, Type[BezierSegment]] = {
    Bezier0.degree: Bezier0,
    Bezier1.degree: Bezier1,
    Bezier2.degree: Bezier2,
    Bezier3.degree: Bezier3,
}


class Bezier(Curve):
    """Bezier segment whose degree is only known at construction time.

    Wraps exactly one of Bezier0, Bezier1, Bezier2 or Bezier3 and forwards every
    query to it. Used as the element type of curves mixing segment degrees.
    """

    def __init__(self, segment: BezierSegment):
        if type(segment) not in _SEGMENT_BY_DEGREE.values():
            raise TypeError(f"Bezier wraps Bezier0..Bezier3 segments only, got {type(segment).__name__}")
        self._segment = segment

    @classmethod
    def from_points(cls, *points: PointLike) -> Bezier:
        """Create the segment whose degree matches the number of control points (1 to 4)."""
        segment_type = _SEGMENT_BY_DEGREE.get(len(points) - 1)
        if segment_type is None:
            raise ValueError(f"A Bezier segment needs 1 to 4 control points, got {len(points)}")
        return cls(segment_type(*points))

    @property
    def degree(self) -> int:
        """Degree of the wrapped segment."""
        return self._segment.degree

    @property
    def segment(self) -> BezierSegment:
        """The wrapped fixed-degree segment."""
        return self._segment

    @property
    def points(self) -> Tuple[PointLike, ...]:
        """Control points of the wrapped segment."""
        return self._segment.points

    def value_at(self, t: Scalar) -> PointLike:
        return self._segment.value_at(t)

    def tangent_at(self, t: Scalar) -> PointLike:
        return self._segment.tangent_at(t)

    def start_point(self) -> PointLike:
        return self._segment.start_point()

    def end_point(self) -> PointLike:
        return self._segment.end_point()

    def estimate_length(self, precision: Scalar = DEFAULT_PRECISION) -> Scalar:
        return self._segment.estimate_length(precision)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bezier):
            return NotImplemented
        return self._segment == other.segment

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Bezier({self._segment!r})"
