"""Sequence of Bezier segments traversed as a single curve."""

from __future__ import annotations

import logging
import math
from typing import Iterator, List, Tuple

from curvespeed import point as pt
from curvespeed.bezier import Bezier, Bezier1, Bezier2, Bezier3
from curvespeed.common import DEFAULT_PRECISION, PointLike, Scalar
from curvespeed.curve import Curve

logger = logging.getLogger(__name__)


class ComposedCurve(Curve):
    """Path of connected segments of mixed degree, built like an SVG path.

    Each segment takes an equal share of the parameter range: with ``n`` segments the
    segment ``i`` covers ``[i / n, (i + 1) / n]``. Segments that would not move away
    from the current point are not added. A curve without segments is a dot at its
    start point.
    """

    def __init__(self, start_point: PointLike):
        self._last_point = pt.as_point(start_point)
        self._curves: List[Bezier] = []

    @property
    def last_point(self) -> PointLike:
        """Current end of the path, where the next segment starts."""
        return self._last_point

    @property
    def segments(self) -> Tuple[Bezier, ...]:
        """The segments in order."""
        return tuple(self._curves)

    def __len__(self) -> int:
        return len(self._curves)

    def __iter__(self) -> Iterator[Bezier]:
        return iter(self._curves)

    def __getitem__(self, index: int) -> Bezier:
        return self._curves[index]

    def __repr__(self) -> str:
        return f"ComposedCurve(last_point={self._last_point!r}, curves={self._curves!r})"

    ###########################################################################
    # Building
    ###########################################################################

    def line_to(self, point: PointLike) -> None:
        """Add a line from the current point to ``point``."""
        point = pt.as_point(point)
        if pt.points_equal(point, self._last_point):
            logger.debug("Skipped zero length line to %r", point)
            return
        self._curves.append(Bezier(Bezier1(self._last_point, point)))
        self._last_point = point

    def quadratic_to(self, p1: PointLike, p2: PointLike) -> None:
        """Add a quadratic Bezier curve with control point ``p1`` ending at ``p2``."""
        p1, p2 = pt.as_point(p1), pt.as_point(p2)
        if pt.points_equal(p1, p2) and pt.points_equal(p1, self._last_point):
            logger.debug("Skipped degenerate quadratic curve at %r", p2)
            return
        self._curves.append(Bezier(Bezier2(self._last_point, p1, p2)))
        self._last_point = p2

    def cubic_to(self, p1: PointLike, p2: PointLike, p3: PointLike) -> None:
        """Add a cubic Bezier curve with control points ``p1``, ``p2`` ending at ``p3``."""
        p1, p2, p3 = pt.as_point(p1), pt.as_point(p2), pt.as_point(p3)
        if pt.points_equal(p1, p2) and pt.points_equal(p2, p3) and pt.points_equal(p1, self._last_point):
            logger.debug("Skipped degenerate cubic curve at %r", p3)
            return
        self._curves.append(Bezier(Bezier3(self._last_point, p1, p2, p3)))
        self._last_point = p3

    def close(self) -> None:
        """Add a line back to the start of the first segment (if there is one)."""
        if self._curves:
            self.line_to(self._curves[0].start_point())

    ###########################################################################
    # Curve
    ###########################################################################

    def _locate(self, t: Scalar) -> Tuple[int, Scalar]:
        t = min(max(t, 0.0), 1.0) * len(self._curves)
        index = math.floor(t)
        return index, t - index

    def value_at(self, t: Scalar) -> PointLike:
        if not self._curves:
            return self._last_point
        index, local_t = self._locate(t)
        if index == len(self._curves):
            return self._curves[-1].end_point()
        return self._curves[index].value_at(local_t)

    def tangent_at(self, t: Scalar) -> PointLike:
        if not self._curves:
            return pt.zero_like(self._last_point)
        count = len(self._curves)
        index, local_t = self._locate(t)
        if index == count:
            return pt.scale(self._curves[-1].tangent_at(1.0), float(count))
        return pt.scale(self._curves[index].tangent_at(local_t), float(count))

    def estimate_length(self, precision: Scalar = DEFAULT_PRECISION) -> Scalar:
        return sum((curve.estimate_length(precision) for curve in self._curves), 0.0)
