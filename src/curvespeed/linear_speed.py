"""Reparameterization of a curve to a constant speed along its length."""

from __future__ import annotations

import logging
import math
from typing import List, Tuple

from curvespeed import point as pt
from curvespeed.common import DEFAULT_PRECISION, DEFAULT_STEPS_COUNT, DEFAULT_TABLE_SIZE, PointLike, Scalar
from curvespeed.curve import Curve
from curvespeed.errors import DegenerateCurveError
from curvespeed.smooth_array import SmoothArray

logger = logging.getLogger(__name__)


class LinearSpeed(Curve):
    """The same curve as a passed one, but with a linear dependency between time and distance.

    On construction the inner curve is sampled at ``steps_count + 1`` uniform parameter
    values. The accumulated chord lengths, normalized by the total length, give a
    lookup table mapping the traveled fraction of the length to the curve parameter.

    Positions are those of the inner curve. Tangents are retimed: ``tangent_at(s)`` is
    the derivative by the traveled fraction ``s``, so its magnitude is the length of
    the curve for every ``s``.
    """

    def __init__(self, curve: Curve, table_size: int = DEFAULT_TABLE_SIZE, steps_count: int = DEFAULT_STEPS_COUNT):
        """Initialize LinearSpeed and build its lookup table.

        Args:
            curve: The curve to reparameterize
            table_size: Number of samples of the lookup table, at least 2
            steps_count: Number of uniform parameter steps used to measure the curve, at least 1

        Raises:
            ValueError: If table_size or steps_count is out of range
            DegenerateCurveError: If the measured length of the curve is zero or not finite
        """
        if steps_count < 1:
            raise ValueError(f"LinearSpeed needs at least 1 step, got {steps_count}")
        self._curve = curve
        self._table = SmoothArray.with_steps_count(table_size)
        self._length = self._build_table(steps_count)

    def _build_table(self, steps_count: int) -> float:
        last_point = self._curve.value_at(0.0)
        total_length = 0.0

        t_by_offset: List[Tuple[float, float]] = [(0.0, 0.0)]
        inverted_steps = 1.0 / steps_count
        for i in range(1, steps_count + 1):
            t = i * inverted_steps
            point = self._curve.value_at(t)
            total_length += pt.distance(last_point, point)
            t_by_offset.append((total_length, t))
            last_point = point

        if not (total_length > 0.0 and math.isfinite(total_length)):
            raise DegenerateCurveError(
                f"Can not reparameterize a curve of length {total_length}, measured with {steps_count} step(s)"
            )

        inverted_length = 1.0 / total_length
        for (offset1, t1), (offset2, t2) in zip(t_by_offset[:-1], t_by_offset[1:]):
            self._table.line((offset1 * inverted_length, t1), (offset2 * inverted_length, t2))

        logger.debug(
            "LinearSpeed table of %d samples built from %d step(s), length %s",
            len(self._table),
            steps_count,
            total_length,
        )
        return total_length

    @property
    def curve(self) -> Curve:
        """The wrapped curve."""
        return self._curve

    @property
    def length(self) -> float:
        """Length of the curve measured on construction."""
        return self._length

    @property
    def table(self) -> SmoothArray:
        """Lookup table from traveled length fraction to curve parameter."""
        return self._table

    def parameter_at(self, s: Scalar) -> Scalar:
        """Parameter of the inner curve after traveling the fraction ``s`` (clamped to 0..1) of the length."""
        return self._table.value_at(min(max(s, 0.0), 1.0))

    def value_at(self, t: Scalar) -> PointLike:
        return self._curve.value_at(t)

    def tangent_at(self, t: Scalar) -> PointLike:
        s = min(max(t, 0.0), 1.0)
        # d/ds curve(table(s)) = curve'(table(s)) * table'(s)
        curve_t = self._table.value_at(s)
        return pt.scale(self._curve.tangent_at(curve_t), self._table.tangent_at(s))

    def start_point(self) -> PointLike:
        return self._curve.start_point()

    def end_point(self) -> PointLike:
        return self._curve.end_point()

    def estimate_length(self, precision: Scalar = DEFAULT_PRECISION) -> Scalar:
        """The length measured on construction, ``precision`` is ignored."""
        return self._length

    def __repr__(self) -> str:
        return f"LinearSpeed({self._curve!r}, table_size={len(self._table)}, length={self._length})"
