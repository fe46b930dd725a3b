"""Iteration over uniformly spaced points of a curve."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from curvespeed.common import PointLike
from curvespeed.curve import Curve


class CurveIterator:
    """Yields ``curve.value_at(i / steps_count)`` for ``i = 0 .. steps_count - 1``.

    With ``include_last`` the point at ``t = 1`` is yielded as well.
    """

    def __init__(self, curve: Curve, steps_count: int, include_last: bool = False):
        if steps_count < 1:
            raise ValueError(f"CurveIterator needs at least 1 step, got {steps_count}")
        self._curve = curve
        self._steps_count = steps_count
        self._include_last = include_last
        self._i = 0

    def __iter__(self) -> CurveIterator:
        return self

    def __next__(self) -> PointLike:
        if self._i < self._steps_count or (self._include_last and self._i == self._steps_count):
            t = self._i / self._steps_count
            self._i += 1
            return self._curve.value_at(t)
        raise StopIteration

    def __length_hint__(self) -> int:
        end = self._steps_count + 1 if self._include_last else self._steps_count
        return max(end - self._i, 0)

    def to_array(self) -> NDArray[np.float64]:
        """Consume the remaining points into an array of shape (n,) or (n, dimensions)."""
        return np.array([np.asarray(p, dtype=np.float64) for p in self], dtype=np.float64)
