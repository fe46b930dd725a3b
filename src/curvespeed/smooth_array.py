"""Piecewise linear lookup table over the normalized position range 0.0..1.0."""

from __future__ import annotations

import math
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray


class SmoothArray:
    """Uniformly sampled function on ``[0, 1]`` interpolating linearly between its samples.

    The sample ``i`` of a table with ``n`` samples holds the value at position
    ``i / (n - 1)``. Positions are implicit, only the values are stored.
    """

    def __init__(self, values: Union[Sequence[float], NDArray[np.float64]]):
        """Initialize SmoothArray with existing samples.

        Args:
            values: Sample values, at least two

        Raises:
            ValueError: If values is not one-dimensional or has less than two samples
        """
        data = np.array(values, dtype=np.float64)
        if data.ndim != 1 or data.shape[0] < 2:
            raise ValueError(f"SmoothArray needs a 1D sequence of at least 2 samples, got shape {data.shape}")
        self._data: NDArray[np.float64] = data

    @classmethod
    def with_steps_count(cls, steps_count: int) -> SmoothArray:
        """Create a table of ``steps_count`` samples, all zero."""
        if steps_count < 2:
            raise ValueError(f"SmoothArray needs at least 2 samples, got {steps_count}")
        return cls(np.zeros(steps_count, dtype=np.float64))

    @property
    def values(self) -> NDArray[np.float64]:
        """Read-only view of the samples."""
        view = self._data.view()
        view.setflags(write=False)
        return view

    @property
    def last_index(self) -> int:
        """Index of the last sample, i.e. the scale between positions and indices."""
        return self._data.shape[0] - 1

    def __len__(self) -> int:
        return self._data.shape[0]

    def __repr__(self) -> str:
        return f"SmoothArray({self._data.tolist()!r})"

    def line(self, start: Tuple[float, float], end: Tuple[float, float]) -> None:
        """Write the line from ``start`` to ``end``, both ``(position, value)``, into the table.

        Every sample from the first index at or after ``start`` up to the last sample
        of the table is overwritten with the line's value. The line is extended
        beyond ``end`` so that rounding can not leave the last sample unwritten;
        a following line starting at ``end`` overwrites the extension.
        Lines of zero width cover no sample and are ignored.
        """
        (position1, value1), (position2, value2) = start, end
        index1 = position1 * self.last_index
        index2 = position2 * self.last_index
        if index2 == index1:
            return

        first = max(math.ceil(index1), 0)
        indices = np.arange(first, self._data.shape[0], dtype=np.float64)
        f = (indices - index1) / (index2 - index1)
        self._data[first:] = value1 * (1.0 - f) + value2 * f

    def value_at(self, position: float) -> float:
        """Linearly interpolated value at ``position``, clamped to ``[0, 1]``."""
        return self._value_at_index(self._to_index(position))

    def tangent_at(self, position: float) -> float:
        """Derivative of the table at ``position`` by central finite difference.

        At the table ends the difference becomes one-sided.
        """
        index = self._to_index(position)
        index1 = max(index - 1.0, 0.0)
        index2 = min(index + 1.0, float(self.last_index))
        delta = (self._value_at_index(index2) - self._value_at_index(index1)) / (index2 - index1)
        return delta * self.last_index

    def _to_index(self, position: float) -> float:
        if math.isnan(position):
            raise ValueError("SmoothArray position must not be NaN")
        return min(max(position * self.last_index, 0.0), float(self.last_index))

    def _value_at_index(self, index: float) -> float:
        index_low = math.floor(index)
        index_high = math.ceil(index)
        f = index - index_low
        return float(self._data[index_low] * (1.0 - f) + self._data[index_high] * f)
