"""Point arithmetic used by all curves.

Curves never look inside their points. Everything they need is expressed by the
functions of this module:

    - add / sub / scale: vector space operations (operators +, - and * scalar)
    - distance: euclidean distance, required by length estimation only
    - points_equal: equality that also works for numpy arrays

Supported point types:
    - Python and numpy real scalars (1D curves), stored as float
    - numpy arrays and sequences of coordinates, stored as a private read-only numpy array
    - any user class overloading +, - and * (by a scalar); if it provides a
      ``distance(other)`` method that one is used by ``distance``
"""

from __future__ import annotations

import numbers
from typing import Any, Protocol, runtime_checkable

import numpy as np

from curvespeed.common import PointLike, Scalar


@runtime_checkable
class SupportsDistance(Protocol):
    """Point types that know how to measure the distance to another point."""

    def distance(self, other: Any) -> float:
        """Return the distance between this point and ``other``."""


def as_point(value: Any) -> PointLike:
    """Return ``value`` as a point owned by the caller of this function.

    Scalars become ``float``, coordinate sequences and arrays become a new read-only
    numpy array (floating dtypes are kept, everything else is converted to float64).
    Other objects are treated as user point types and returned unchanged.

    Raises:
        TypeError: If ``value`` is a complex number, a string or bytes.
    """
    if isinstance(value, (str, bytes)):
        raise TypeError(f"A point can not be built from {type(value).__name__}: {value!r}")
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        raise TypeError(f"Complex values are not supported as points: {value!r}")
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, np.ndarray) and np.issubdtype(value.dtype, np.floating):
        array = value.copy()
    elif isinstance(value, (np.ndarray, list, tuple)):
        array = np.array(value, dtype=np.float64)
    else:
        return value
    array.setflags(write=False)
    return array


def add(a: PointLike, b: PointLike) -> PointLike:
    """Component-wise sum ``a + b``."""
    return a + b


def sub(a: PointLike, b: PointLike) -> PointLike:
    """Component-wise difference ``a - b``."""
    return a - b


def scale(p: PointLike, s: Scalar) -> PointLike:
    """Point ``p`` scaled by the scalar ``s``."""
    return p * s


def zero_like(p: PointLike) -> PointLike:
    """Zero vector in the space of ``p``."""
    return scale(p, 0.0)


def distance(a: PointLike, b: PointLike) -> float:
    """Distance between ``a`` and ``b``.

    Uses ``a.distance(b)`` when the point type provides it, the euclidean norm for
    numpy arrays and the absolute difference for scalars.
    """
    if isinstance(a, SupportsDistance):
        return float(a.distance(b))
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return float(np.linalg.norm(np.subtract(a, b)))
    return float(abs(a - b))


def points_equal(a: PointLike, b: PointLike) -> bool:
    """Exact equality of two points."""
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)

