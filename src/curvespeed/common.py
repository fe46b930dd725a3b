"""Central module containing type definitions and default settings for curve evaluation."""

from __future__ import annotations

from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

###############################################################################
# Types
###############################################################################


Scalar = float  # Curve parameter `t`, lengths and precisions

# A point is any value closed under +, - and scaling by a Scalar:
# plain floats, numpy coordinate arrays or user defined point classes.
PointLike = Union[float, NDArray[np.floating], Any]


###############################################################################
# Defaults
###############################################################################


# Maximum tolerated relative gap (max - min) / max between the length bounds
DEFAULT_PRECISION: float = 0.01

# Number of samples of the distance -> parameter lookup table of LinearSpeed
DEFAULT_TABLE_SIZE: int = 100

# Number of uniform parameter steps used to measure the curve for LinearSpeed
DEFAULT_STEPS_COUNT: int = 100
