# cloudpack/core/normalize.py
"""
Map raw word values into [0, 1] relative to the current word set (linear or log scale).
"""

from __future__ import annotations

import math
from typing import Iterable

from cloudpack.core.config import DEGENERATE_NORMALIZED_VALUE, LOG_EPSILON
from cloudpack.core.types import SCALE_TYPES, ScaleType, WordInput


def value_range(words: Iterable[WordInput]) -> tuple[float, float]:
    """Return (min_value, max_value); (0.0, 0.0) for no words."""
    values = [w.value for w in words]
    if not values:
        return (0.0, 0.0)
    return (min(values), max(values))


def normalize_value(
    value: float,
    min_value: float,
    max_value: float,
    scale_type: ScaleType = "linear",
) -> float:
    """
    Rescale value to [0, 1].
    All-equal sets map to 0.5; non-positive values map to 0 under either scale.
    Logarithmic scale clamps value, min and max to LOG_EPSILON before log.
    """
    if scale_type not in SCALE_TYPES:
        raise ValueError(f"Unknown scale type: {scale_type!r}")
    if min_value == max_value:
        return DEGENERATE_NORMALIZED_VALUE
    if value <= 0:
        return 0.0

    if scale_type == "logarithmic":
        min_log = math.log(max(LOG_EPSILON, min_value))
        max_log = math.log(max(LOG_EPSILON, max_value))
        value_log = math.log(max(LOG_EPSILON, value))
        if max_log == min_log:
            # min and max both at or below epsilon
            return DEGENERATE_NORMALIZED_VALUE
        return (value_log - min_log) / (max_log - min_log)

    return (value - min_value) / (max_value - min_value)
