# cloudpack/core/font_size.py
"""
Resolve a concrete font size (canvas px) from a normalized value, the container
size, the number of words and the font configuration.
"""

from __future__ import annotations

import math

from cloudpack.core.config import MAX_FONT_SIZE_RATIO, MIN_FONT_SIZE_PX
from cloudpack.core.types import FontSizeConfig, WordCountScaling


def word_count_scale(word_count: int, scaling: WordCountScaling | None) -> float:
    """
    Multiplier for the whole word set. max_scale up to threshold words, then
    max_scale * log(threshold) / log(word_count), never below min_scale.
    Returns 1.0 when scaling is absent or disabled.
    """
    if scaling is None or not scaling.enabled:
        return 1.0
    if word_count <= scaling.threshold:
        return scaling.max_scale
    return max(
        scaling.min_scale,
        scaling.max_scale * (math.log(scaling.threshold) / math.log(word_count)),
    )


def resolve_font_size(
    width: float,
    height: float,
    word_count: int,
    font_config: FontSizeConfig,
    normalized_value: float,
) -> float:
    """
    Interpolate between min/max (percent of the shorter side), apply word-count
    and global scaling, then clamp to [MIN_FONT_SIZE_PX, shorter side * MAX_FONT_SIZE_RATIO].
    word_count must be the same for every word of one layout.
    """
    reference = min(width, height)
    min_px = font_config.min_pct / 100.0 * reference
    max_px = font_config.max_pct / 100.0 * reference

    size = min_px + (max_px - min_px) * normalized_value
    size *= word_count_scale(word_count, font_config.word_count_scaling)
    if font_config.scale_factor:
        size *= font_config.scale_factor

    return min(max(size, MIN_FONT_SIZE_PX), reference * MAX_FONT_SIZE_RATIO)
