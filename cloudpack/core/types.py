# cloudpack/core/types.py
"""
Dataclasses for word input, layout configuration, geometry and layout results.
Configuration dataclasses validate themselves on construction (ValueError), so the
placement engine can assume a valid configuration.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Iterator, Literal, get_args

from cloudpack.core.config import (
    DEFAULT_FONT_MAX_PCT,
    DEFAULT_FONT_MIN_PCT,
    DEFAULT_FONT_SCALE_FACTOR,
    DEFAULT_PACKING_FACTOR,
    DEFAULT_WORD_COUNT_MAX_SCALE,
    DEFAULT_WORD_COUNT_MIN_SCALE,
    DEFAULT_WORD_COUNT_THRESHOLD,
    EARLY_ACCEPT_ATTEMPT_RATIO,
    EARLY_ACCEPT_RADIUS_RATIO,
)


ScaleType = Literal["linear", "logarithmic"]
RotationMode = Literal["any", "orthogonal"]
PackingStrategy = Literal["uniform", "adaptive"]

MeasureText = Callable[[str, float], tuple[float, float]]
"""(text, font_size_px) -> (width, height); pure for a fixed font family."""

SCALE_TYPES: tuple[str, ...] = get_args(ScaleType)
ROTATION_MODES: tuple[str, ...] = get_args(RotationMode)
PACKING_STRATEGIES: tuple[str, ...] = get_args(PackingStrategy)


@dataclass(frozen=True)
class WordInput:
    """A weighted label supplied by the caller."""
    text: str
    value: float
    color: str | None = None

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Word text must be non-empty.")
        if not math.isfinite(self.value):
            raise ValueError(f"Word value must be finite, got {self.value!r} for {self.text!r}.")


@dataclass(frozen=True)
class Point:
    """Canvas point; origin top-left, y grows downward."""
    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    """
    Four corners of a (possibly rotated) rectangle, in traversal order
    top-left, top-right, bottom-right, bottom-left of the unrotated box.
    """
    points: tuple[Point, Point, Point, Point]

    def edges(self) -> Iterator[tuple[Point, Point]]:
        """Closed edge list: (p0, p1), (p1, p2), (p2, p3), (p3, p0)."""
        n = len(self.points)
        for i in range(n):
            yield self.points[i], self.points[(i + 1) % n]

    def bounds(self) -> tuple[float, float, float, float]:
        """Return (minx, miny, maxx, maxy)."""
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def as_tuples(self) -> list[tuple[float, float]]:
        return [(p.x, p.y) for p in self.points]


@dataclass(frozen=True)
class WordCountScaling:
    """Shrink fonts as the word set grows past threshold. Bounds are ignored when disabled."""
    enabled: bool = True
    min_scale: float = DEFAULT_WORD_COUNT_MIN_SCALE
    max_scale: float = DEFAULT_WORD_COUNT_MAX_SCALE
    threshold: int = DEFAULT_WORD_COUNT_THRESHOLD

    def __post_init__(self) -> None:
        if self.min_scale <= 0 or self.max_scale <= 0:
            raise ValueError("Word count scales must be positive.")
        if self.min_scale > self.max_scale:
            raise ValueError("min_scale must not exceed max_scale.")
        if self.threshold < 2:
            raise ValueError("Word count threshold must be at least 2.")


@dataclass(frozen=True)
class FontSizeConfig:
    """
    Font size range as percentages of the container's shorter side.
    scale_factor=None means no global scaling (same as 1.0).
    """
    min_pct: float = DEFAULT_FONT_MIN_PCT
    max_pct: float = DEFAULT_FONT_MAX_PCT
    scale_factor: float | None = DEFAULT_FONT_SCALE_FACTOR
    word_count_scaling: WordCountScaling | None = field(default_factory=WordCountScaling)

    def __post_init__(self) -> None:
        if self.min_pct < 0:
            raise ValueError("Font min percentage must be non-negative.")
        if self.min_pct >= self.max_pct:
            raise ValueError(
                f"Font min ({self.min_pct}) must be smaller than max ({self.max_pct})."
            )
        if self.scale_factor is not None and self.scale_factor <= 0:
            raise ValueError("Font scale_factor must be positive.")


@dataclass(frozen=True)
class PackingConfig:
    """
    How densely words are packed and how the spiral search behaves.
    factor > 1 packs tighter (slower angular sweep, slower radius growth, smaller margin).
    """
    factor: float = DEFAULT_PACKING_FACTOR
    strategy: PackingStrategy = "uniform"
    min_spacing: float = 0.0
    brute_force: bool = False
    max_attempts: int | None = None
    spiral_density: float | None = None
    early_accept_radius_ratio: float = EARLY_ACCEPT_RADIUS_RATIO
    early_accept_attempt_ratio: float = EARLY_ACCEPT_ATTEMPT_RATIO

    def __post_init__(self) -> None:
        if not (self.factor > 0 and math.isfinite(self.factor)):
            raise ValueError("Packing factor must be a positive number.")
        if self.strategy not in PACKING_STRATEGIES:
            raise ValueError(f"Unknown packing strategy: {self.strategy!r}")
        if self.min_spacing < 0:
            raise ValueError("min_spacing must be non-negative.")
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ValueError("max_attempts must be a positive integer.")
        if self.spiral_density is not None and self.spiral_density <= 0:
            raise ValueError("spiral_density must be positive.")
        if self.early_accept_radius_ratio < 0:
            raise ValueError("early_accept_radius_ratio must be non-negative.")
        if not 0 < self.early_accept_attempt_ratio <= 1:
            raise ValueError("early_accept_attempt_ratio must be in (0, 1].")


@dataclass(frozen=True)
class SpiralCandidate:
    """One spiral step: candidate center and rotation."""
    x: float
    y: float
    rotation_deg: float


@dataclass(frozen=True)
class PlacedWord:
    """A word committed to the canvas. Created only on successful placement."""
    text: str
    value: float
    color: str | None
    x: float
    y: float
    font_size: float
    rotation_deg: float
    measured_width: float
    measured_height: float
    bounding_box: BoundingBox
    normalized_value: float


@dataclass(frozen=True)
class LayoutStatistics:
    """Aggregate diagnostics of a finished layout; never fed back into placement."""
    placed_count: int
    total_count: int
    dropped_count: int
    average_attempts: float
    coverage_pct: float


@dataclass(frozen=True)
class LayoutResult:
    """
    Placed words in processing order (descending value), attempts consumed per
    word text, texts that could not be placed, and aggregate statistics.
    """
    placed: list[PlacedWord]
    attempts: dict[str, int]
    dropped: list[str]
    statistics: LayoutStatistics
    width: float
    height: float
    margin: float
