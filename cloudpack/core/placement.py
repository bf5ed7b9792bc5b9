# cloudpack/core/placement.py
"""
Word cloud placement orchestration.
Orders words by value (largest first), resolves font size and footprint, walks
the spiral for each word and commits the valid candidate closest to the canvas
center. Words without a valid candidate are dropped, never force-placed.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from cloudpack.core.config import (
    ADAPTIVE_SPACING_BASE,
    ADAPTIVE_SPACING_WEIGHT,
    DEFAULT_FONT_FAMILY,
    DEFAULT_MAX_ATTEMPTS,
    LAYOUT_DEBUG,
    SEED,
    SPACING_RATIO,
)
from cloudpack.core.font_size import resolve_font_size
from cloudpack.core.geometry import distance, rotated_bounding_box
from cloudpack.core.normalize import normalize_value, value_range
from cloudpack.core.spiral import make_rng, spiral_position
from cloudpack.core.statistics import compute_statistics
from cloudpack.core.types import (
    ROTATION_MODES,
    SCALE_TYPES,
    BoundingBox,
    FontSizeConfig,
    LayoutResult,
    MeasureText,
    PackingConfig,
    PlacedWord,
    RotationMode,
    ScaleType,
    WordInput,
)
from cloudpack.core.validate import REJECT_OVERLAP, canvas_margin, validate_candidate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Candidate:
    x: float
    y: float
    rotation_deg: float
    box: BoundingBox
    center_distance: float


def word_spacing(
    measured_width: float,
    measured_height: float,
    normalized_value: float,
    packing: PackingConfig,
) -> float:
    """
    Padding around a word's box: max(min_spacing, min(w, h) * SPACING_RATIO) * factor.
    Adaptive strategy scales it by base + weight * normalized_value.
    """
    spacing = max(packing.min_spacing, min(measured_width, measured_height) * SPACING_RATIO)
    spacing *= packing.factor
    if packing.strategy == "adaptive":
        spacing *= ADAPTIVE_SPACING_BASE + ADAPTIVE_SPACING_WEIGHT * normalized_value
    return spacing


def order_words(words: Sequence[WordInput]) -> list[WordInput]:
    """Descending by value; stable, so equal values keep input order."""
    return sorted(words, key=lambda w: -w.value)


def _closer(best: _Candidate | None, cand: _Candidate) -> _Candidate:
    if best is None or cand.center_distance < best.center_distance:
        return cand
    return best


def _place_word(
    word: WordInput,
    normalized_value: float,
    measured_width: float,
    measured_height: float,
    placed_boxes: list[BoundingBox],
    width: float,
    height: float,
    margin: float,
    packing: PackingConfig,
    rotation_mode: RotationMode,
    rng: np.random.Generator,
) -> tuple[_Candidate | None, int]:
    """
    Walk the spiral for one word. Returns (best candidate or None, attempts used).
    Stops early once a candidate is near enough to center, or once the
    attempt-ratio cutoff is reached with a candidate in hand.
    """
    max_attempts = packing.max_attempts or DEFAULT_MAX_ATTEMPTS
    reference = min(width, height)
    near_center = packing.early_accept_radius_ratio * reference
    # round first so 0.7 * 100 gives 70, not 71
    cutoff = max(1, math.ceil(round(packing.early_accept_attempt_ratio * max_attempts, 9)))
    spacing = word_spacing(measured_width, measured_height, normalized_value, packing)
    cx, cy = width / 2.0, height / 2.0

    best: _Candidate | None = None
    rejected_overlap = 0
    attempts = 0
    for attempt in range(max_attempts):
        attempts = attempt + 1
        pos = spiral_position(
            attempt, max_attempts, normalized_value, width, height,
            packing, rotation_mode, rng,
        )
        box = rotated_bounding_box(
            pos.x, pos.y, measured_width, measured_height, pos.rotation_deg, padding=spacing,
        )
        ok, reason = validate_candidate(box, placed_boxes, width, height, margin)
        if LAYOUT_DEBUG:
            logger.debug(
                "%r attempt %d at (%.1f, %.1f) rot %.1f: %s",
                word.text, attempt, pos.x, pos.y, pos.rotation_deg, reason or "ok",
            )
        if ok:
            best = _closer(best, _Candidate(
                x=pos.x,
                y=pos.y,
                rotation_deg=pos.rotation_deg,
                box=box,
                center_distance=distance(pos.x, pos.y, cx, cy),
            ))
            if best.center_distance <= near_center:
                break
        elif reason == REJECT_OVERLAP:
            rejected_overlap += 1
        if best is not None and attempts >= cutoff:
            break

    if best is None:
        logger.debug(
            "Dropped %r after %d attempts (%d overlapping, %d out of bounds).",
            word.text, attempts, rejected_overlap, attempts - rejected_overlap,
        )
    return best, attempts


def layout(
    words: Sequence[WordInput],
    width: float,
    height: float,
    font_config: FontSizeConfig | None = None,
    packing: PackingConfig | None = None,
    rotation_mode: RotationMode = "any",
    scale_type: ScaleType = "linear",
    measure_text: MeasureText | None = None,
    rng: np.random.Generator | None = None,
) -> LayoutResult:
    """
    Lay out words in a width x height canvas.
    Returns placed words in processing order, attempts per word text, dropped
    texts and statistics. rng drives rotation choice (default: seeded with SEED);
    measure_text defaults to Pillow metrics for DEFAULT_FONT_FAMILY.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Container must have positive size, got {width}x{height}.")
    if rotation_mode not in ROTATION_MODES:
        raise ValueError(f"Unknown rotation mode: {rotation_mode!r}")
    if scale_type not in SCALE_TYPES:
        raise ValueError(f"Unknown scale type: {scale_type!r}")

    font_config = font_config or FontSizeConfig()
    packing = packing or PackingConfig()
    if measure_text is None:
        from cloudpack.core.text_metrics import make_pillow_measurer
        measure_text = make_pillow_measurer(DEFAULT_FONT_FAMILY)
    if rng is None:
        rng = make_rng(SEED)

    margin = canvas_margin(width, height, packing.factor)
    ordered = order_words(words)
    min_value, max_value = value_range(ordered)
    word_count = len(ordered)

    placed: list[PlacedWord] = []
    placed_boxes: list[BoundingBox] = []
    attempts_by_text: dict[str, int] = {}
    attempt_counts: list[int] = []
    dropped: list[str] = []

    for word in ordered:
        normalized = normalize_value(word.value, min_value, max_value, scale_type)
        font_size = resolve_font_size(width, height, word_count, font_config, normalized)
        measured_width, measured_height = measure_text(word.text, font_size)

        best, attempts = _place_word(
            word, normalized, measured_width, measured_height, placed_boxes,
            width, height, margin, packing, rotation_mode, rng,
        )
        attempts_by_text[word.text] = attempts
        attempt_counts.append(attempts)
        if best is None:
            dropped.append(word.text)
            continue

        placed_boxes.append(best.box)
        placed.append(PlacedWord(
            text=word.text,
            value=word.value,
            color=word.color,
            x=best.x,
            y=best.y,
            font_size=font_size,
            rotation_deg=best.rotation_deg,
            measured_width=measured_width,
            measured_height=measured_height,
            bounding_box=best.box,
            normalized_value=normalized,
        ))

    statistics = compute_statistics(placed, attempt_counts, word_count, width, height)
    logger.info(
        "Layout %gx%g: placed %d/%d words (avg attempts %.1f, coverage %.1f%%).",
        width, height, statistics.placed_count, statistics.total_count,
        statistics.average_attempts, statistics.coverage_pct,
    )
    return LayoutResult(
        placed=placed,
        attempts=attempts_by_text,
        dropped=dropped,
        statistics=statistics,
        width=width,
        height=height,
        margin=margin,
    )
