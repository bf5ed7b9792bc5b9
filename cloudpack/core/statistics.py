# cloudpack/core/statistics.py
"""
Read-only diagnostics over a finished layout: placed/total, average attempts,
approximate coverage. Nothing here influences placement.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from shapely.ops import unary_union

from cloudpack.core.geometry import box_area, box_to_polygon
from cloudpack.core.types import LayoutResult, LayoutStatistics, PlacedWord


def compute_statistics(
    placed: Sequence[PlacedWord],
    attempts: Mapping[str, int] | Iterable[int],
    total_count: int,
    width: float,
    height: float,
) -> LayoutStatistics:
    """
    average_attempts = sum(attempts) / total_count; coverage_pct = summed
    axis-aligned box area over canvas area, in percent, one decimal.
    attempts is one count per processed word, or a text -> count mapping.
    Zero denominators yield 0.
    """
    placed_count = len(placed)
    counts = attempts.values() if isinstance(attempts, Mapping) else attempts
    average_attempts = sum(counts) / total_count if total_count > 0 else 0.0
    canvas_area = width * height
    covered = sum(box_area(p.bounding_box) for p in placed)
    coverage_pct = round(covered / canvas_area * 100.0, 1) if canvas_area > 0 else 0.0
    return LayoutStatistics(
        placed_count=placed_count,
        total_count=total_count,
        dropped_count=max(0, total_count - placed_count),
        average_attempts=average_attempts,
        coverage_pct=coverage_pct,
    )


def union_coverage_pct(result: LayoutResult) -> float:
    """Exact share of the canvas covered by the union of rotated boxes, percent, one decimal."""
    canvas_area = result.width * result.height
    if not result.placed or canvas_area <= 0:
        return 0.0
    union = unary_union([box_to_polygon(p.bounding_box) for p in result.placed])
    return round(union.area / canvas_area * 100.0, 1)


def summary_line(stats: LayoutStatistics) -> str:
    """Short human-readable summary, e.g. '12/15 words shown'."""
    return (
        f"{stats.placed_count}/{stats.total_count} words shown, "
        f"avg attempts {stats.average_attempts:.1f}, coverage {stats.coverage_pct:.1f}%"
    )
