# cloudpack/core/validate.py
"""
Validate a candidate bounding box: inside the canvas margin and clear of every
placed box. Return (ok, reason) so callers can count rejections.
"""

from __future__ import annotations

from typing import Sequence

from cloudpack.core.config import BASE_MARGIN_PERCENT, MAX_MARGIN_PERCENT, MIN_MARGIN_PERCENT
from cloudpack.core.geometry import box_within, boxes_intersect
from cloudpack.core.types import BoundingBox

REJECT_OUT_OF_BOUNDS = "out_of_bounds"
REJECT_OVERLAP = "overlap"


def margin_percent(factor: float) -> float:
    """Margin fraction of the shorter side; denser packing (larger factor) leaves less."""
    return min(MAX_MARGIN_PERCENT, max(MIN_MARGIN_PERCENT, BASE_MARGIN_PERCENT / factor))


def canvas_margin(width: float, height: float, factor: float) -> float:
    return min(width, height) * margin_percent(factor)


def validate_candidate(
    box: BoundingBox,
    placed_boxes: Sequence[BoundingBox],
    width: float,
    height: float,
    margin: float,
) -> tuple[bool, str | None]:
    """
    True if every corner lies in [margin, dim - margin] on both axes and box
    intersects none of placed_boxes. Reason is None when ok.
    """
    if not box_within(box, margin, margin, width - margin, height - margin):
        return False, REJECT_OUT_OF_BOUNDS
    for other in placed_boxes:
        if boxes_intersect(box, other):
            return False, REJECT_OVERLAP
    return True, None
