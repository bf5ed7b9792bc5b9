# cloudpack/core/geometry.py
"""
Geometry helpers: padded rotated bounding boxes, segment intersection,
point-in-polygon, box overlap, bounds and area. Pure Python on the hot path;
shapely only for conversion (union metrics, rendering, cross-checks).
"""

from __future__ import annotations

import math

from shapely.geometry import Polygon

from cloudpack.core.config import DEFAULT_BOX_PADDING_RATIO
from cloudpack.core.types import BoundingBox, Point


def _rotate_about(x: float, y: float, cx: float, cy: float, cos_a: float, sin_a: float) -> Point:
    dx = x - cx
    dy = y - cy
    return Point(cx + dx * cos_a - dy * sin_a, cy + dx * sin_a + dy * cos_a)


def rotated_bounding_box(
    cx: float,
    cy: float,
    width: float,
    height: float,
    rotation_deg: float,
    padding: float | None = None,
) -> BoundingBox:
    """
    Rectangle centered at (cx, cy), inflated by 2 * padding on each dimension,
    then rotated by rotation_deg around the center. With padding=None both
    dimensions grow by max(width, height) * DEFAULT_BOX_PADDING_RATIO.
    """
    if padding is None:
        grow = max(width, height) * DEFAULT_BOX_PADDING_RATIO
    else:
        grow = 2.0 * padding
    hw = (width + grow) / 2.0
    hh = (height + grow) / 2.0
    rad = math.radians(rotation_deg)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    corners = [
        (-hw, -hh),
        (hw, -hh),
        (hw, hh),
        (-hw, hh),
    ]
    rotated = tuple(
        Point(cx + x * cos_a - y * sin_a, cy + x * sin_a + y * cos_a)
        for x, y in corners
    )
    return BoundingBox(rotated)  # type: ignore[arg-type]


def rotate_box(box: BoundingBox, rotation_deg: float, cx: float, cy: float) -> BoundingBox:
    """Rotate every corner of box by rotation_deg around (cx, cy)."""
    rad = math.radians(rotation_deg)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    return BoundingBox(
        tuple(_rotate_about(p.x, p.y, cx, cy, cos_a, sin_a) for p in box.points)  # type: ignore[arg-type]
    )


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """
    Parametric test for segments p1-p2 and p3-p4.
    Parallel (and collinear) segments report False; otherwise True iff both
    interpolation parameters lie in [0, 1].
    """
    denominator = (p4.y - p3.y) * (p2.x - p1.x) - (p4.x - p3.x) * (p2.y - p1.y)
    if denominator == 0:
        return False
    ua = ((p4.x - p3.x) * (p1.y - p3.y) - (p4.y - p3.y) * (p1.x - p3.x)) / denominator
    ub = ((p2.x - p1.x) * (p1.y - p3.y) - (p2.y - p1.y) * (p1.x - p3.x)) / denominator
    return 0.0 <= ua <= 1.0 and 0.0 <= ub <= 1.0


def point_in_polygon(point: Point, box: BoundingBox) -> bool:
    """Even-odd ray casting over the box's closed edge list."""
    inside = False
    pts = box.points
    j = len(pts) - 1
    for i in range(len(pts)):
        xi, yi = pts[i].x, pts[i].y
        xj, yj = pts[j].x, pts[j].y
        if (yi > point.y) != (yj > point.y):
            x_cross = (xj - xi) * (point.y - yi) / (yj - yi) + xi
            if point.x < x_cross:
                inside = not inside
        j = i
    return inside


def aabb_disjoint(box1: BoundingBox, box2: BoundingBox) -> bool:
    """True if the axis-aligned bounds of the two boxes do not touch."""
    minx1, miny1, maxx1, maxy1 = box1.bounds()
    minx2, miny2, maxx2, maxy2 = box2.bounds()
    return maxx1 < minx2 or maxx2 < minx1 or maxy1 < miny2 or maxy2 < miny1


def boxes_intersect(box1: BoundingBox, box2: BoundingBox) -> bool:
    """
    True if two convex quadrilaterals overlap.
    Fast reject on axis-aligned bounds, then every edge pair, then containment
    of either box's first vertex (covers full containment without crossings).
    """
    if aabb_disjoint(box1, box2):
        return False
    for p1, p2 in box1.edges():
        for p3, p4 in box2.edges():
            if segments_intersect(p1, p2, p3, p4):
                return True
    return point_in_polygon(box1.points[0], box2) or point_in_polygon(box2.points[0], box1)


def box_within(box: BoundingBox, minx: float, miny: float, maxx: float, maxy: float) -> bool:
    """True if every corner lies in [minx, maxx] x [miny, maxy]."""
    return all(minx <= p.x <= maxx and miny <= p.y <= maxy for p in box.points)


def box_area(box: BoundingBox) -> float:
    """Area of the box's axis-aligned bounds."""
    minx, miny, maxx, maxy = box.bounds()
    return (maxx - minx) * (maxy - miny)


def box_to_polygon(box: BoundingBox) -> Polygon:
    """Shapely polygon for a bounding box."""
    return Polygon(box.as_tuples())


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(ax - bx, ay - by)
