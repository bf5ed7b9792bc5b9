# cloudpack/core/render_svg.py
"""
Export a finished layout as a self-contained SVG: one <text> per placed word,
translated to its center and rotated, optionally with the padded boxes and
margin frame drawn on top.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from cloudpack.core.colors import resolve_color
from cloudpack.core.config import DEFAULT_FONT_FAMILY
from cloudpack.core.types import LayoutResult

SVG_NS = "http://www.w3.org/2000/svg"


def layout_to_svg(
    result: LayoutResult,
    font_family: str = DEFAULT_FONT_FAMILY,
    debug: bool = False,
) -> ET.Element:
    """Build the SVG element tree for a layout."""
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": f"{result.width:g}",
            "height": f"{result.height:g}",
            "viewBox": f"0 0 {result.width:g} {result.height:g}",
            "preserveAspectRatio": "xMidYMid meet",
        },
    )
    words_g = ET.SubElement(root, "g", {"id": "words"})
    for index, word in enumerate(result.placed):
        g = ET.SubElement(
            words_g,
            "g",
            {"transform": f"translate({word.x:.2f},{word.y:.2f}) rotate({word.rotation_deg:.2f})"},
        )
        text = ET.SubElement(
            g,
            "text",
            {
                "font-family": font_family,
                "font-size": f"{word.font_size:.2f}",
                "fill": resolve_color(word.color, index),
                "text-anchor": "middle",
                "dominant-baseline": "middle",
            },
        )
        text.text = word.text
    if debug:
        _add_debug_overlay(root, result)
    return root


def _add_debug_overlay(root: ET.Element, result: LayoutResult) -> None:
    """Margin frame and padded bounding boxes, in canvas coordinates like the PNG overlay."""
    debug_g = ET.SubElement(root, "g", {"id": "debug", "fill": "none", "stroke-width": "1"})
    m = result.margin
    ET.SubElement(
        debug_g,
        "rect",
        {
            "x": f"{m:.2f}",
            "y": f"{m:.2f}",
            "width": f"{result.width - 2 * m:.2f}",
            "height": f"{result.height - 2 * m:.2f}",
            "stroke": "gray",
            "stroke-dasharray": "4 4",
        },
    )
    for word in result.placed:
        points = " ".join(f"{x:.2f},{y:.2f}" for x, y in word.bounding_box.as_tuples())
        ET.SubElement(debug_g, "polygon", {"points": points, "stroke": "red"})


def export_layout_svg(
    result: LayoutResult,
    out_path: str | Path,
    font_family: str = DEFAULT_FONT_FAMILY,
    debug: bool = False,
) -> Path:
    """Write the layout SVG to out_path and return the path."""
    root = layout_to_svg(result, font_family=font_family, debug=debug)
    path = Path(out_path)
    path.write_text(ET.tostring(root, encoding="unicode"), encoding="utf-8")
    return path
