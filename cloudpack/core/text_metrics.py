# cloudpack/core/text_metrics.py
"""
Measure word footprints in canvas px. Width comes from Pillow's text bbox;
height is the font size so every word of one size has the same vertical metric.
estimate_text_size is a font-free measurer with a fixed average advance.
"""

from __future__ import annotations

import warnings
from functools import lru_cache

from cloudpack.core.config import CHAR_WIDTH_RATIO, DEFAULT_FONT_FAMILY
from cloudpack.core.types import MeasureText

_font_warning_emitted: set[str] = set()


@lru_cache(maxsize=256)
def _load_font(font_family: str, size: int):
    """Load PIL ImageFont at an integer size; fallback with warning if font not found."""
    from PIL import ImageFont

    candidates = [
        font_family + ".ttf",
        font_family.replace(" ", "") + ".ttf",
        "DejaVuSans.ttf",
        "arial.ttf",
        "Arial.ttf",
    ]
    for name in candidates:
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    if font_family not in _font_warning_emitted:
        _font_warning_emitted.add(font_family)
        warnings.warn(f"Font not found: {font_family!r}; using default.", UserWarning)
    return ImageFont.load_default(size=size)


def measure_text_px(
    text: str,
    font_size_px: float,
    font_family: str = DEFAULT_FONT_FAMILY,
) -> tuple[float, float]:
    """
    Return (width_px, height_px) with height_px == font_size_px.
    Width is rescaled when Pillow had to round the requested size.
    """
    from PIL import Image, ImageDraw

    font = _load_font(font_family, max(1, int(round(font_size_px))))
    img = Image.new("RGB", (1, 1))
    draw = ImageDraw.Draw(img)
    bbox = draw.textbbox((0, 0), text, font=font)
    w = float(bbox[2] - bbox[0])
    size_used = float(getattr(font, "size", font_size_px) or font_size_px)
    scale = font_size_px / max(1.0, size_used)
    return (max(0.0, w * scale), float(font_size_px))


def make_pillow_measurer(font_family: str = DEFAULT_FONT_FAMILY) -> MeasureText:
    """Bind a font family to measure_text_px for use as a layout measurer."""

    def measure(text: str, font_size_px: float) -> tuple[float, float]:
        return measure_text_px(text, font_size_px, font_family)

    return measure


def estimate_text_size(text: str, font_size_px: float) -> tuple[float, float]:
    """Font-free estimate: len(text) * CHAR_WIDTH_RATIO em wide, one em tall."""
    return (len(text) * CHAR_WIDTH_RATIO * font_size_px, float(font_size_px))
