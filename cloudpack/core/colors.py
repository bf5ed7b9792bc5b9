# cloudpack/core/colors.py
"""
Default word colours: hue steps of COLOR_HUE_STEP_DEG per render index at fixed
saturation and lightness. A word's own colour always wins.
"""

from __future__ import annotations

import colorsys

from cloudpack.core.config import COLOR_HUE_STEP_DEG, COLOR_LIGHTNESS, COLOR_SATURATION


def default_color(index: int) -> str:
    """Hex colour for hsl((index * step) % 360, S, L)."""
    hue = ((index * COLOR_HUE_STEP_DEG) % 360.0) / 360.0
    r, g, b = colorsys.hls_to_rgb(hue, COLOR_LIGHTNESS, COLOR_SATURATION)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))


def resolve_color(color: str | None, index: int) -> str:
    return color if color else default_color(index)
