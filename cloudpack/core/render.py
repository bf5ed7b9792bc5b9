# cloudpack/core/render.py
"""
Matplotlib PNG rendering of a finished layout, with an optional debug overlay
(padded bounding boxes and the canvas margin). Canvas units are pixels, y down.
"""

from __future__ import annotations

import warnings
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from cloudpack.core.colors import resolve_color
from cloudpack.core.config import DEFAULT_FONT_FAMILY, RENDER_DPI
from cloudpack.core.types import LayoutResult


def px_to_pt(size_px: float, dpi: int = RENDER_DPI) -> float:
    """Matplotlib font sizes are points; canvas sizes are pixels at dpi."""
    return size_px * 72.0 / dpi


def _new_fig(width_px: float, height_px: float, dpi: int) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(
        figsize=(width_px / dpi, height_px / dpi),
        dpi=dpi,
        constrained_layout=False,
    )
    ax = fig.add_axes([0, 0, 1, 1])  # full-canvas axes
    ax.set_xlim(0, width_px)
    ax.set_ylim(height_px, 0)  # y down, like the layout canvas
    ax.axis("off")
    return fig, ax


def _draw_debug(ax: plt.Axes, result: LayoutResult) -> None:
    m = result.margin
    ax.add_patch(Rectangle(
        (m, m), result.width - 2 * m, result.height - 2 * m,
        fill=False, edgecolor="gray", linestyle="--", linewidth=1,
    ))
    for word in result.placed:
        pts = word.bounding_box.as_tuples()
        xy = np.array(pts + [pts[0]])
        ax.plot(xy[:, 0], xy[:, 1], color="red", linewidth=1)


def render_layout(
    result: LayoutResult,
    output_path: str | Path,
    font_family: str = DEFAULT_FONT_FAMILY,
    debug: bool = False,
    dpi: int = RENDER_DPI,
    scale: int = 1,
) -> None:
    """Render placed words to PNG. scale multiplies output resolution (1x, 2x, 4x)."""
    fig, ax = _new_fig(result.width, result.height, dpi)
    for index, word in enumerate(result.placed):
        ax.text(
            word.x, word.y, word.text,
            fontsize=px_to_pt(word.font_size, dpi),
            fontfamily=font_family,
            ha="center", va="center",
            rotation=-word.rotation_deg,  # canvas rotation is clockwise with y down
            rotation_mode="anchor",
            color=resolve_color(word.color, index),
            zorder=5,
        )
    if debug:
        _draw_debug(ax, result)
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*findfont.*", category=UserWarning)
        fig.savefig(output_path, dpi=dpi * scale, facecolor="white")
    plt.close(fig)
