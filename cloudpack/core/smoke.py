# cloudpack/core/smoke.py
"""
Single entrypoint to verify the layout end-to-end: placement, JSON and rendering
for a built-in sample word list. Does not run on import.
"""

from __future__ import annotations

from pathlib import Path

from cloudpack.core.config import SEED
from cloudpack.core.placement import layout
from cloudpack.core.render import render_layout
from cloudpack.core.render_svg import export_layout_svg
from cloudpack.core.reporting import ensure_report_dir, write_layout_json
from cloudpack.core.spiral import make_rng
from cloudpack.core.types import WordInput

SAMPLE_WORDS: tuple[tuple[str, float], ...] = (
    ("python", 120), ("layout", 95), ("spiral", 80), ("canvas", 64),
    ("words", 60), ("geometry", 52), ("font", 45), ("packing", 40),
    ("rotate", 33), ("center", 30), ("value", 24), ("cloud", 22),
    ("overlap", 18), ("margin", 15), ("density", 12), ("label", 10),
    ("seed", 8), ("box", 6), ("scale", 5), ("ray", 3),
)


def main() -> None:
    """Lay out SAMPLE_WORDS on 800x600 and write reports/smoke/."""
    words = [WordInput(text=t, value=v) for t, v in SAMPLE_WORDS]
    result = layout(words, 800, 600, rotation_mode="orthogonal", rng=make_rng(SEED))

    report_dir = ensure_report_dir(Path.cwd().resolve(), "smoke")
    write_layout_json(report_dir, result)
    render_layout(result, report_dir / "layout.png")
    export_layout_svg(result, report_dir / "layout.svg")


if __name__ == "__main__":
    main()
