# cloudpack/core/runner.py
"""
CLI entrypoint: load words, run the layout, export layout.json, run_metadata.json,
layout.png and layout.svg under <output-dir>/<run-name>/.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cloudpack.core.config import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_MAX_PCT,
    DEFAULT_FONT_MIN_PCT,
    DEFAULT_FONT_SCALE_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_PACKING_FACTOR,
    LOG_LEVEL,
    MIN_DIMENSION,
    REPORTS_DIR,
    SEED,
)
from cloudpack.core.error_codes import (
    INVALID_WORD_FILE,
    RUN_FAILED,
    WORD_LIST_EMPTY,
    WORDS_DROPPED,
    user_message,
)
from cloudpack.core.io import load_words
from cloudpack.core.placement import layout
from cloudpack.core.render import render_layout
from cloudpack.core.render_svg import export_layout_svg
from cloudpack.core.reporting import (
    ensure_report_dir,
    run_metadata_dict,
    write_layout_json,
    write_run_metadata_json,
)
from cloudpack.core.spiral import make_rng
from cloudpack.core.statistics import summary_line
from cloudpack.core.text_metrics import make_pillow_measurer
from cloudpack.core.types import FontSizeConfig, PackingConfig, WordCountScaling

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Word cloud layout.")
    p.add_argument("--words", type=str, required=True, help="Word file (.json or .csv)")
    p.add_argument("--width", type=float, default=800.0, help="Canvas width (px)")
    p.add_argument("--height", type=float, default=600.0, help="Canvas height (px)")
    p.add_argument("--font-min", type=float, default=DEFAULT_FONT_MIN_PCT, dest="font_min", help="Min font size (%% of shorter side)")
    p.add_argument("--font-max", type=float, default=DEFAULT_FONT_MAX_PCT, dest="font_max", help="Max font size (%% of shorter side)")
    p.add_argument("--scale-factor", type=float, default=DEFAULT_FONT_SCALE_FACTOR, dest="scale_factor", help="Global font multiplier")
    p.add_argument("--no-word-count-scaling", action="store_false", dest="word_count_scaling", help="Disable word-count font scaling")
    p.add_argument("--packing-factor", type=float, default=DEFAULT_PACKING_FACTOR, dest="packing_factor", help="Packing density multiplier")
    p.add_argument("--strategy", choices=("uniform", "adaptive"), default="uniform", help="Spacing strategy")
    p.add_argument("--min-spacing", type=float, default=0.0, dest="min_spacing", help="Minimum spacing (px)")
    p.add_argument("--brute-force", action="store_true", dest="brute_force", help="Cycle 0/45/90/-45 rotations")
    p.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS, dest="max_attempts", help="Spiral steps per word")
    p.add_argument("--spiral-density", type=float, default=None, dest="spiral_density", help="Spiral turns per sweep")
    p.add_argument("--rotation", choices=("any", "orthogonal"), default="any", help="Rotation mode")
    p.add_argument("--scale", choices=("linear", "logarithmic"), default="linear", help="Value scale")
    p.add_argument("--tokenize", action="store_true", help="Split texts into tokens and sum values")
    p.add_argument("--seed", type=int, default=SEED, help="Random seed")
    p.add_argument("--font-family", type=str, default=DEFAULT_FONT_FAMILY, dest="font_family", help="Font family")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--debug", action="store_true", help="Draw bounding boxes and margin in PNG/SVG")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    try:
        words = load_words(args.words, repo_root=repo_root, tokenize=args.tokenize)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        print(user_message(INVALID_WORD_FILE), file=sys.stderr)
        return 2
    if not words:
        print(user_message(WORD_LIST_EMPTY), file=sys.stderr)

    width = max(args.width, MIN_DIMENSION)
    height = max(args.height, MIN_DIMENSION)
    try:
        font_config = FontSizeConfig(
            min_pct=args.font_min,
            max_pct=args.font_max,
            scale_factor=args.scale_factor,
            word_count_scaling=WordCountScaling(enabled=args.word_count_scaling),
        )
        packing = PackingConfig(
            factor=args.packing_factor,
            strategy=args.strategy,
            min_spacing=args.min_spacing,
            brute_force=args.brute_force,
            max_attempts=args.max_attempts,
            spiral_density=args.spiral_density,
        )
        result = layout(
            words,
            width,
            height,
            font_config=font_config,
            packing=packing,
            rotation_mode=args.rotation,
            scale_type=args.scale,
            measure_text=make_pillow_measurer(args.font_family),
            rng=make_rng(args.seed),
        )
    except ValueError as e:
        logger.error("%s", e)
        print(user_message(RUN_FAILED), file=sys.stderr)
        return 1

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    layout_path = write_layout_json(report_dir, result)
    meta_path = write_run_metadata_json(
        report_dir,
        run_metadata_dict(
            args.run_name, args.words, width, height, font_config, packing,
            args.rotation, args.scale, args.seed,
        ),
    )
    png_path = report_dir / "layout.png"
    render_layout(result, png_path, font_family=args.font_family, debug=args.debug)
    svg_path = export_layout_svg(result, report_dir / "layout.svg", font_family=args.font_family, debug=args.debug)

    for p in (layout_path, meta_path, png_path, svg_path):
        print(p)
    print(summary_line(result.statistics))
    if result.dropped:
        print(user_message(WORDS_DROPPED))
    return 0


if __name__ == "__main__":
    sys.exit(main())
