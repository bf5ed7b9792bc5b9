# cloudpack/core/reporting.py
"""
Create reports/<run_name>/ and write layout.json and run_metadata.json.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from cloudpack.core.colors import resolve_color
from cloudpack.core.config import (
    ADAPTIVE_SPACING_BASE,
    ADAPTIVE_SPACING_WEIGHT,
    BASE_MARGIN_PERCENT,
    DEFAULT_FONT_FAMILY,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_SPIRAL_DENSITY,
    REPORTS_DIR,
    SEED,
    SPACING_RATIO,
    SPIRAL_SATURATION,
)
from cloudpack.core.statistics import union_coverage_pct
from cloudpack.core.types import FontSizeConfig, LayoutResult, PackingConfig, PlacedWord

SCHEMA_VERSION = "1.0"


def placed_word_to_dict(word: PlacedWord, index: int) -> dict:
    return {
        "text": word.text,
        "value": word.value,
        "color": resolve_color(word.color, index),
        "x": word.x,
        "y": word.y,
        "font_size": word.font_size,
        "rotation_deg": word.rotation_deg,
        "measured_width": word.measured_width,
        "measured_height": word.measured_height,
        "normalized_value": word.normalized_value,
        "bbox": [{"x": float(p.x), "y": float(p.y)} for p in word.bounding_box.points],
    }


def layout_to_dict(result: LayoutResult) -> dict:
    """Exact structure for layout.json."""
    stats = result.statistics
    return {
        "schema_version": SCHEMA_VERSION,
        "canvas": {
            "width": result.width,
            "height": result.height,
            "margin": result.margin,
        },
        "words": [placed_word_to_dict(w, i) for i, w in enumerate(result.placed)],
        "dropped": list(result.dropped),
        "attempts": dict(result.attempts),
        "statistics": {
            "placed_count": stats.placed_count,
            "total_count": stats.total_count,
            "dropped_count": stats.dropped_count,
            "average_attempts": stats.average_attempts,
            "coverage_pct": stats.coverage_pct,
            "union_coverage_pct": union_coverage_pct(result),
        },
    }


def run_metadata_dict(
    run_name: str,
    words_path: str,
    width: float,
    height: float,
    font_config: FontSizeConfig,
    packing: PackingConfig,
    rotation_mode: str,
    scale_type: str,
    seed: int | None,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "words_path": words_path,
        "width": width,
        "height": height,
        "rotation_mode": rotation_mode,
        "scale_type": scale_type,
        "seed": seed,
        "font_config": asdict(font_config),
        "packing": asdict(packing),
        "config": {
            "DEFAULT_MAX_ATTEMPTS": DEFAULT_MAX_ATTEMPTS,
            "DEFAULT_SPIRAL_DENSITY": DEFAULT_SPIRAL_DENSITY,
            "SPIRAL_SATURATION": SPIRAL_SATURATION,
            "SPACING_RATIO": SPACING_RATIO,
            "ADAPTIVE_SPACING_BASE": ADAPTIVE_SPACING_BASE,
            "ADAPTIVE_SPACING_WEIGHT": ADAPTIVE_SPACING_WEIGHT,
            "BASE_MARGIN_PERCENT": BASE_MARGIN_PERCENT,
            "DEFAULT_FONT_FAMILY": DEFAULT_FONT_FAMILY,
            "SEED": SEED,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_layout_json(report_dir: Path, result: LayoutResult) -> Path:
    """Write layout.json to report_dir. Returns path to file."""
    path = report_dir / "layout.json"
    path.write_text(json.dumps(layout_to_dict(result), indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(report_dir: Path, metadata: dict) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    path.write_text(json.dumps(metadata, indent=2), encoding="utf-8")
    return path
