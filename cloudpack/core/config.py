# cloudpack/core/config.py
"""
Central configuration for word cloud placement.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Container -----
MIN_DIMENSION: float = 100.0
"""Smallest container side the CLI will lay out into; smaller sizes are raised to this."""

# ----- Value normalization -----
LOG_EPSILON: float = 1e-6
"""Values are clamped to this before taking log in logarithmic scale."""

DEGENERATE_NORMALIZED_VALUE: float = 0.5
"""Normalized value used when every word has the same value."""

# ----- Font size -----
MIN_FONT_SIZE_PX: float = 8.0
"""Hard floor for legibility."""

MAX_FONT_SIZE_RATIO: float = 0.8
"""Hard ceiling as a fraction of the shorter container side."""

DEFAULT_FONT_MIN_PCT: float = 3.0
DEFAULT_FONT_MAX_PCT: float = 15.0
DEFAULT_FONT_SCALE_FACTOR: float = 1.0

DEFAULT_WORD_COUNT_MIN_SCALE: float = 0.5
DEFAULT_WORD_COUNT_MAX_SCALE: float = 2.0
DEFAULT_WORD_COUNT_THRESHOLD: int = 50
"""Word count above which word-count scaling starts shrinking fonts."""

# ----- Bounding boxes -----
DEFAULT_BOX_PADDING_RATIO: float = 0.15
"""Padding added to each dimension (fraction of max(width, height)) when no spacing is given."""

# ----- Packing -----
DEFAULT_PACKING_FACTOR: float = 1.0
DEFAULT_MAX_ATTEMPTS: int = 400
"""Spiral steps tried per word when PackingConfig.max_attempts is unset."""

SPACING_RATIO: float = 0.15
"""Spacing floor as a fraction of min(measured width, measured height)."""

ADAPTIVE_SPACING_BASE: float = 0.5
ADAPTIVE_SPACING_WEIGHT: float = 0.5
"""Adaptive spacing multiplier: base + weight * normalized_value."""

BASE_MARGIN_PERCENT: float = 0.05
"""Canvas margin (fraction of the shorter side) at packing factor 1; divided by factor."""

MIN_MARGIN_PERCENT: float = 0.01
MAX_MARGIN_PERCENT: float = 0.10

EARLY_ACCEPT_RADIUS_RATIO: float = 0.10
"""Stop searching once a valid candidate lies this close to center (fraction of shorter side)."""

EARLY_ACCEPT_ATTEMPT_RATIO: float = 0.80
"""Stop searching once this share of max_attempts is used and a valid candidate exists."""

# ----- Spiral -----
DEFAULT_SPIRAL_DENSITY: float = 12.0
"""Full turns over one attempt sweep at packing factor 1."""

MIN_SPIRAL_DENSITY: float = 1.0

SPIRAL_INITIAL_RADIUS_RATIO: float = 0.075
"""Starting radius as a fraction of the shorter side, scaled by packing factor."""

SPIRAL_MAX_RADIUS_RATIO: float = 0.45
"""Radius ceiling as a fraction of the shorter side."""

SPIRAL_IMPORTANCE_WEIGHT: float = 0.5
"""How strongly normalized value slows radius growth (0 = not at all)."""

SPIRAL_SATURATION: float = 3.0
"""Exponent scale of the saturating growth curve 1 - exp(-k * progress)."""

# ----- Rotation -----
ORTHOGONAL_ANGLES_DEG: tuple[float, float] = (0.0, -90.0)
ORTHOGONAL_JITTER_DEG: float = 1.0

BRUTE_FORCE_ANGLES_DEG: tuple[float, ...] = (0.0, 45.0, 90.0, -45.0)
BRUTE_FORCE_JITTER_DEG: float = 5.0

FREE_ANGLES_DEG: tuple[float, float] = (0.0, 90.0)
FREE_JITTER_DEG: float = 2.5

# ----- Determinism -----
SEED: int | None = 42
"""Random seed for rotation choice; None for non-deterministic."""

# ----- Text measurement -----
DEFAULT_FONT_FAMILY: str = "DejaVu Sans"

CHAR_WIDTH_RATIO: float = 0.6
"""Average glyph advance (em) used by the font-free size estimator."""

# ----- Rendering -----
RENDER_DPI: int = 100
COLOR_HUE_STEP_DEG: float = 30.0
COLOR_SATURATION: float = 0.70
COLOR_LIGHTNESS: float = 0.50

# ----- Logging / debug flags -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Root log level for the CLI. Set env LOG_LEVEL=DEBUG for development."""

LAYOUT_DEBUG: bool = os.environ.get("LAYOUT_DEBUG", "").lower() in ("1", "true", "yes")
"""Log every spiral attempt. Set env LAYOUT_DEBUG=1 to enable."""
