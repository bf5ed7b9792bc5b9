# cloudpack/core/spiral.py
"""
Spiral candidates: one (position, rotation) per attempt along an expanding
spiral around the canvas center. Radius growth slows for important words and
dense packing; rotation follows the rotation mode. Randomness comes only from
the injected generator.
"""

from __future__ import annotations

import math

import numpy as np

from cloudpack.core.config import (
    BRUTE_FORCE_ANGLES_DEG,
    BRUTE_FORCE_JITTER_DEG,
    DEFAULT_SPIRAL_DENSITY,
    FREE_ANGLES_DEG,
    FREE_JITTER_DEG,
    MIN_SPIRAL_DENSITY,
    ORTHOGONAL_ANGLES_DEG,
    ORTHOGONAL_JITTER_DEG,
    SEED,
    SPIRAL_IMPORTANCE_WEIGHT,
    SPIRAL_INITIAL_RADIUS_RATIO,
    SPIRAL_MAX_RADIUS_RATIO,
    SPIRAL_SATURATION,
)
from cloudpack.core.types import ROTATION_MODES, PackingConfig, RotationMode, SpiralCandidate


def make_rng(seed: int | None = SEED) -> np.random.Generator:
    """Random source for rotation choice; seed=None for non-deterministic."""
    return np.random.default_rng(seed)


def spiral_density(packing: PackingConfig) -> float:
    """Turns per sweep: spiral_density (default 12) scaled by (2 - factor), floored."""
    base = packing.spiral_density if packing.spiral_density is not None else DEFAULT_SPIRAL_DENSITY
    return max(MIN_SPIRAL_DENSITY, base * (2.0 - packing.factor))


def spiral_radius(
    t: float,
    normalized_value: float,
    reference: float,
    factor: float,
) -> float:
    """
    Radius at progress t in [0, 1).
    initial + (max - initial) * (1 - exp(-k * t * importance / factor)),
    importance = 1 - w * normalized_value. Non-decreasing in t, never above max,
    not larger for a larger normalized_value.
    """
    max_radius = reference * SPIRAL_MAX_RADIUS_RATIO
    initial_radius = min(reference * SPIRAL_INITIAL_RADIUS_RATIO * factor, max_radius)
    importance = 1.0 - SPIRAL_IMPORTANCE_WEIGHT * min(max(normalized_value, 0.0), 1.0)
    progress = max(t, 0.0) * importance / factor
    growth = 1.0 - math.exp(-SPIRAL_SATURATION * progress)
    return initial_radius + (max_radius - initial_radius) * growth


def _jitter(rng: np.random.Generator, amplitude: float) -> float:
    return (float(rng.random()) * 2.0 - 1.0) * amplitude


def spiral_rotation(
    attempt: int,
    max_attempts: int,
    rotation_mode: RotationMode,
    brute_force: bool,
    rng: np.random.Generator,
) -> float:
    """Rotation (degrees) for one attempt under the given rotation mode."""
    if rotation_mode not in ROTATION_MODES:
        raise ValueError(f"Unknown rotation mode: {rotation_mode!r}")
    if rotation_mode == "orthogonal":
        base = ORTHOGONAL_ANGLES_DEG[0] if rng.random() < 0.5 else ORTHOGONAL_ANGLES_DEG[1]
        return base + _jitter(rng, ORTHOGONAL_JITTER_DEG)
    if brute_force:
        n = len(BRUTE_FORCE_ANGLES_DEG)
        bucket = int(attempt // (max_attempts / n))
        base = BRUTE_FORCE_ANGLES_DEG[min(bucket, n - 1)]
        return base + _jitter(rng, BRUTE_FORCE_JITTER_DEG)
    base = FREE_ANGLES_DEG[0] if rng.random() < 0.5 else FREE_ANGLES_DEG[1]
    return base + _jitter(rng, FREE_JITTER_DEG)


def spiral_position(
    attempt: int,
    max_attempts: int,
    normalized_value: float,
    width: float,
    height: float,
    packing: PackingConfig,
    rotation_mode: RotationMode,
    rng: np.random.Generator,
) -> SpiralCandidate:
    """Candidate center and rotation for attempt in [0, max_attempts)."""
    t = attempt / max_attempts
    angle = t * 2.0 * math.pi * spiral_density(packing)
    radius = spiral_radius(t, normalized_value, min(width, height), packing.factor)
    rotation = spiral_rotation(attempt, max_attempts, rotation_mode, packing.brute_force, rng)
    return SpiralCandidate(
        x=width / 2.0 + radius * math.cos(angle),
        y=height / 2.0 + radius * math.sin(angle),
        rotation_deg=rotation,
    )
