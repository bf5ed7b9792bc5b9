# tests/test_spiral.py
"""Spiral candidates: radius behaviour, positions, rotation policies, determinism."""

from __future__ import annotations

import math

import pytest

from cloudpack.core.config import SPIRAL_INITIAL_RADIUS_RATIO, SPIRAL_MAX_RADIUS_RATIO
from cloudpack.core.spiral import (
    make_rng,
    spiral_density,
    spiral_position,
    spiral_radius,
    spiral_rotation,
)
from cloudpack.core.types import PackingConfig


def _angle_near(angle: float, base: float, tol: float) -> bool:
    return abs(angle - base) <= tol + 1e-9


def test_radius_non_decreasing_and_bounded() -> None:
    for factor in (0.5, 1.0, 1.8):
        for value in (0.0, 0.5, 1.0):
            radii = [spiral_radius(a / 300, value, 600, factor) for a in range(300)]
            assert all(b >= a for a, b in zip(radii, radii[1:]))
            assert max(radii) <= 600 * SPIRAL_MAX_RADIUS_RATIO + 1e-9


def test_radius_smaller_for_important_words() -> None:
    for a in range(0, 300, 7):
        t = a / 300
        assert spiral_radius(t, 1.0, 600, 1.0) <= spiral_radius(t, 0.2, 600, 1.0)


def test_radius_grows_slower_when_packed_tighter() -> None:
    assert spiral_radius(0.5, 0.5, 600, 1.5) < spiral_radius(0.5, 0.5, 600, 1.0)


def test_initial_radius_scales_with_factor_and_is_capped() -> None:
    assert spiral_radius(0.0, 0.5, 1000, 1.0) == pytest.approx(1000 * SPIRAL_INITIAL_RADIUS_RATIO)
    assert spiral_radius(0.0, 0.5, 1000, 100.0) == pytest.approx(1000 * SPIRAL_MAX_RADIUS_RATIO)


def test_density_from_factor() -> None:
    assert spiral_density(PackingConfig()) == pytest.approx(12)
    assert spiral_density(PackingConfig(factor=1.5)) == pytest.approx(6)
    assert spiral_density(PackingConfig(factor=2.5)) == pytest.approx(1.0)
    assert spiral_density(PackingConfig(spiral_density=20)) == pytest.approx(20)


def test_first_position_lies_on_positive_x_axis() -> None:
    pos = spiral_position(0, 100, 0.5, 1000, 800, PackingConfig(), "orthogonal", make_rng(1))
    assert pos.x == pytest.approx(500 + 800 * SPIRAL_INITIAL_RADIUS_RATIO)
    assert pos.y == pytest.approx(400)


def test_position_distance_matches_radius() -> None:
    packing = PackingConfig()
    rng = make_rng(5)
    for attempt in range(0, 200, 13):
        pos = spiral_position(attempt, 200, 0.3, 640, 480, packing, "any", rng)
        expected = spiral_radius(attempt / 200, 0.3, 480, packing.factor)
        assert math.hypot(pos.x - 320, pos.y - 240) == pytest.approx(expected)


def test_orthogonal_rotation() -> None:
    rng = make_rng(11)
    seen = set()
    for attempt in range(200):
        r = spiral_rotation(attempt, 200, "orthogonal", False, rng)
        assert _angle_near(r, 0.0, 1.0) or _angle_near(r, -90.0, 1.0)
        seen.add(round(r / 90.0))
    assert seen == {0, -1}


def test_free_rotation() -> None:
    rng = make_rng(12)
    seen = set()
    for attempt in range(200):
        r = spiral_rotation(attempt, 200, "any", False, rng)
        assert _angle_near(r, 0.0, 2.5) or _angle_near(r, 90.0, 2.5)
        seen.add(round(r / 90.0))
    assert seen == {0, 1}


def test_brute_force_rotation_cycles_by_attempt_bucket() -> None:
    rng = make_rng(13)
    expected = {0: 0.0, 30: 45.0, 60: 90.0, 99: -45.0}
    for attempt, base in expected.items():
        r = spiral_rotation(attempt, 100, "any", True, rng)
        assert _angle_near(r, base, 5.0)


def test_brute_force_ignored_in_orthogonal_mode() -> None:
    rng = make_rng(14)
    r = spiral_rotation(30, 100, "orthogonal", True, rng)
    assert _angle_near(r, 0.0, 1.0) or _angle_near(r, -90.0, 1.0)


def test_seeded_sequences_repeat() -> None:
    packing = PackingConfig()
    rng_a = make_rng(9)
    rng_b = make_rng(9)
    a = [spiral_position(i, 50, 0.5, 500, 500, packing, "any", rng_a) for i in range(50)]
    b = [spiral_position(i, 50, 0.5, 500, 500, packing, "any", rng_b) for i in range(50)]
    assert a == b


def test_unknown_rotation_mode_raises() -> None:
    with pytest.raises(ValueError):
        spiral_rotation(0, 10, "diagonal", False, make_rng(0))  # type: ignore[arg-type]
