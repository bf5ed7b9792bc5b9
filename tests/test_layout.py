# tests/test_layout.py
"""
Word cloud layout end-to-end with the font-free measurer and fixed seeds:
no overlap, in-bounds, ordering, early accept, dropping and degenerate inputs.
"""

from __future__ import annotations

import itertools

import pytest

from cloudpack.core.geometry import boxes_intersect
from cloudpack.core.placement import layout, order_words, word_spacing
from cloudpack.core.spiral import make_rng
from cloudpack.core.text_metrics import estimate_text_size
from cloudpack.core.types import FontSizeConfig, PackingConfig, WordCountScaling, WordInput


def _run(words, width=1000, height=1000, **kwargs):
    kwargs.setdefault("measure_text", estimate_text_size)
    kwargs.setdefault("rng", make_rng(42))
    return layout(words, width, height, **kwargs)


def _varied_words(n: int) -> list[WordInput]:
    return [WordInput(text=f"word{i}", value=float((i * 37) % 97 + 1)) for i in range(n)]


def test_two_words_placed_without_overlap() -> None:
    words = [WordInput("A", 100), WordInput("B", 50)]
    result = _run(words, packing=PackingConfig(max_attempts=500))
    assert [p.text for p in result.placed] == ["A", "B"]
    a, b = result.placed
    assert a.font_size >= b.font_size
    assert boxes_intersect(a.bounding_box, b.bounding_box) is False
    assert result.dropped == []


def test_dense_equal_words_drop_some() -> None:
    words = [WordInput(text=f"w{i}", value=1) for i in range(200)]
    result = _run(words, width=300, height=300, packing=PackingConfig(max_attempts=100))
    stats = result.statistics
    assert stats.dropped_count > 0
    assert stats.placed_count + stats.dropped_count == 200
    assert len(result.dropped) == stats.dropped_count
    for text in result.dropped:
        assert result.attempts[text] == 100


def test_equal_values_normalize_to_half() -> None:
    words = [WordInput("alpha", 5), WordInput("beta", 5), WordInput("gamma", 5)]
    result = _run(words, font_config=FontSizeConfig(word_count_scaling=WordCountScaling(enabled=False)))
    assert len(result.placed) == 3
    assert all(p.normalized_value == 0.5 for p in result.placed)
    assert len({p.font_size for p in result.placed}) == 1


def test_equal_values_font_size_follows_word_count_only() -> None:
    font = FontSizeConfig(word_count_scaling=WordCountScaling(threshold=2))
    few = _run([WordInput("a", 3), WordInput("b", 3)], font_config=font)
    many = _run([WordInput(t, 3) for t in "abcdefghij"], font_config=font)
    assert few.placed[0].font_size > many.placed[0].font_size


def test_empty_word_list() -> None:
    result = _run([])
    assert result.placed == []
    assert result.attempts == {}
    assert result.statistics.total_count == 0
    assert result.statistics.placed_count == 0
    assert result.statistics.average_attempts == 0.0
    assert result.statistics.coverage_pct == 0.0


@pytest.mark.parametrize(
    ("rotation_mode", "packing"),
    [
        ("orthogonal", PackingConfig(max_attempts=200)),
        ("any", PackingConfig(max_attempts=200, brute_force=True)),
        ("any", PackingConfig(max_attempts=200, strategy="adaptive", factor=1.4, min_spacing=2)),
    ],
)
def test_no_overlap_and_in_bounds(rotation_mode: str, packing: PackingConfig) -> None:
    result = _run(_varied_words(40), width=600, height=400, packing=packing, rotation_mode=rotation_mode)
    assert result.placed
    for a, b in itertools.combinations(result.placed, 2):
        assert boxes_intersect(a.bounding_box, b.bounding_box) is False
    m = result.margin
    for p in result.placed:
        for pt in p.bounding_box.points:
            assert m <= pt.x <= 600 - m
            assert m <= pt.y <= 400 - m


def test_processing_order_and_monotonic_font_size() -> None:
    result = _run(_varied_words(25), width=800, height=600, scale_type="logarithmic")
    values = [p.value for p in result.placed]
    assert values == sorted(values, reverse=True)
    sizes = [p.font_size for p in result.placed]
    assert all(b <= a for a, b in zip(sizes, sizes[1:]))


def test_order_words_is_stable() -> None:
    words = [WordInput("x", 1), WordInput("y", 3), WordInput("z", 1), WordInput("w", 3)]
    assert [w.text for w in order_words(words)] == ["y", "w", "x", "z"]


def test_single_word_accepted_near_center_on_first_attempt() -> None:
    result = _run([WordInput("hello", 10)])
    assert result.attempts == {"hello": 1}
    word = result.placed[0]
    assert word.x == pytest.approx(575)
    assert word.y == pytest.approx(500)


def test_attempt_ratio_cutoff_keeps_closest_candidate() -> None:
    packing = PackingConfig(
        max_attempts=100,
        early_accept_radius_ratio=0.0,
        early_accept_attempt_ratio=0.5,
    )
    result = _run([WordInput("hi", 1)], packing=packing)
    assert result.attempts["hi"] == 50
    # the spiral only moves outward, so the first valid step is the closest
    assert result.placed[0].x == pytest.approx(575)
    assert result.placed[0].y == pytest.approx(500)


def test_same_seed_same_layout() -> None:
    words = _varied_words(15)
    a = _run(words, width=500, height=500, rng=make_rng(3))
    b = _run(words, width=500, height=500, rng=make_rng(3))
    assert [(p.x, p.y, p.rotation_deg) for p in a.placed] == [(p.x, p.y, p.rotation_deg) for p in b.placed]


def test_word_color_carried_through() -> None:
    result = _run([WordInput("red", 2, color="#ff0000"), WordInput("plain", 1)])
    assert result.placed[0].color == "#ff0000"
    assert result.placed[1].color is None


def test_word_spacing_strategies() -> None:
    uniform = PackingConfig()
    assert word_spacing(100, 20, 1.0, uniform) == pytest.approx(3.0)
    assert word_spacing(100, 20, 1.0, PackingConfig(min_spacing=10)) == pytest.approx(10.0)
    assert word_spacing(100, 20, 1.0, PackingConfig(factor=2.0)) == pytest.approx(6.0)
    adaptive = PackingConfig(strategy="adaptive")
    assert word_spacing(100, 20, 0.0, adaptive) == pytest.approx(1.5)
    assert word_spacing(100, 20, 1.0, adaptive) == pytest.approx(3.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"height": -5},
        {"rotation_mode": "diagonal"},
        {"scale_type": "sqrt"},
    ],
)
def test_invalid_arguments_raise(kwargs: dict) -> None:
    args = {"width": 100, "height": 100}
    args.update(kwargs)
    width = args.pop("width")
    height = args.pop("height")
    with pytest.raises(ValueError):
        _run([WordInput("a", 1)], width=width, height=height, **args)


@pytest.mark.parametrize(
    ("ratio", "expected"),
    [(0.3, 30), (0.5, 50), (0.7, 70), (0.8, 80), (0.9, 90)],
)
def test_attempt_cutoff_applies_when_later_steps_are_rejected(ratio: float, expected: int) -> None:
    # the spiral leaves the margin before most cutoffs, so later steps fail validation
    packing = PackingConfig(
        max_attempts=100,
        early_accept_radius_ratio=0.0,
        early_accept_attempt_ratio=ratio,
    )
    result = _run([WordInput("hello", 1)], packing=packing)
    assert result.attempts["hello"] == expected
    assert result.placed[0].x == pytest.approx(575)
    assert result.placed[0].y == pytest.approx(500)


def test_no_candidate_uses_full_budget_despite_cutoff() -> None:
    packing = PackingConfig(max_attempts=60, early_accept_attempt_ratio=0.5)
    result = _run([WordInput("x" * 40, 1)], width=200, height=200, packing=packing)
    assert result.dropped == ["x" * 40]
    assert result.attempts["x" * 40] == 60


def test_average_attempts_counts_duplicate_texts() -> None:
    duplicates = _run([WordInput("echo", 1)] * 3)
    distinct = _run([WordInput("echo", 1), WordInput("ech0", 1), WordInput("ec0o", 1)])
    assert len(distinct.attempts) == 3
    expected = sum(distinct.attempts.values()) / 3
    assert distinct.statistics.average_attempts == pytest.approx(expected)
    assert duplicates.statistics.average_attempts == pytest.approx(expected)
    assert list(duplicates.attempts) == ["echo"]
