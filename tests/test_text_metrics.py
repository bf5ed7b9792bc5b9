# tests/test_text_metrics.py
"""
Text measurement. Pillow may fall back to its default font on machines
without DejaVu/Arial, so assertions stay on properties that hold either way.
"""

from __future__ import annotations

import warnings

import pytest

from cloudpack.core.text_metrics import estimate_text_size, make_pillow_measurer, measure_text_px


def test_estimate_text_size() -> None:
    assert estimate_text_size("hello", 20) == pytest.approx((60.0, 20.0))
    assert estimate_text_size("", 20) == (0.0, 20.0)


def test_pillow_height_is_font_size() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        w, h = measure_text_px("cloud", 32)
    assert h == 32.0
    assert w > 0


def test_pillow_longer_text_is_wider() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        measure = make_pillow_measurer()
        short_w, _ = measure("ab", 40)
        long_w, _ = measure("abababab", 40)
    assert long_w > short_w
