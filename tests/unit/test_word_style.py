"""Unit tests for the word weight → style mapping."""

import pytest

from wordclouds.application.services.word_style import (
    MAX_FONT_SIZE,
    MIN_FONT_SIZE,
    font_size,
    font_weight,
    opacity,
    resolve_word_color,
    styles_for,
    word_style,
)
from wordclouds.domain.entities import Word, WordCloudRecord


def test_size_bounds_match_weight_bounds():
    assert font_size(1) == MIN_FONT_SIZE == 20
    assert font_size(10) == MAX_FONT_SIZE == 56


def test_size_interpolates_linearly():
    steps = [font_size(w + 1) - font_size(w) for w in range(1, 10)]
    assert set(steps) == {4}


@pytest.mark.parametrize("weight", range(1, 10))
def test_size_and_emphasis_are_monotonic(weight: int):
    assert font_size(weight + 1) >= font_size(weight)
    assert font_weight(weight + 1) >= font_weight(weight)


@pytest.mark.parametrize("weight", range(1, 11))
def test_emphasis_formula(weight: int):
    assert font_weight(weight) == min(900, 400 + 50 * weight)


def test_out_of_range_weights_are_clamped():
    assert font_size(0) == MIN_FONT_SIZE
    assert font_size(-5) == MIN_FONT_SIZE
    assert font_size(42) == MAX_FONT_SIZE
    assert font_weight(42) == 900


def test_custom_base_and_scale():
    style = word_style(3, base=10, scale=2)
    assert style.font_size == 16
    assert style.font_weight == 550


def test_opacity_range():
    assert opacity(1) == 0.64
    assert opacity(10) == 1.0


def test_inherit_uses_cloud_text_color():
    cloud = WordCloudRecord(id="c1", title="T", text_color="#222222")
    assert resolve_word_color(Word(text="a"), cloud) == "#222222"
    assert resolve_word_color(Word(text="b", color="#ff0000"), cloud) == "#ff0000"


def test_styles_for_keeps_word_order():
    cloud = WordCloudRecord(
        id="c1",
        title="T",
        words=[Word(text="small", weight=1), Word(text="big", weight=10)],
    )
    styled = styles_for(cloud)
    assert [w.text for w, _, _ in styled] == ["small", "big"]
    assert styled[0][1].font_size < styled[1][1].font_size
