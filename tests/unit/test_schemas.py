"""Unit tests for input validation of words, word clouds and site configuration."""

import pytest

from wordclouds.application.schemas import (
    SiteConfigUpdate,
    WordCloudCreate,
    WordCloudUpdate,
    WordSchema,
    validate_input,
)
from wordclouds.domain.entities import Word
from wordclouds.domain.exceptions import ValidationError


def test_weight_is_clamped_not_rejected():
    assert WordSchema(text="a", weight=0).weight == 1
    assert WordSchema(text="a", weight=99).weight == 10
    assert Word(text="a", weight=11).weight == 10


def test_hex_color_is_normalised():
    assert WordSchema(text="a", color="ff0000").color == "#ff0000"
    assert WordSchema(text="a", color="#ABC").color == "#ABC"
    assert WordSchema(text="a").color == "inherit"


@pytest.mark.parametrize("color", ["red", "#12", "#gggggg", "rgb(0,0,0)"])
def test_malformed_color_is_a_validation_error(color: str):
    with pytest.raises(ValidationError) as exc_info:
        validate_input(WordSchema, {"text": "a", "color": color})
    assert exc_info.value.errors[0]["field"] == "color"


def test_blank_word_text_rejected():
    with pytest.raises(ValidationError):
        validate_input(WordSchema, {"text": "   "})


def test_cloud_colors_must_be_concrete():
    with pytest.raises(ValidationError) as exc_info:
        validate_input(WordCloudCreate, {"title": "X", "text_color": "inherit"})
    assert exc_info.value.errors[0]["field"] == "text_color"


def test_create_to_fields_converts_words():
    data = WordCloudCreate(title="X", words=[WordSchema(text="hi", weight=7)])
    fields = data.to_fields()
    assert fields["title"] == "X"
    assert fields["words"] == [Word(text="hi", weight=7)]


def test_update_only_carries_set_fields():
    data = WordCloudUpdate(title="New")
    assert data.to_fields() == {"title": "New"}


def test_update_allows_clearing_description_but_not_title():
    assert WordCloudUpdate(description=None).to_fields() == {"description": None}
    with pytest.raises(ValidationError) as exc_info:
        validate_input(WordCloudUpdate, {"title": None})
    assert "title" in str(exc_info.value)


def test_validate_input_passes_instances_through():
    data = WordCloudUpdate(title="Same")
    assert validate_input(WordCloudUpdate, data) is data


def test_site_config_requires_hex_colors():
    with pytest.raises(ValidationError):
        validate_input(
            SiteConfigUpdate,
            {"title": "Site", "primary_color": "blue", "background_color": "#fff"},
        )
    config = SiteConfigUpdate(title="Site", primary_color="4f46e5", background_color="#fff")
    assert config.to_entity().primary_color == "#4f46e5"
