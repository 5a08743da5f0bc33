"""Pydantic DTOs for word clouds and their words."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from wordclouds.domain.entities import (
    DEFAULT_WEIGHT,
    INHERIT_COLOR,
    Word,
    clamp_weight,
    normalize_color,
)


# ── Words ────────────────────────────────────────────────────────────


class WordSchema(BaseModel):
    """A word as entered in the editor."""

    text: str = Field(..., min_length=1, max_length=100, examples=["Achtsamkeit"])
    weight: int = Field(DEFAULT_WEIGHT, description="1–10, out-of-range values are clamped")
    color: str = Field(INHERIT_COLOR, examples=["#4f46e5", "inherit"])
    id: str | None = None
    link: str | None = Field(None, max_length=500)
    is_external_link: bool = False
    description: str | None = None

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be blank")
        return value

    @field_validator("weight")
    @classmethod
    def _clamp_weight(cls, value: int) -> int:
        return clamp_weight(value)

    @field_validator("color")
    @classmethod
    def _hex_color(cls, value: str) -> str:
        return normalize_color(value)

    def to_entity(self) -> Word:
        return Word(
            text=self.text,
            weight=self.weight,
            color=self.color,
            id=self.id,
            link=self.link,
            is_external_link=self.is_external_link,
            description=self.description,
        )


def _hex(value: str | None) -> str | None:
    if value is None:
        return None
    color = normalize_color(value)
    if color == INHERIT_COLOR:
        raise ValueError("a concrete hex colour is required")
    return color


# ── Word clouds ──────────────────────────────────────────────────────


class WordCloudCreate(BaseModel):
    """Schema for creating a new word cloud."""

    title: str = Field(..., min_length=1, max_length=200, examples=["Themen"])
    description: str | None = None
    words: list[WordSchema] = Field(default_factory=list)
    background_color: str = "#ffffff"
    text_color: str = "#111827"
    hover_color: str = "#4f46e5"
    is_active: bool = True
    sort_order: int = 0
    max_width: int | None = Field(None, ge=1)
    max_height: int | None = Field(None, ge=1)

    @field_validator("background_color", "text_color", "hover_color")
    @classmethod
    def _hex_colors(cls, value: str | None) -> str | None:
        return _hex(value)

    def to_fields(self) -> dict[str, Any]:
        """Domain-typed field values, words converted to entities."""
        fields = self.model_dump(exclude={"words"})
        fields["words"] = [w.to_entity() for w in self.words]
        return fields


_NON_NULLABLE = frozenset({
    "title",
    "words",
    "background_color",
    "text_color",
    "hover_color",
    "is_active",
    "sort_order",
})


class WordCloudUpdate(BaseModel):
    """Schema for a partial update — only the fields that were set are applied."""

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    words: list[WordSchema] | None = None
    background_color: str | None = None
    text_color: str | None = None
    hover_color: str | None = None
    is_active: bool | None = None
    sort_order: int | None = None
    max_width: int | None = Field(None, ge=1)
    max_height: int | None = Field(None, ge=1)

    @field_validator("background_color", "text_color", "hover_color")
    @classmethod
    def _hex_colors(cls, value: str | None) -> str | None:
        return _hex(value)

    @model_validator(mode="after")
    def _no_explicit_nulls(self) -> "WordCloudUpdate":
        nulled = sorted(
            name for name in self.model_fields_set
            if name in _NON_NULLABLE and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"fields cannot be null: {', '.join(nulled)}")
        return self

    def to_fields(self) -> dict[str, Any]:
        """Only the explicitly-set fields, words converted to entities."""
        fields = self.model_dump(exclude_unset=True, exclude={"words"})
        if "words" in self.model_fields_set and self.words is not None:
            fields["words"] = [w.to_entity() for w in self.words]
        return fields


# ── Responses ────────────────────────────────────────────────────────


class WordResponse(BaseModel):
    id: str | None
    text: str
    weight: int
    color: str
    link: str | None
    is_external_link: bool
    description: str | None

    model_config = {"from_attributes": True}


class WordCloudResponse(BaseModel):
    """Schema returned to the admin client."""

    id: str
    title: str
    description: str | None
    words: list[WordResponse]
    background_color: str
    text_color: str
    hover_color: str
    is_active: bool
    sort_order: int
    max_width: int | None
    max_height: int | None
    created_at: datetime
    updated_at: datetime
    published_at: datetime | None

    model_config = {"from_attributes": True}


class WordStyleResponse(BaseModel):
    """Rendered style of one word in the editor preview."""

    text: str
    font_size: int
    font_weight: int
    opacity: float
    color: str


class WordCloudListResponse(BaseModel):
    """The cached collection together with its loading and error state."""

    items: list[WordCloudResponse]
    is_loading: bool
    last_error: str | None
