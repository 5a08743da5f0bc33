"""Word weight → visual style mapping used by the editor and the public cloud."""

from dataclasses import dataclass

from wordclouds.domain.entities import (
    INHERIT_COLOR,
    MAX_WEIGHT,
    MIN_WEIGHT,
    Word,
    WordCloudRecord,
    clamp_weight,
)

BASE_FONT_SIZE = 16
FONT_SIZE_SCALE = 4

MIN_FONT_SIZE = BASE_FONT_SIZE + MIN_WEIGHT * FONT_SIZE_SCALE   # 20px
MAX_FONT_SIZE = BASE_FONT_SIZE + MAX_WEIGHT * FONT_SIZE_SCALE   # 56px

_MAX_FONT_WEIGHT = 900


@dataclass(frozen=True)
class WordStyle:
    font_size: int      # px
    font_weight: int    # CSS numeric weight
    opacity: float


def font_size(weight: int, *, base: int = BASE_FONT_SIZE, scale: int = FONT_SIZE_SCALE) -> int:
    """Linear size in px: ``base + weight * scale`` with weight clamped to [1, 10]."""
    return base + clamp_weight(weight) * scale


def font_weight(weight: int) -> int:
    """Emphasis grows 50 per step from 400 and never exceeds 900."""
    return min(_MAX_FONT_WEIGHT, 400 + clamp_weight(weight) * 50)


def opacity(weight: int) -> float:
    """Lighter words fade slightly: 0.64 at weight 1 up to 1.0 at weight 10."""
    return round(0.6 + clamp_weight(weight) / MAX_WEIGHT * 0.4, 2)


def word_style(weight: int, *, base: int = BASE_FONT_SIZE, scale: int = FONT_SIZE_SCALE) -> WordStyle:
    return WordStyle(
        font_size=font_size(weight, base=base, scale=scale),
        font_weight=font_weight(weight),
        opacity=opacity(weight),
    )


def resolve_word_color(word: Word, cloud: WordCloudRecord) -> str:
    """The word's own colour, or the cloud's text colour when it inherits."""
    if not word.color or word.color == INHERIT_COLOR:
        return cloud.text_color
    return word.color


def styles_for(
    cloud: WordCloudRecord,
    *,
    base: int = BASE_FONT_SIZE,
    scale: int = FONT_SIZE_SCALE,
) -> list[tuple[Word, WordStyle, str]]:
    """Style and effective colour for every word of ``cloud``, in order."""
    return [
        (word, word_style(word.weight, base=base, scale=scale), resolve_word_color(word, cloud))
        for word in cloud.words
    ]
