"""Domain entities for word clouds — pure Python, no wire or framework types."""

import re
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any

MIN_WEIGHT = 1
MAX_WEIGHT = 10
DEFAULT_WEIGHT = 5

INHERIT_COLOR = "inherit"

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def clamp_weight(weight: int) -> int:
    """Force a word weight into the [1, 10] range."""
    return max(MIN_WEIGHT, min(MAX_WEIGHT, int(weight)))


def normalize_color(value: str) -> str:
    """Return a ``#``-prefixed hex colour.

    Raises ValueError for anything that is not a 3, 6 or 8 digit hex value.
    The keyword ``inherit`` is passed through unchanged.
    """
    candidate = value.strip()
    if candidate.lower() == INHERIT_COLOR:
        return INHERIT_COLOR
    if not _HEX_COLOR.match(candidate):
        raise ValueError(f"'{value}' is not a hex colour")
    return candidate if candidate.startswith("#") else f"#{candidate}"


@dataclass
class Word:
    """A single styled label inside a word cloud.

    ``weight`` drives the rendered size and is clamped to [1, 10].
    ``color`` may be ``inherit`` to fall back to the cloud's text colour.
    """

    text: str
    weight: int = DEFAULT_WEIGHT
    color: str = INHERIT_COLOR
    id: str | None = None
    link: str | None = None
    is_external_link: bool = False
    description: str | None = None

    def __post_init__(self) -> None:
        self.weight = clamp_weight(self.weight)


@dataclass
class WordCloudRecord:
    """One word-cloud document as held by the content store.

    ``id`` is the opaque, server-assigned document id.
    """

    id: str
    title: str
    words: list[Word] = field(default_factory=list)
    description: str | None = None
    background_color: str = "#ffffff"
    text_color: str = "#111827"
    hover_color: str = "#4f46e5"
    is_active: bool = True
    sort_order: int = 0
    max_width: int | None = None
    max_height: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    published_at: datetime | None = None

    def merged(self, fields: dict[str, Any]) -> "WordCloudRecord":
        """Return a copy with ``fields`` applied and ``updated_at`` bumped.

        The bumped timestamp never moves backwards, even if the local clock
        is behind the server's.
        """
        now = datetime.now(timezone.utc)
        return replace(self, **fields, updated_at=max(now, self.updated_at))
