from .auth_session import AuthSession
from .cancellation import CancellationToken
from .site_config_service import SiteConfigService
from .word_cloud_collection import RollbackPolicy, WordCloudCollection
from .word_style import (
    WordStyle,
    word_style,
    font_size,
    font_weight,
    resolve_word_color,
    styles_for,
    MIN_FONT_SIZE,
    MAX_FONT_SIZE,
)

__all__ = [
    "AuthSession",
    "CancellationToken",
    "SiteConfigService",
    "RollbackPolicy",
    "WordCloudCollection",
    "WordStyle",
    "word_style",
    "font_size",
    "font_weight",
    "resolve_word_color",
    "styles_for",
    "MIN_FONT_SIZE",
    "MAX_FONT_SIZE",
]
