from .word_cloud import (
    Word,
    WordCloudRecord,
    clamp_weight,
    normalize_color,
    INHERIT_COLOR,
    MIN_WEIGHT,
    MAX_WEIGHT,
    DEFAULT_WEIGHT,
)
from .site_config import SiteConfig, fallback_site_config
from .auth import AuthUser, AuthResult

__all__ = [
    "Word",
    "WordCloudRecord",
    "clamp_weight",
    "normalize_color",
    "INHERIT_COLOR",
    "MIN_WEIGHT",
    "MAX_WEIGHT",
    "DEFAULT_WEIGHT",
    "SiteConfig",
    "fallback_site_config",
    "AuthUser",
    "AuthResult",
]
