from .word_cloud import (
    WordSchema,
    WordCloudCreate,
    WordCloudUpdate,
    WordResponse,
    WordCloudResponse,
    WordCloudListResponse,
    WordStyleResponse,
)
from .site_config import SiteConfigUpdate, SiteConfigResponse
from .auth import LoginCredentials, AuthUserResponse, SessionResponse
from .validation import validate_input

__all__ = [
    "WordSchema",
    "WordCloudCreate",
    "WordCloudUpdate",
    "WordResponse",
    "WordCloudResponse",
    "WordCloudListResponse",
    "WordStyleResponse",
    "SiteConfigUpdate",
    "SiteConfigResponse",
    "LoginCredentials",
    "AuthUserResponse",
    "SessionResponse",
    "validate_input",
]
