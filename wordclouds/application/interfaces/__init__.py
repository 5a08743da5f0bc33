from .word_cloud_store import WordCloudStore
from .site_config_store import SiteConfigStore
from .auth_provider import AuthProvider
from .token_storage import TokenStorage

__all__ = [
    "WordCloudStore",
    "SiteConfigStore",
    "AuthProvider",
    "TokenStorage",
]
