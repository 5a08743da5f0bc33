"""Strapi CMS infrastructure package."""

from .cms_client import CmsClient
from .word_cloud_store import CmsWordCloudStore
from .site_config_store import CmsSiteConfigStore
from .auth_provider import CmsAuthProvider

__all__ = ["CmsClient", "CmsWordCloudStore", "CmsSiteConfigStore", "CmsAuthProvider"]
