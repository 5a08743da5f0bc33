"""Application service for the singleton site configuration."""

import logging
from collections.abc import Mapping
from typing import Any

from wordclouds.application.interfaces import SiteConfigStore
from wordclouds.application.schemas import SiteConfigUpdate, validate_input
from wordclouds.domain.entities import SiteConfig, fallback_site_config

logger = logging.getLogger(__name__)


class SiteConfigService:
    """Reads the site configuration with a fallback and replaces it on request."""

    def __init__(self, store: SiteConfigStore):
        self._store = store

    async def get(self) -> SiteConfig:
        """The stored configuration, or the built-in fallback if it cannot be loaded."""
        try:
            return await self._store.get()
        except Exception as exc:
            logger.warning("Could not load site configuration, using fallback: %s", exc)
            return fallback_site_config()

    async def replace(self, data: SiteConfigUpdate | Mapping[str, Any]) -> SiteConfig:
        config = validate_input(SiteConfigUpdate, data)
        return await self._store.replace(config.to_entity())
