"""Strapi-backed implementation of the SiteConfigStore port."""

from wordclouds.application.interfaces import SiteConfigStore
from wordclouds.domain.entities import SiteConfig
from wordclouds.infrastructure.cms.cms_client import CmsClient
from wordclouds.infrastructure.cms.mappers import site_config_from_cms, site_config_to_cms, unwrap

_SINGLE_TYPE = "seiten-config"


class CmsSiteConfigStore(SiteConfigStore):
    """Single type ``/api/seiten-config`` — Strapi returns the object directly under ``data``."""

    def __init__(self, client: CmsClient):
        self._client = client

    async def get(self) -> SiteConfig:
        body = await self._client.get(_SINGLE_TYPE, params={"populate": "*"})
        return site_config_from_cms(unwrap(body))

    async def replace(self, config: SiteConfig) -> SiteConfig:
        body = await self._client.put(_SINGLE_TYPE, {"data": site_config_to_cms(config)})
        return site_config_from_cms(unwrap(body))
