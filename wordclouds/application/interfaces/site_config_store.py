"""Abstract store interface (port) for the singleton site configuration."""

from abc import ABC, abstractmethod

from wordclouds.domain.entities import SiteConfig


class SiteConfigStore(ABC):
    """Get/replace access to the site configuration single type."""

    @abstractmethod
    async def get(self) -> SiteConfig:
        ...

    @abstractmethod
    async def replace(self, config: SiteConfig) -> SiteConfig:
        ...
