"""Abstract store interface (port) for word-cloud records held by the CMS."""

from abc import ABC, abstractmethod

from wordclouds.application.schemas.word_cloud import WordCloudCreate, WordCloudUpdate
from wordclouds.domain.entities import WordCloudRecord


class WordCloudStore(ABC):
    """Port for the remote word-cloud collection — implemented in the infrastructure layer."""

    @abstractmethod
    async def list_all(self) -> list[WordCloudRecord]:
        """Every record, in the store's sort order."""
        ...

    @abstractmethod
    async def list_active(self) -> list[WordCloudRecord]:
        """Only records flagged active, in the store's sort order."""
        ...

    @abstractmethod
    async def get(self, record_id: str) -> WordCloudRecord:
        """A single record by id."""
        ...

    @abstractmethod
    async def create(self, data: WordCloudCreate) -> WordCloudRecord:
        """Create a record and return the server's copy."""
        ...

    @abstractmethod
    async def update(self, record_id: str, data: WordCloudUpdate) -> WordCloudRecord:
        """Apply a partial update and return the server's copy."""
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> None:
        """Remove a record."""
        ...
