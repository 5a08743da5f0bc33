"""Strapi-backed implementation of the WordCloudStore port."""

from collections.abc import Mapping

from wordclouds.application.interfaces import WordCloudStore
from wordclouds.application.schemas import WordCloudCreate, WordCloudUpdate
from wordclouds.domain.entities import WordCloudRecord
from wordclouds.infrastructure.cms.cms_client import CmsClient
from wordclouds.infrastructure.cms.mappers import unwrap, word_cloud_from_cms, word_cloud_to_cms

_COLLECTION = "word-clouds"
_PAGE_SIZE = 100
_LIST_PARAMS = {"populate": "*", "sort": "sortierung:asc"}
_ACTIVE_FILTER = {"filters[istAktiv][$eq]": "true"}


def _page_count(body: dict) -> int:
    pagination = (body.get("meta") or {}).get("pagination") or {}
    return int(pagination.get("pageCount") or 1)


class CmsWordCloudStore(WordCloudStore):
    """Word clouds via ``/api/word-clouds``, addressed by Strapi documentId."""

    def __init__(self, client: CmsClient):
        self._client = client

    async def list_all(self) -> list[WordCloudRecord]:
        return await self._list(_LIST_PARAMS)

    async def list_active(self) -> list[WordCloudRecord]:
        return await self._list({**_LIST_PARAMS, **_ACTIVE_FILTER})

    async def get(self, record_id: str) -> WordCloudRecord:
        body = await self._client.get(f"{_COLLECTION}/{record_id}", params={"populate": "*"})
        return word_cloud_from_cms(unwrap(body))

    async def create(self, data: WordCloudCreate) -> WordCloudRecord:
        body = await self._client.post(_COLLECTION, {"data": word_cloud_to_cms(data)})
        return word_cloud_from_cms(unwrap(body))

    async def update(self, record_id: str, data: WordCloudUpdate) -> WordCloudRecord:
        body = await self._client.put(
            f"{_COLLECTION}/{record_id}", {"data": word_cloud_to_cms(data)}
        )
        return word_cloud_from_cms(unwrap(body))

    async def delete(self, record_id: str) -> None:
        await self._client.delete(f"{_COLLECTION}/{record_id}")

    async def _list(self, params: Mapping[str, str]) -> list[WordCloudRecord]:
        """Walk every page Strapi reports in ``meta.pagination.pageCount``."""
        records: list[WordCloudRecord] = []
        page = 1
        while True:
            body = await self._client.get(
                _COLLECTION,
                params={
                    **params,
                    "pagination[page]": str(page),
                    "pagination[pageSize]": str(_PAGE_SIZE),
                },
            )
            records.extend(word_cloud_from_cms(item) for item in unwrap(body) or [])
            if page >= _page_count(body):
                return records
            page += 1
