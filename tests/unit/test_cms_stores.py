"""Unit tests for the Strapi-backed stores and their attribute mapping."""

import json

import httpx
import pytest

from wordclouds.application.schemas import WordCloudCreate, WordCloudUpdate, WordSchema
from wordclouds.domain.entities import SiteConfig
from wordclouds.domain.exceptions import CmsError
from wordclouds.infrastructure.cms import (
    CmsAuthProvider,
    CmsClient,
    CmsSiteConfigStore,
    CmsWordCloudStore,
)
from wordclouds.infrastructure.cms.mappers import word_cloud_from_cms, word_cloud_to_cms


# ── Helpers ──


def _cms_cloud(document_id: str = "doc-1", **overrides) -> dict:
    data = {
        "id": 12,
        "documentId": document_id,
        "titel": "Themen",
        "beschreibung": "Worüber wir sprechen",
        "woerter": [
            {"id": 3, "text": "Ruhe", "gewichtung": 8, "farbe": "#ff0000", "link": "/ruhe", "istExternerLink": False},
            {"id": 4, "text": "Mut", "gewichtung": 2, "farbe": "inherit"},
        ],
        "hintergrundfarbe": "#ffffff",
        "textfarbe": "#111827",
        "hoverfarbe": "#4f46e5",
        "istAktiv": True,
        "sortierung": 1,
        "maxBreite": 800,
        "maxHoehe": None,
        "createdAt": "2024-05-01T10:00:00.000Z",
        "updatedAt": "2024-05-02T10:00:00.000Z",
        "publishedAt": "2024-05-02T10:00:00.000Z",
    }
    data.update(overrides)
    return data


class Recorder:
    """MockTransport handler that records requests and replies from a queue."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)

    def body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


def _client(recorder: Recorder) -> CmsClient:
    return CmsClient("http://cms.test", http_client=httpx.AsyncClient(transport=httpx.MockTransport(recorder)))


# ── Mapping ──


def test_word_cloud_from_cms_uses_document_id_and_german_fields():
    record = word_cloud_from_cms(_cms_cloud())

    assert record.id == "doc-1"
    assert record.title == "Themen"
    assert [w.text for w in record.words] == ["Ruhe", "Mut"]
    assert record.words[0].weight == 8
    assert record.words[0].id == "3"
    assert record.words[1].color == "inherit"
    assert record.max_width == 800
    assert record.updated_at.year == 2024


def test_word_cloud_from_cms_rejects_missing_id():
    data = _cms_cloud()
    del data["id"]
    del data["documentId"]
    with pytest.raises(CmsError):
        word_cloud_from_cms(data)


def test_update_payload_only_contains_set_fields():
    payload = word_cloud_to_cms(WordCloudUpdate(title="Neu", is_active=False))
    assert payload == {"titel": "Neu", "istAktiv": False}


def test_create_payload_sends_words_without_local_ids():
    data = WordCloudCreate(
        title="X",
        words=[WordSchema(text="a", weight=3, id="7"), WordSchema(text="b", id="tmp-1")],
    )
    payload = word_cloud_to_cms(data)

    assert payload["titel"] == "X"
    assert payload["woerter"][0] == {
        "id": 7,
        "text": "a",
        "gewichtung": 3,
        "farbe": "inherit",
        "link": None,
        "istExternerLink": False,
        "beschreibung": None,
    }
    assert "id" not in payload["woerter"][1]


# ── Word cloud store ──


@pytest.mark.asyncio
async def test_list_all_requests_populated_sorted_collection():
    recorder = Recorder(httpx.Response(200, json={"data": [_cms_cloud("a"), _cms_cloud("b")], "meta": {}}))
    store = CmsWordCloudStore(_client(recorder))

    records = await store.list_all()

    assert [r.id for r in records] == ["a", "b"]
    params = recorder.requests[0].url.params
    assert params["populate"] == "*"
    assert params["sort"] == "sortierung:asc"
    assert "filters[istAktiv][$eq]" not in params


@pytest.mark.asyncio
async def test_list_active_adds_filter():
    recorder = Recorder(httpx.Response(200, json={"data": []}))
    store = CmsWordCloudStore(_client(recorder))

    assert await store.list_active() == []
    assert recorder.requests[0].url.params["filters[istAktiv][$eq]"] == "true"


@pytest.mark.asyncio
async def test_create_posts_data_envelope():
    recorder = Recorder(httpx.Response(201, json={"data": _cms_cloud("new", titel="X", woerter=[])}))
    store = CmsWordCloudStore(_client(recorder))

    record = await store.create(WordCloudCreate(title="X"))

    assert record.id == "new"
    assert recorder.requests[0].method == "POST"
    assert recorder.body()["data"]["titel"] == "X"


@pytest.mark.asyncio
async def test_update_and_delete_address_document_id():
    recorder = Recorder(
        httpx.Response(200, json={"data": _cms_cloud("doc-1", titel="Neu")}),
        httpx.Response(204),
    )
    store = CmsWordCloudStore(_client(recorder))

    updated = await store.update("doc-1", WordCloudUpdate(title="Neu"))
    await store.delete("doc-1")

    assert updated.title == "Neu"
    assert recorder.requests[0].method == "PUT"
    assert recorder.requests[0].url.path == "/api/word-clouds/doc-1"
    assert recorder.body(0) == {"data": {"titel": "Neu"}}
    assert recorder.requests[1].method == "DELETE"


@pytest.mark.asyncio
async def test_missing_envelope_is_a_cms_error():
    recorder = Recorder(httpx.Response(200, json=[]))
    store = CmsWordCloudStore(_client(recorder))

    with pytest.raises(CmsError):
        await store.list_all()


# ── Site config & auth ──


@pytest.mark.asyncio
async def test_site_config_round_trips_german_names():
    recorder = Recorder(
        httpx.Response(200, json={"data": {"id": 1, "documentId": "cfg", "seitenTitel": "Mannar", "primaryColor": "#111111"}}),
        httpx.Response(200, json={"data": {"id": 1, "documentId": "cfg", "seitenTitel": "Neu", "primaryColor": "#222222"}}),
    )
    store = CmsSiteConfigStore(_client(recorder))

    config = await store.get()
    assert config.title == "Mannar"
    assert config.background_color == "#f9fafb"

    saved = await store.replace(SiteConfig(title="Neu", primary_color="#222222", background_color="#ffffff"))
    assert saved.title == "Neu"
    assert recorder.body()["data"]["seitenTitel"] == "Neu"
    assert recorder.requests[1].url.path == "/api/seiten-config"


@pytest.mark.asyncio
async def test_site_config_without_title_is_missing():
    recorder = Recorder(httpx.Response(200, json={"data": None}))
    with pytest.raises(CmsError):
        await CmsSiteConfigStore(_client(recorder)).get()


@pytest.mark.asyncio
async def test_login_posts_identifier_and_password():
    recorder = Recorder(
        httpx.Response(200, json={"jwt": "abc", "user": {"id": 1, "username": "admin", "email": "a@b.de"}})
    )
    provider = CmsAuthProvider(_client(recorder))

    result = await provider.login("admin", "pw")

    assert result.jwt == "abc"
    assert result.user.email == "a@b.de"
    assert recorder.requests[0].url.path == "/api/auth/local"
    assert recorder.body() == {"identifier": "admin", "password": "pw"}


def test_stored_zero_weight_is_clamped_not_defaulted():
    record = word_cloud_from_cms(_cms_cloud(woerter=[{"id": 1, "text": "leise", "gewichtung": 0}]))
    assert record.words[0].weight == 1


@pytest.mark.asyncio
async def test_list_all_follows_every_page():
    clouds = [_cms_cloud(f"doc-{i}") for i in range(30)]
    pages: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        page = int(request.url.params["pagination[page]"])
        pages.append(request.url.params["pagination[page]"])
        # Server answers in pages of 25 whatever page size was asked for.
        chunk = clouds[(page - 1) * 25 : page * 25]
        meta = {"pagination": {"page": page, "pageSize": 25, "pageCount": 2, "total": 30}}
        return httpx.Response(200, json={"data": chunk, "meta": meta})

    client = CmsClient("http://cms.test", http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    records = await CmsWordCloudStore(client).list_all()

    assert len(records) == 30
    assert records[-1].id == "doc-29"
    assert pages == ["1", "2"]
