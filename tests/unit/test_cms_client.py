"""Unit tests for the CmsClient."""

import httpx
import pytest

from wordclouds.application.services import AuthSession
from wordclouds.domain.entities import AuthResult, AuthUser
from wordclouds.domain.exceptions import CmsError, HttpError, NetworkError, UnauthorizedError
from wordclouds.infrastructure.cms import CmsAuthProvider, CmsClient
from wordclouds.infrastructure.storage.token_storage import InMemoryTokenStorage


# ── Helpers ──


def _make_client(handler, session: AuthSession | None = None) -> CmsClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return CmsClient("http://cms.test/", http_client=http_client, session=session)


def _logged_in_session(client: CmsClient | None = None) -> AuthSession:
    storage = InMemoryTokenStorage(AuthResult(jwt="tok", user=AuthUser(id=1, username="admin")))
    session = AuthSession(CmsAuthProvider(client or CmsClient()), storage)
    session.initialize()
    return session


# ── Tests ──


@pytest.mark.asyncio
async def test_request_builds_api_url_and_decodes_json():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    client = _make_client(handler)
    body = await client.get("word-clouds", params={"populate": "*"})

    assert body == {"data": []}
    assert seen[0].url.path == "/api/word-clouds"
    assert seen[0].url.params["populate"] == "*"
    assert "authorization" not in seen[0].headers


@pytest.mark.asyncio
async def test_bearer_token_attached_when_session_is_bound():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    client = _make_client(handler)
    client.bind_session(_logged_in_session())
    await client.get("word-clouds")
    await client.post("auth/local", {"identifier": "a", "password": "b"}, authenticated=False)

    assert seen[0].headers["authorization"] == "Bearer tok"
    assert "authorization" not in seen[1].headers


@pytest.mark.asyncio
async def test_transport_failure_becomes_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _make_client(handler)
    with pytest.raises(NetworkError) as exc_info:
        await client.get("word-clouds")

    assert exc_info.value.method == "GET"
    assert "connection refused" in str(exc_info.value)


@pytest.mark.asyncio
async def test_error_status_uses_strapi_error_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            400,
            json={"data": None, "error": {"status": 400, "name": "ValidationError", "message": "titel must be defined"}},
        )

    client = _make_client(handler)
    with pytest.raises(HttpError) as exc_info:
        await client.put("word-clouds/abc", {"data": {}})

    assert exc_info.value.status_code == 400
    assert str(exc_info.value) == "[cms] 400: titel must be defined"


@pytest.mark.asyncio
async def test_error_status_without_json_falls_back_to_body_text():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad Gateway")

    client = _make_client(handler)
    with pytest.raises(HttpError) as exc_info:
        await client.get("word-clouds")

    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "Bad Gateway"


@pytest.mark.asyncio
async def test_unauthorized_clears_bound_session():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"message": "Missing or invalid credentials"}})

    client = _make_client(handler)
    session = _logged_in_session(client)
    client.bind_session(session)
    reasons: list[str] = []
    session.on_logout(reasons.append)

    with pytest.raises(UnauthorizedError):
        await client.delete("word-clouds/abc")

    assert not session.is_authenticated
    assert reasons == ["unauthorized"]


@pytest.mark.asyncio
async def test_unauthenticated_401_leaves_session_alone():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"message": "nope"}})

    client = _make_client(handler)
    session = _logged_in_session(client)
    client.bind_session(session)

    with pytest.raises(UnauthorizedError):
        await client.post("auth/local", {}, authenticated=False)

    assert session.is_authenticated


@pytest.mark.asyncio
async def test_empty_response_returns_none():
    client = _make_client(lambda request: httpx.Response(204))
    assert await client.delete("word-clouds/abc") is None


@pytest.mark.asyncio
async def test_invalid_json_is_a_cms_error():
    client = _make_client(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(CmsError):
        await client.get("word-clouds")


@pytest.mark.asyncio
async def test_ping_reports_reachability():
    ok = _make_client(lambda request: httpx.Response(200, json={"data": []}))
    down = _make_client(lambda request: httpx.Response(503, text="down"))

    assert await ok.ping() is True
    assert await down.ping() is False

