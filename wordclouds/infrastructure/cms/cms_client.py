"""Strapi REST client — the single place that talks HTTP to the content store.

Uses httpx for async JSON requests against ``<cms_url>/api``. Attaches
the bound session's bearer token, and turns transport failures and
non-2xx answers into the domain's NetworkError / HttpError. A 401 clears
the bound session before the error propagates.
"""

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from wordclouds.domain.exceptions import CmsError, HttpError, NetworkError, UnauthorizedError

if TYPE_CHECKING:
    from wordclouds.application.services.auth_session import AuthSession

logger = logging.getLogger(__name__)


class CmsClient:
    """Infrastructure adapter — connects to the Strapi REST API.

    An injected ``http_client`` is reused for every call; otherwise a
    short-lived client is opened and closed per request.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:1337",
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
        session: "AuthSession | None" = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._api_url = f"{self._base_url}/api"
        self._timeout = timeout
        self._http_client = http_client
        self._session = session

    @property
    def base_url(self) -> str:
        return self._base_url

    def bind_session(self, session: "AuthSession | None") -> None:
        """Attach the session whose token authenticates requests."""
        self._session = session

    def _get_headers(self, authenticated: bool) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if authenticated and self._session is not None:
            headers.update(self._session.authorization_header())
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()

    # ── Requests ─────────────────────────────────────────────────────

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
        authenticated: bool = True,
    ) -> Any:
        """Send one request and return the decoded JSON body (None when empty)."""
        url = f"{self._api_url}/{path.lstrip('/')}"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            logger.debug("%s %s params=%s", method, url, dict(params or {}))
            try:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json_body,
                    headers=self._get_headers(authenticated),
                )
            except httpx.TransportError as exc:
                logger.error("%s %s did not reach the CMS: %s", method, url, exc)
                raise NetworkError(method, url, str(exc) or type(exc).__name__) from exc

            if not response.is_success:
                self._raise_http_error(method, url, response, authenticated)

            if response.status_code == 204 or not response.content:
                return None
            try:
                return response.json()
            except json.JSONDecodeError as exc:
                raise CmsError(f"{method} {url} returned invalid JSON") from exc

        finally:
            if should_close:
                await client.aclose()

    async def get(self, path: str, *, params: Mapping[str, str] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json_body: Any, *, authenticated: bool = True) -> Any:
        return await self.request("POST", path, json_body=json_body, authenticated=authenticated)

    async def put(self, path: str, json_body: Any) -> Any:
        return await self.request("PUT", path, json_body=json_body)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def ping(self) -> bool:
        """True when the CMS answers a minimal word-cloud listing."""
        try:
            await self.request(
                "GET",
                "word-clouds",
                params={"pagination[limit]": "1"},
                authenticated=False,
            )
        except CmsError as exc:
            logger.warning("CMS connection test failed: %s", exc)
            return False
        return True

    # ── Errors ───────────────────────────────────────────────────────

    def _raise_http_error(
        self,
        method: str,
        url: str,
        response: httpx.Response,
        authenticated: bool,
    ) -> None:
        """Raise HttpError (UnauthorizedError for 401) from a non-2xx Response."""
        try:
            data = response.json()
            error = data.get("error") or {}
            message = error.get("message") or response.text
        except (ValueError, AttributeError):
            message = response.text or response.reason_phrase

        logger.warning("%s %s → %d: %s", method, url, response.status_code, message)

        if response.status_code == 401:
            if authenticated and self._session is not None:
                self._session.handle_unauthorized()
            raise UnauthorizedError(message)

        raise HttpError(status_code=response.status_code, message=message)
