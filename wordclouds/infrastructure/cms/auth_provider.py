"""Strapi users-permissions local login."""

from wordclouds.application.interfaces import AuthProvider
from wordclouds.domain.entities import AuthResult
from wordclouds.infrastructure.cms.cms_client import CmsClient
from wordclouds.infrastructure.cms.mappers import auth_result_from_cms


class CmsAuthProvider(AuthProvider):
    """POSTs ``{identifier, password}`` to ``/api/auth/local``."""

    def __init__(self, client: CmsClient):
        self._client = client

    async def login(self, identifier: str, password: str) -> AuthResult:
        body = await self._client.post(
            "auth/local",
            {"identifier": identifier, "password": password},
            authenticated=False,
        )
        return auth_result_from_cms(body)
