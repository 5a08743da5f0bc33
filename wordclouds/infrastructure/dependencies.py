"""Dependency wiring — builds the CMS client, session and collection, and hands them to FastAPI."""

from dataclasses import dataclass

import httpx
from fastapi import Depends, HTTPException, Request, status

from wordclouds.application.interfaces import TokenStorage, WordCloudStore
from wordclouds.application.services import (
    AuthSession,
    SiteConfigService,
    WordCloudCollection,
)
from wordclouds.config import Settings
from wordclouds.infrastructure.cms import (
    CmsAuthProvider,
    CmsClient,
    CmsSiteConfigStore,
    CmsWordCloudStore,
)
from wordclouds.infrastructure.storage.token_storage import (
    InMemoryTokenStorage,
    JsonFileTokenStorage,
)


@dataclass
class AdminContext:
    """Everything one admin scope needs, built once per application."""

    client: CmsClient
    session: AuthSession
    store: WordCloudStore
    collection: WordCloudCollection
    site_config: SiteConfigService

    async def aclose(self) -> None:
        self.collection.close()
        self.session.close()
        await self.client.aclose()


def build_token_storage(settings: Settings) -> TokenStorage:
    if settings.token_storage_file:
        return JsonFileTokenStorage(settings.token_storage_file)
    return InMemoryTokenStorage()


def build_admin_context(
    settings: Settings,
    *,
    http_client: httpx.AsyncClient | None = None,
    token_storage: TokenStorage | None = None,
) -> AdminContext:
    """Wire client → session → stores → collection.

    The client and session reference each other: the client reads the
    session's token, and a 401 from the client clears the session.
    """
    client = CmsClient(
        settings.cms_url,
        timeout=settings.cms_timeout,
        http_client=http_client or httpx.AsyncClient(timeout=settings.cms_timeout),
    )
    session = AuthSession(
        CmsAuthProvider(client),
        token_storage or build_token_storage(settings),
    )
    client.bind_session(session)

    store = CmsWordCloudStore(client)
    collection = WordCloudCollection(store, update_rollback=settings.update_rollback)
    # Losing the session unmounts the admin view of the collection.
    session.on_logout(lambda reason: collection.close())

    return AdminContext(
        client=client,
        session=session,
        store=store,
        collection=collection,
        site_config=SiteConfigService(CmsSiteConfigStore(client)),
    )


# ── FastAPI providers ────────────────────────────────────────────────


def get_admin_context(request: Request) -> AdminContext:
    return request.app.state.admin


def get_session(context: AdminContext = Depends(get_admin_context)) -> AuthSession:
    return context.session


def get_collection(context: AdminContext = Depends(get_admin_context)) -> WordCloudCollection:
    return context.collection


def get_word_cloud_store(context: AdminContext = Depends(get_admin_context)) -> WordCloudStore:
    return context.store


def get_site_config_service(context: AdminContext = Depends(get_admin_context)) -> SiteConfigService:
    return context.site_config


def require_authenticated(session: AuthSession = Depends(get_session)) -> AuthSession:
    """Reject the request with 401 unless an admin is logged in."""
    if not session.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login required",
        )
    return session
