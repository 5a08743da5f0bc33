"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wordclouds.config import get_settings
from wordclouds.infrastructure.dependencies import build_admin_context
from wordclouds.infrastructure.logging.log_config import setup_logging
from wordclouds.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — wire the CMS client and restore the admin session."""
    settings = get_settings()
    setup_logging(settings)

    admin = build_admin_context(settings)
    app.state.admin = admin

    if admin.session.initialize():
        logger.info("Restored admin session for '%s'", admin.session.user.username)

    if not await admin.client.ping():
        logger.warning("CMS at %s is not reachable — continuing anyway", settings.cms_url)

    yield

    # Shutdown
    await admin.aclose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "wordclouds.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
