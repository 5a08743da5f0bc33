"""Logging setup for the admin backend.

Four groups of loggers get their own level from Settings:

    log_level_http     outbound HTTP made by httpx/httpcore
    log_level_uvicorn  the ASGI server
    log_level_cms      CmsClient, the Strapi stores and token storage
    log_level_sync     the collection cache and the auth session, both the
                       module loggers and the coloured SyncLogger channels

Everything else follows ``log_level`` on the root logger.
"""

import logging
import sys

from wordclouds.config import Settings, get_settings

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"

_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("log_level_http", ("httpx", "httpcore")),
    ("log_level_uvicorn", ("uvicorn", "uvicorn.access", "uvicorn.error")),
    ("log_level_cms", (
        "wordclouds.infrastructure.cms",
        "wordclouds.infrastructure.storage",
    )),
    ("log_level_sync", (
        "wordclouds.application.services",
        "WordCloudCollection",
        "AuthSession",
    )),
)


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category levels. Safe to call more than once."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_level(settings.log_level))
    if not root.handlers:
        root.addHandler(_stderr_handler())

    applied = {}
    for field, loggers in _CATEGORIES:
        level = _level(getattr(settings, field))
        for name in loggers:
            logging.getLogger(name).setLevel(level)
        applied[field] = logging.getLevelName(level)

    logging.getLogger(__name__).debug("Log levels: root=%s %s", settings.log_level, applied)


def _stderr_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def _level(raw: str) -> int:
    """``"debug"`` → ``logging.DEBUG``; unknown names fall back to INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
