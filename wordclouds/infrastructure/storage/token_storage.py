"""TokenStorage implementations — in memory, or a small JSON file on disk."""

import json
import logging
from dataclasses import asdict
from pathlib import Path

from wordclouds.application.interfaces import TokenStorage
from wordclouds.domain.entities import AuthResult, AuthUser

logger = logging.getLogger(__name__)


class InMemoryTokenStorage(TokenStorage):
    """Keeps the token for the lifetime of the process only."""

    def __init__(self, initial: AuthResult | None = None):
        self._auth = initial

    def load(self) -> AuthResult | None:
        return self._auth

    def save(self, auth: AuthResult) -> None:
        self._auth = auth

    def clear(self) -> None:
        self._auth = None


class JsonFileTokenStorage(TokenStorage):
    """Persists ``{"jwt": ..., "user": {...}}`` to a JSON file readable by the owner only.

    A missing or corrupt file reads as "no stored session".
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def load(self) -> AuthResult | None:
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text("utf-8"))
            return AuthResult(jwt=data["jwt"], user=AuthUser(**data["user"]))
        except (OSError, ValueError, KeyError, TypeError):
            logger.warning("Could not read %s — ignoring stored session", self._path)
            return None

    def save(self, auth: AuthResult) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(asdict(auth), indent=2), encoding="utf-8")
        self._path.chmod(0o600)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
