"""Client-side authentication session — one bearer token plus the user it belongs to.

The session is plain UI state, not a security boundary: the content store
validates every request on its own. Each instance has an explicit lifecycle:

    session = AuthSession(provider, storage)
    session.initialize()          # restore from storage, once
    await session.login(creds)    # or rely on the restored token
    ...
    session.logout()              # or handle_unauthorized() after a 401
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from wordclouds.application.interfaces import AuthProvider, TokenStorage
from wordclouds.application.schemas import LoginCredentials, validate_input
from wordclouds.domain.entities import AuthResult, AuthUser
from wordclouds.infrastructure.logging.colored_logger import SyncLogger, SyncStage

logger = logging.getLogger(__name__)
plog = SyncLogger("AuthSession")

LogoutListener = Callable[[str], None]

REASON_LOGOUT = "logout"
REASON_UNAUTHORIZED = "unauthorized"


class AuthSession:
    """Holds the bearer token for requests against the content store."""

    def __init__(self, provider: AuthProvider, storage: TokenStorage):
        self._provider = provider
        self._storage = storage
        self._auth: AuthResult | None = None
        self._initialized = False
        self._is_loading = False
        self._last_error: str | None = None
        self._logout_listeners: list[LogoutListener] = []

    # ── State ────────────────────────────────────────────────────────

    @property
    def token(self) -> str | None:
        return self._auth.jwt if self._auth else None

    @property
    def user(self) -> AuthUser | None:
        return self._auth.user if self._auth else None

    @property
    def is_authenticated(self) -> bool:
        return self._auth is not None

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def last_error(self) -> str | None:
        return self._last_error

    def clear_error(self) -> None:
        self._last_error = None

    def authorization_header(self) -> dict[str, str]:
        """``{"Authorization": "Bearer <token>"}`` or an empty dict."""
        if self._auth is None:
            return {}
        return {"Authorization": f"Bearer {self._auth.jwt}"}

    def on_logout(self, listener: LogoutListener) -> Callable[[], None]:
        """Call ``listener(reason)`` whenever the session is cleared."""
        self._logout_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._logout_listeners:
                self._logout_listeners.remove(listener)

        return unsubscribe

    # ── Lifecycle ────────────────────────────────────────────────────

    def initialize(self) -> bool:
        """Restore a stored session. Storage is read at most once per instance."""
        if self._initialized:
            return self.is_authenticated

        self._is_loading = True
        try:
            stored = self._storage.load()
            if stored is not None and stored.jwt:
                self._auth = stored
                plog.step_complete(SyncStage.AUTH, "Session restored", user=stored.user.username)
        except Exception as exc:
            logger.warning("Could not restore session: %s", exc)
            self._last_error = "Failed to restore the session"
        finally:
            self._is_loading = False
            self._initialized = True
        return self.is_authenticated

    async def login(self, credentials: LoginCredentials | Mapping[str, Any]) -> AuthUser:
        """Exchange credentials for a token and remember both."""
        creds = validate_input(LoginCredentials, credentials)
        self._is_loading = True
        self._last_error = None
        try:
            with plog.timed_step(SyncStage.AUTH, "Logging in", identifier=creds.identifier):
                result = await self._provider.login(creds.identifier, creds.password)
        except Exception as exc:
            self._last_error = str(exc) or "Login failed"
            raise
        finally:
            self._is_loading = False

        self._auth = result
        self._initialized = True
        self._storage.save(result)
        return result.user

    def logout(self) -> None:
        """Forget the token and tell listeners to send the user to the login screen."""
        self._clear(REASON_LOGOUT)

    def handle_unauthorized(self) -> None:
        """Called when any request comes back 401."""
        if self._auth is None:
            return
        logger.warning("Content store rejected the session token — clearing session")
        self._clear(REASON_UNAUTHORIZED)

    def close(self) -> None:
        """End this session's scope without touching stored credentials."""
        self._auth = None
        self._initialized = False
        self._logout_listeners.clear()

    def _clear(self, reason: str) -> None:
        self._auth = None
        self._last_error = None
        self._storage.clear()
        plog.step_complete(SyncStage.AUTH, "Session cleared", reason=reason)
        for listener in list(self._logout_listeners):
            try:
                listener(reason)
            except Exception:
                logger.exception("Logout listener failed")
