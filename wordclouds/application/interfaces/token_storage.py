"""Abstract interface for persisting the session token between runs."""

from abc import ABC, abstractmethod

from wordclouds.domain.entities import AuthResult


class TokenStorage(ABC):
    """Port for wherever the bearer token and user profile are kept."""

    @abstractmethod
    def load(self) -> AuthResult | None:
        """Return the stored token and user, or None when nothing is stored."""
        ...

    @abstractmethod
    def save(self, auth: AuthResult) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...
