"""Abstract interface for exchanging credentials for a bearer token."""

from abc import ABC, abstractmethod

from wordclouds.domain.entities import AuthResult


class AuthProvider(ABC):
    """Port for the CMS local-auth endpoint."""

    @abstractmethod
    async def login(self, identifier: str, password: str) -> AuthResult:
        """Return the token and user profile, or raise HttpError/NetworkError."""
        ...
