"""Domain entities for authentication against the content store."""

from dataclasses import dataclass


@dataclass
class AuthUser:
    """Denormalised profile of the logged-in CMS user."""

    id: int | str
    username: str
    email: str = ""
    confirmed: bool = True
    blocked: bool = False


@dataclass
class AuthResult:
    """Outcome of a successful local-auth login."""

    jwt: str
    user: AuthUser
