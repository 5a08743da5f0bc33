"""Pydantic DTOs for login and the current user."""

from pydantic import BaseModel, Field


class LoginCredentials(BaseModel):
    """Username (or email) and password for the CMS local-auth endpoint."""

    identifier: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class AuthUserResponse(BaseModel):
    id: int | str
    username: str
    email: str

    model_config = {"from_attributes": True}


class SessionResponse(BaseModel):
    """Current authentication state of the admin session."""

    authenticated: bool
    user: AuthUserResponse | None = None
