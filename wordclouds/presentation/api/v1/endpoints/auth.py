"""Admin login/logout against the CMS local-auth endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status

from wordclouds.application.schemas import AuthUserResponse, LoginCredentials, SessionResponse
from wordclouds.application.services import AuthSession
from wordclouds.domain.exceptions import CmsError, HttpError
from wordclouds.infrastructure.dependencies import get_session
from wordclouds.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/auth", tags=["Auth"])


def _session_response(session: AuthSession) -> SessionResponse:
    user = session.user
    return SessionResponse(
        authenticated=session.is_authenticated,
        user=AuthUserResponse.model_validate(user, from_attributes=True) if user else None,
    )


@router.post("/login", response_model=SessionResponse)
async def login(
    credentials: LoginCredentials,
    session: AuthSession = Depends(get_session),
) -> SessionResponse:
    """Exchange credentials for a CMS token held by the admin session."""
    try:
        await session.login(credentials)
    except HttpError as e:
        if e.status_code in (400, 401, 403):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Login failed — check your credentials",
            )
        raise to_http_exception(e)
    except CmsError as e:
        raise to_http_exception(e)
    return _session_response(session)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(session: AuthSession = Depends(get_session)) -> None:
    session.logout()


@router.get("/me", response_model=SessionResponse)
async def me(session: AuthSession = Depends(get_session)) -> SessionResponse:
    """Current session state; restores a stored token on first call."""
    session.initialize()
    return _session_response(session)
