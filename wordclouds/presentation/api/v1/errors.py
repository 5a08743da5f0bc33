"""Map domain exceptions onto HTTP responses for the admin API."""

from fastapi import HTTPException, status

from wordclouds.domain.exceptions import (
    CmsError,
    EntityNotFoundError,
    HttpError,
    NetworkError,
    ValidationError,
)


def to_http_exception(exc: Exception) -> HTTPException:
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.errors)
    if isinstance(exc, EntityNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, HttpError):
        return HTTPException(status_code=exc.status_code, detail=exc.message)
    if isinstance(exc, NetworkError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    if isinstance(exc, CmsError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    raise exc
