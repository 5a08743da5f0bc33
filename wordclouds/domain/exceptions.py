"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationError(Exception):
    """Raised when client-side input is rejected before any request is sent.

    ``errors`` holds one ``{"field": ..., "message": ...}`` entry per
    offending field so callers can show them next to form inputs.
    """

    def __init__(self, errors: list[dict[str, str]]):
        self.errors = errors
        summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
        super().__init__(f"Invalid input — {summary}" if summary else "Invalid input")


class CmsError(Exception):
    """Base class for every failure talking to the content store."""


class NetworkError(CmsError):
    """Raised when a request never reached the content store."""

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


class HttpError(CmsError):
    """Raised when the content store answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"[cms] {status_code}: {message}")


class UnauthorizedError(HttpError):
    """A 401 from the content store — the session must be cleared."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(401, message)
