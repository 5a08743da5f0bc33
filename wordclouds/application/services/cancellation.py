"""Cancellation tokens for async calls whose results may arrive too late."""


class CancellationToken:
    """A flag that a caller flips when it no longer wants a pending result.

    Cancelling does not abort the request itself; whoever applies the
    result checks the token first and drops late outcomes.
    """

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled
