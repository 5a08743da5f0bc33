"""Optimistic in-memory view of the remote word-cloud collection.

The collection owns the cached list of records for one UI scope. Reads
replace the cache wholesale; writes are applied locally first where the
record's identity is already known (update, delete) and reconciled with
the server's answer once it arrives:

  * create  — request, then prepend the server's record (no optimistic insert)
  * update  — merge locally, then swap in the server copy; undo on failure
  * delete  — remove locally; restore the exact snapshot on failure

Failures are stored as a single ``last_error`` string and never retried.
"""

import copy
import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from wordclouds.application.interfaces import WordCloudStore
from wordclouds.application.schemas import WordCloudCreate, WordCloudUpdate, validate_input
from wordclouds.application.services.cancellation import CancellationToken
from wordclouds.domain.entities import WordCloudRecord
from wordclouds.domain.exceptions import EntityNotFoundError, UnauthorizedError
from wordclouds.infrastructure.logging.colored_logger import SyncLogger, SyncStage

logger = logging.getLogger(__name__)
plog = SyncLogger("WordCloudCollection")

Listener = Callable[["WordCloudCollection"], None]


class RollbackPolicy(str, Enum):
    """How a failed optimistic update is undone."""

    SNAPSHOT = "snapshot"  # restore the cache exactly as it was before the edit
    REFETCH = "refetch"    # discard the cache and load it again from the store


def _describe(exc: Exception, fallback: str) -> str:
    return str(exc) or fallback


class WordCloudCollection:
    """Cached, optimistically-updated list of word clouds.

    Every async operation accepts an optional CancellationToken. A result
    that arrives after the token, or the collection itself, was cancelled
    is handed back to the caller but never applied to the cache.
    """

    def __init__(
        self,
        store: WordCloudStore,
        *,
        update_rollback: RollbackPolicy | str = RollbackPolicy.SNAPSHOT,
    ):
        self._store = store
        self._update_rollback = RollbackPolicy(update_rollback)
        self._records: list[WordCloudRecord] = []
        self._is_loading = False
        self._last_error: str | None = None
        self._opened = False
        self._scope = CancellationToken()
        self._listeners: list[Listener] = []

    # ── State ────────────────────────────────────────────────────────

    @property
    def items(self) -> tuple[WordCloudRecord, ...]:
        return tuple(self._records)

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def update_rollback(self) -> RollbackPolicy:
        return self._update_rollback

    def get(self, record_id: str) -> WordCloudRecord | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def clear_error(self) -> None:
        self._last_error = None
        self._notify()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every state change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ── Lifecycle ────────────────────────────────────────────────────

    async def open(self, token: CancellationToken | None = None) -> None:
        """Populate the cache once; later calls are no-ops until close()."""
        if self._opened:
            return
        self._opened = True
        await self.refresh(token)

    def close(self) -> None:
        """Discard the cache and drop the results of any pending request."""
        self._scope.cancel()
        self._scope = CancellationToken()
        self._opened = False
        self._records = []
        self._is_loading = False
        self._last_error = None
        self._listeners.clear()

    # ── Operations ───────────────────────────────────────────────────

    async def refresh(self, token: CancellationToken | None = None) -> None:
        """Replace the cache with the store's current contents.

        On failure the previous contents are kept and ``last_error`` is set.
        """
        is_stale = self._staleness_check(token)
        self._is_loading = True
        self._last_error = None
        self._notify()

        try:
            with plog.timed_step(SyncStage.REFRESH, "Loading word clouds"):
                records = await self._store.list_all()
        except Exception as exc:
            if not is_stale():
                self._last_error = _describe(exc, "Failed to load word clouds")
            elif isinstance(exc, UnauthorizedError):
                # The 401 itself closed this scope via the session; still report it.
                self._last_error = _describe(exc, "Session expired")
                self._notify()
            else:
                plog.detail("Discarding late refresh failure")
            return
        finally:
            if not is_stale():
                self._is_loading = False
                self._notify()

        if is_stale():
            plog.detail("Discarding late refresh result", count=len(records))
            return
        self._records = list(records)
        plog.detail("Word clouds loaded", count=len(records))
        self._notify()

    async def create(
        self,
        payload: WordCloudCreate | Mapping[str, Any],
        token: CancellationToken | None = None,
    ) -> WordCloudRecord:
        """Create a record and prepend the server's copy once it is confirmed."""
        data = validate_input(WordCloudCreate, payload)
        is_stale = self._staleness_check(token)
        self._last_error = None

        try:
            with plog.timed_step(SyncStage.CREATE, "Creating word cloud", title=data.title):
                created = await self._store.create(data)
        except Exception as exc:
            if not is_stale():
                self._last_error = _describe(exc, "Failed to create word cloud")
                self._notify()
            raise

        if is_stale():
            plog.detail("Discarding late create result", id=created.id)
            return created

        # A concurrent refresh may already have picked the record up.
        existing = self._position(created.id)
        if existing is None:
            self._records.insert(0, created)
        else:
            self._records[existing] = created
        self._notify()
        return created

    async def update(
        self,
        record_id: str,
        fields: WordCloudUpdate | Mapping[str, Any],
        token: CancellationToken | None = None,
    ) -> WordCloudRecord:
        """Merge ``fields`` into the cached record now, then confirm with the store."""
        data = validate_input(WordCloudUpdate, fields)
        index = self._index_of(record_id)
        is_stale = self._staleness_check(token)
        snapshot = copy.deepcopy(self._records)

        self._last_error = None
        self._records[index] = self._records[index].merged(data.to_fields())
        self._notify()

        try:
            with plog.timed_step(SyncStage.UPDATE, "Updating word cloud", id=record_id):
                updated = await self._store.update(record_id, data)
        except Exception as exc:
            if is_stale():
                plog.detail("Discarding late update failure", id=record_id)
                raise
            await self._undo_update(snapshot, token, is_stale)
            if is_stale():
                raise
            self._last_error = _describe(exc, "Failed to update word cloud")
            self._notify()
            raise

        if is_stale():
            plog.detail("Discarding late update result", id=record_id)
            return updated

        # Server copy wins over the optimistic one (derived fields, clock skew).
        position = self._position(record_id)
        if position is not None:
            self._records[position] = updated
            self._notify()
        return updated

    async def delete(self, record_id: str, token: CancellationToken | None = None) -> None:
        """Remove the record now; restore the exact prior cache if the store refuses."""
        self._index_of(record_id)
        is_stale = self._staleness_check(token)
        snapshot = copy.deepcopy(self._records)

        self._last_error = None
        self._records = [r for r in self._records if r.id != record_id]
        self._notify()

        try:
            with plog.timed_step(SyncStage.DELETE, "Deleting word cloud", id=record_id):
                await self._store.delete(record_id)
        except Exception as exc:
            if is_stale():
                plog.detail("Discarding late delete failure", id=record_id)
                raise
            plog.step_start(SyncStage.ROLLBACK, "Restoring snapshot", count=len(snapshot))
            self._records = snapshot
            self._last_error = _describe(exc, "Failed to delete word cloud")
            self._notify()
            raise

    # ── Internals ────────────────────────────────────────────────────

    async def _undo_update(
        self,
        snapshot: list[WordCloudRecord],
        token: CancellationToken | None,
        is_stale: Callable[[], bool],
    ) -> None:
        if self._update_rollback is RollbackPolicy.REFETCH:
            plog.step_start(SyncStage.ROLLBACK, "Re-fetching collection after failed update")
            await self.refresh(token)
            if self._last_error is None or is_stale():
                return
            plog.detail("Re-fetch failed, falling back to snapshot")
        else:
            plog.step_start(SyncStage.ROLLBACK, "Restoring snapshot", count=len(snapshot))
        self._records = snapshot

    def _staleness_check(self, token: CancellationToken | None) -> Callable[[], bool]:
        """Bind the current scope and the caller's token into one check."""
        scope = self._scope

        def is_stale() -> bool:
            return scope.cancelled or (token is not None and token.cancelled)

        return is_stale

    def _position(self, record_id: str) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def _index_of(self, record_id: str) -> int:
        index = self._position(record_id)
        if index is None:
            raise EntityNotFoundError("WordCloud", record_id)
        return index

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Collection listener failed")
