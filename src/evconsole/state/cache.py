"""Read-through cache for the station collection.

This is the only component allowed to hold fetched station data. It is
an explicitly owned object: create one per console and inject it where
it is needed.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime

from evconsole._constants import STATIONS_QUERY_KEY
from evconsole.exceptions import FetchError
from evconsole.models.station import Station
from evconsole.repository import StationRepository
from evconsole.state.events import QueryState, QueryStatus

_logger = logging.getLogger(__name__)

QueryListener = Callable[[QueryState], None]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class StationQueryCache:
    """Cache of the full station collection under a single query key.

    * :meth:`fetch_all` serves the cached collection until it is
      invalidated. Callers arriving while a fetch is pending await the
      same request; cancelling one caller does not cancel the request.
    * :meth:`invalidate` marks the collection stale. A fetch already in
      flight at that moment still completes for its own callers, but a
      read started after the invalidate never joins it: it starts a new
      request, and the superseded one can no longer overwrite the cache.
    * A failed fetch records a :class:`FetchError` and keeps the previous
      collection untouched.
    """

    def __init__(
        self,
        repository: StationRepository,
        *,
        key: tuple[str, ...] = STATIONS_QUERY_KEY,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._repository = repository
        self._key = key
        self._clock = clock
        self._data: tuple[Station, ...] | None = None
        self._error: FetchError | None = None
        self._stale = True
        self._generation = 0
        self._updated_at: datetime | None = None
        self._error_at: datetime | None = None
        self._inflight: asyncio.Task[tuple[Station, ...]] | None = None
        self._inflight_generation: int | None = None
        self._listeners: list[QueryListener] = []

    @property
    def key(self) -> tuple[str, ...]:
        return self._key

    @property
    def state(self) -> QueryState:
        fetching = self._inflight is not None
        if self._error is not None and not fetching:
            status = QueryStatus.ERROR
        elif fetching and self._data is None:
            status = QueryStatus.LOADING
        elif self._data is not None:
            status = QueryStatus.SUCCESS
        else:
            status = QueryStatus.IDLE
        return QueryState(
            key=self._key,
            status=status,
            data=self._data,
            error=self._error,
            is_stale=self._stale,
            is_fetching=fetching,
            updated_at=self._updated_at,
            error_at=self._error_at,
        )

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: QueryListener) -> Callable[[], None]:
        """Register *listener* for state changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _emit(self) -> None:
        state = self.state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                _logger.warning("Cache listener %r failed", listener, exc_info=True)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def fetch_all(self) -> list[Station]:
        """Return the station collection, fetching it if missing or stale.

        Raises
        ------
        FetchError
            If the repository call fails. The error is also recorded in
            :attr:`state` and delivered to subscribers.
        """
        if self._data is not None and not self._stale:
            return list(self._data)

        task = self._inflight
        if task is not None and self._inflight_generation == self._generation:
            _logger.debug("Joining in-flight fetch for %s", self._key)
        else:
            if task is not None:
                _logger.debug("Superseding fetch of generation %s for %s", self._inflight_generation, self._key)
            task = asyncio.get_running_loop().create_task(self._run_fetch(self._generation))
            task.add_done_callback(self._consume_task_result)
            self._inflight = task
            self._inflight_generation = self._generation
            self._emit()
        return list(await asyncio.shield(task))

    async def load(self) -> QueryState:
        """View-facing read: fetch if needed, never raise :class:`FetchError`."""
        try:
            await self.fetch_all()
        except FetchError:
            pass
        return self.state

    async def refresh(self) -> QueryState:
        """Invalidate and reload in one step."""
        self.invalidate()
        return await self.load()

    async def _run_fetch(self, generation: int) -> tuple[Station, ...]:
        _logger.debug("Fetching %s (generation=%d)", self._key, generation)
        try:
            stations = await self._repository.list()
        except asyncio.CancelledError:
            if self._owns_inflight(generation):
                self._clear_inflight()
                self._emit()
            raise
        except Exception as exc:
            error = FetchError(f"Failed to fetch stations: {exc}")
            _logger.error("Error fetching stations: %s", exc, exc_info=True)
            if self._owns_inflight(generation):
                self._clear_inflight()
                self._error = error
                self._error_at = self._clock()
                self._emit()
            raise error from exc

        data = tuple(stations)
        if not self._owns_inflight(generation):
            _logger.debug("Discarding superseded result of generation %d for %s", generation, self._key)
            return data

        self._clear_inflight()
        self._data = data
        self._error = None
        self._error_at = None
        self._updated_at = self._clock()
        self._stale = generation != self._generation
        _logger.debug("Fetched %d stations for %s (stale=%s)", len(data), self._key, self._stale)
        self._emit()
        return data

    def _owns_inflight(self, generation: int) -> bool:
        return self._inflight is not None and self._inflight_generation == generation

    def _clear_inflight(self) -> None:
        self._inflight = None
        self._inflight_generation = None

    @staticmethod
    def _consume_task_result(task: asyncio.Task[tuple[Station, ...]]) -> None:
        # Every awaiter may have been cancelled; retrieve the exception so
        # asyncio does not report it as never retrieved.
        if not task.cancelled():
            task.exception()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def invalidate(self) -> None:
        """Mark the collection stale so the next read re-fetches it."""
        self._generation += 1
        self._stale = True
        _logger.debug("Invalidated %s (generation=%d)", self._key, self._generation)
        self._emit()
