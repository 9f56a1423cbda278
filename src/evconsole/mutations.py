"""Create, update and delete operations with cache invalidation.

Mutations are not queued against each other. Each successful one
invalidates the station cache; whichever finishes last determines what
the next read sees.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Awaitable, Callable
from typing import TypeVar

from evconsole.exceptions import MutationError
from evconsole.models.station import Station, StationFields
from evconsole.notifications import (
    LoggingNotifier,
    MutationKind,
    Notifier,
    failure_notification,
    success_notification,
)
from evconsole.repository import StationRepository
from evconsole.state.cache import StationQueryCache

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class StationMutations:
    """Write side of the console.

    On success: invalidate the cache, emit the success notification and
    return the repository result. On failure: log, emit the failure
    notification and raise :class:`MutationError` (chained to the
    original error). Nothing is retried.
    """

    def __init__(
        self,
        repository: StationRepository,
        cache: StationQueryCache,
        *,
        notifier: Notifier | None = None,
    ) -> None:
        self._repository = repository
        self._cache = cache
        self._notifier: Notifier = notifier if notifier is not None else LoggingNotifier()
        self._pending: Counter[MutationKind] = Counter()

    def is_pending(self, kind: MutationKind | None = None) -> bool:
        """Whether a mutation (of *kind*, or of any kind) is in flight."""
        if kind is None:
            return any(count > 0 for count in self._pending.values())
        return self._pending[kind] > 0

    async def _run(
        self,
        kind: MutationKind,
        call: Callable[[], Awaitable[T]],
        *,
        station_id: str | None = None,
    ) -> T:
        self._pending[kind] += 1
        try:
            result = await call()
        except Exception as exc:
            _logger.error("%s station mutation failed (id=%s): %s", kind.value, station_id, exc, exc_info=True)
            self._notifier.notify(failure_notification(kind))
            raise MutationError(
                f"Failed to {kind.value} station: {exc}",
                operation=kind.value,
                station_id=station_id,
            ) from exc
        finally:
            self._pending[kind] -= 1

        self._cache.invalidate()
        self._notifier.notify(success_notification(kind))
        return result

    async def create(self, fields: StationFields) -> Station:
        """Insert a new station built from *fields*."""
        _logger.debug("Creating station: %s", fields.to_payload())
        station = await self._run(MutationKind.CREATE, lambda: self._repository.insert(fields))
        _logger.debug("Station created successfully: id=%s", station.id)
        return station

    async def update(self, station_id: str, fields: StationFields) -> Station:
        """Write all of *fields* to the station with *station_id*."""
        _logger.debug("Updating station %s: %s", station_id, fields.to_payload())
        return await self._run(
            MutationKind.UPDATE,
            lambda: self._repository.update(station_id, fields),
            station_id=station_id,
        )

    async def delete(self, station_id: str) -> None:
        """Remove the station with *station_id*."""
        _logger.debug("Deleting station: %s", station_id)
        await self._run(
            MutationKind.DELETE,
            lambda: self._repository.delete(station_id),
            station_id=station_id,
        )
