"""Repository interface consumed by the cache, mutations and view models.

:class:`evconsole.client.StationClient` is the production implementation;
tests substitute in-memory fakes.
"""

from __future__ import annotations

from typing import Protocol

from evconsole.models.station import Station, StationFields


class StationRepository(Protocol):
    """List/insert/update/delete access to the stations resource.

    Implementations raise :class:`evconsole.exceptions.EvConsoleError`
    subclasses on failure. ``list`` returns stations ordered by
    ``created_at`` descending.
    """

    async def list(self) -> list[Station]:
        ...

    async def insert(self, fields: StationFields) -> Station:
        ...

    async def update(self, station_id: str, fields: StationFields) -> Station:
        ...

    async def delete(self, station_id: str) -> None:
        ...
