"""High-level async client for the stations table."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from evconsole._api import stations as _stations_api
from evconsole._transport import RestTransport, Transport
from evconsole.config import ConsoleConfig
from evconsole.exceptions import EvConsoleError
from evconsole.models.requests import StationIdRequest, UpdateStationRequest
from evconsole.models.station import Station, StationFields

_logger = logging.getLogger(__name__)


class StationClient:
    """Async client for the remote stations table.

    Implements :class:`evconsole.repository.StationRepository`.

    Usage::

        async with StationClient(config) as client:
            stations = await client.list()
    """

    def __init__(
        self,
        config: ConsoleConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> StationClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = RestTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    @property
    def config(self) -> ConsoleConfig:
        return self._config

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise EvConsoleError("Client not initialized. Use 'async with StationClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Repository operations
    # ------------------------------------------------------------------

    async def list(self) -> list[Station]:
        """Fetch all stations ordered by ``created_at`` descending."""
        transport = self._require_transport()
        _logger.debug("Fetching stations from table=%s", self._config.table)
        return await _stations_api.fetch_stations(self._config, transport)

    async def insert(self, fields: StationFields) -> Station:
        """Create a station; the backend assigns ``id`` and timestamps."""
        transport = self._require_transport()
        _logger.debug("Creating station name=%r", fields.name)
        station = await _stations_api.insert_station(self._config, transport, fields)
        _logger.debug("Station created id=%s", station.id)
        return station

    async def update(self, station_id: str, fields: StationFields) -> Station:
        """Overwrite the writable fields of an existing station."""
        request = UpdateStationRequest(station_id=station_id, changes=fields)
        transport = self._require_transport()
        _logger.debug("Updating station id=%s", request.station_id)
        return await _stations_api.update_station(self._config, transport, request.station_id, request.changes)

    async def delete(self, station_id: str) -> None:
        """Delete a station by id."""
        request = StationIdRequest(station_id=station_id)
        transport = self._require_transport()
        _logger.debug("Deleting station id=%s", request.station_id)
        await _stations_api.delete_station(self._config, transport, request.station_id)
