"""Station table endpoints."""

from __future__ import annotations

import logging
from typing import Any

from evconsole._api._common import eq_filter, single_row, table_endpoint
from evconsole._constants import LIST_ORDER, RETURN_REPRESENTATION, SINGLE_OBJECT_ACCEPT
from evconsole._transport import Transport
from evconsole.config import ConsoleConfig
from evconsole.exceptions import EvConsoleApiError
from evconsole.models.station import Station, StationFields

_logger = logging.getLogger(__name__)

_SINGLE_HEADERS: dict[str, str] = {
    "accept": SINGLE_OBJECT_ACCEPT,
    "prefer": RETURN_REPRESENTATION,
}


def _parse_rows(endpoint: str, decoded: Any) -> list[Station]:
    if decoded is None:
        return []
    if not isinstance(decoded, list):
        raise EvConsoleApiError(
            f"{endpoint} returned an unexpected payload: {type(decoded).__name__}",
            code="invalid_payload",
            endpoint=endpoint,
        )
    return [Station.model_validate(row) for row in decoded]


async def fetch_stations(config: ConsoleConfig, transport: Transport) -> list[Station]:
    """Fetch every station, newest first."""
    endpoint = table_endpoint(config.table)
    decoded = await transport.request(
        "GET",
        endpoint,
        params={"select": "*", "order": LIST_ORDER},
    )
    stations = _parse_rows(endpoint, decoded)
    _logger.debug("Fetched %d stations", len(stations))
    return stations


async def insert_station(config: ConsoleConfig, transport: Transport, fields: StationFields) -> Station:
    """Insert one station and return the stored row (with server-assigned id)."""
    endpoint = table_endpoint(config.table)
    decoded = await transport.request(
        "POST",
        endpoint,
        params={"select": "*"},
        payload=[fields.to_payload()],
        headers=_SINGLE_HEADERS,
    )
    return Station.model_validate(single_row(endpoint, decoded))


async def update_station(
    config: ConsoleConfig,
    transport: Transport,
    station_id: str,
    fields: StationFields,
) -> Station:
    """Apply *fields* to the station with *station_id* and return the stored row."""
    endpoint = table_endpoint(config.table)
    decoded = await transport.request(
        "PATCH",
        endpoint,
        params={"id": eq_filter(station_id), "select": "*"},
        payload=fields.to_payload(),
        headers=_SINGLE_HEADERS,
    )
    return Station.model_validate(single_row(endpoint, decoded))


async def delete_station(config: ConsoleConfig, transport: Transport, station_id: str) -> None:
    """Delete the station with *station_id*."""
    endpoint = table_endpoint(config.table)
    await transport.request(
        "DELETE",
        endpoint,
        params={"id": eq_filter(station_id)},
    )
