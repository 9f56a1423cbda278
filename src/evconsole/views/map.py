"""Placeholder map view model.

No map provider is integrated. The model projects the station
collection to marker data and tracks which station is shown in the
details panel, which is everything a real map widget would need.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from evconsole._constants import FETCH_ERROR_HINT, FETCH_ERROR_TITLE, LOADING_MAP_TEXT
from evconsole.models.station import Station, StationStatus
from evconsole.state.events import QueryState

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MapMarker:
    station_id: str
    name: str
    latitude: float
    longitude: float
    active: bool


@dataclass(frozen=True, slots=True)
class MapScreen:
    markers: tuple[MapMarker, ...] = ()
    caption: str = ""
    loading_text: str | None = None
    error_title: str | None = None
    error_hint: str | None = None


def markers_for(stations: Sequence[Station]) -> tuple[MapMarker, ...]:
    return tuple(
        MapMarker(
            station_id=station.id,
            name=station.name,
            latitude=station.latitude,
            longitude=station.longitude,
            active=station.status == StationStatus.ACTIVE,
        )
        for station in stations
    )


class MapViewModel:
    """Marker projection plus the selected-station details panel."""

    def __init__(self) -> None:
        self._stations: tuple[Station, ...] = ()
        self._selected_id: str | None = None

    @property
    def selected(self) -> Station | None:
        if self._selected_id is None:
            return None
        for station in self._stations:
            if station.id == self._selected_id:
                return station
        return None

    def select(self, station_id: str | None) -> Station | None:
        """Show *station_id* in the details panel (``None`` clears it)."""
        self._selected_id = station_id
        return self.selected

    def screen(self, state: QueryState) -> MapScreen:
        if state.is_loading:
            return MapScreen(loading_text=LOADING_MAP_TEXT)
        if state.error is not None and not state.is_fetching:
            return MapScreen(error_title=FETCH_ERROR_TITLE, error_hint=FETCH_ERROR_HINT)
        self._stations = state.stations
        if self._selected_id is not None and self.selected is None:
            # The selected station was deleted since the last render.
            self._selected_id = None
        if self._stations:
            _logger.debug("Map would be initialized with %d stations", len(self._stations))
        return MapScreen(
            markers=markers_for(self._stations),
            caption=f"{len(self._stations)} stations would be shown as markers",
        )
