"""Station list filtering.

:func:`derive_view` is the whole filtering algorithm: a pure function of
the collection and the three filter inputs. :class:`StationListView`
only stores the current inputs and calls it again whenever one of them
changes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, field_validator

from evconsole._constants import (
    EMPTY_RESULT_TEXT,
    FETCH_ERROR_HINT,
    FETCH_ERROR_TITLE,
    FILTER_ALL,
    LOADING_STATIONS_TEXT,
)
from evconsole.models.station import Station, StationStatus
from evconsole.state.events import QueryState


class StationFilters(BaseModel):
    """The three independent list filters.

    ``status`` is ``"all"`` or a :class:`StationStatus` value;
    ``connector`` is ``"all"`` or any connector string.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    search_term: str = ""
    status: str = FILTER_ALL
    connector: str = FILTER_ALL

    @field_validator("status")
    @classmethod
    def _known_status(cls, value: str) -> str:
        if value != FILTER_ALL and value not in {s.value for s in StationStatus}:
            raise ValueError(f"status filter must be 'all' or one of {[s.value for s in StationStatus]}")
        return value

    @property
    def is_active(self) -> bool:
        return bool(self.search_term) or self.status != FILTER_ALL or self.connector != FILTER_ALL


def _matches_search(station: Station, needle: str) -> bool:
    return needle in station.name.lower() or needle in station.location.lower()


def derive_view(collection: Iterable[Station], filters: StationFilters) -> list[Station]:
    """Stations of *collection* passing every active filter, in their original order."""
    needle = filters.search_term.lower()
    result: list[Station] = []
    for station in collection:
        if needle and not _matches_search(station, needle):
            continue
        if filters.status != FILTER_ALL and station.status != filters.status:
            continue
        if filters.connector != FILTER_ALL and station.connector_type != filters.connector:
            continue
        result.append(station)
    return result


@dataclass(frozen=True, slots=True)
class ListScreen:
    """What the list view should render for one query state."""

    stations: tuple[Station, ...] = ()
    loading_text: str | None = None
    error_title: str | None = None
    error_hint: str | None = None
    empty_text: str | None = None

    @property
    def summary(self) -> str:
        return f"{len(self.stations)} stations found"


class StationListView:
    """Holds the list inputs and the derived sequence.

    Every setter recomputes the full view from the full collection.
    """

    def __init__(self, collection: Sequence[Station] = (), filters: StationFilters | None = None) -> None:
        self._collection: tuple[Station, ...] = tuple(collection)
        self._filters = filters if filters is not None else StationFilters()
        self._view: list[Station] = []
        self._recompute()

    @property
    def filters(self) -> StationFilters:
        return self._filters

    @property
    def stations(self) -> list[Station]:
        return list(self._view)

    def _recompute(self) -> None:
        self._view = derive_view(self._collection, self._filters)

    def set_collection(self, collection: Sequence[Station]) -> None:
        self._collection = tuple(collection)
        self._recompute()

    def set_search_term(self, search_term: str) -> None:
        self._filters = self._filters.model_copy(update={"search_term": search_term})
        self._recompute()

    def set_status_filter(self, status: str) -> None:
        # Validate through the model so unknown statuses are rejected.
        self._filters = StationFilters(**{**self._filters.model_dump(), "status": status})
        self._recompute()

    def set_connector_filter(self, connector: str) -> None:
        self._filters = self._filters.model_copy(update={"connector": connector})
        self._recompute()

    def reset_filters(self) -> None:
        self._filters = StationFilters()
        self._recompute()

    def screen(self, state: QueryState) -> ListScreen:
        """Screen content for *state*; a fetch error replaces the list entirely."""
        if state.is_loading:
            return ListScreen(loading_text=LOADING_STATIONS_TEXT)
        if state.error is not None and not state.is_fetching:
            return ListScreen(error_title=FETCH_ERROR_TITLE, error_hint=FETCH_ERROR_HINT)
        self.set_collection(state.stations)
        view = tuple(self._view)
        return ListScreen(stations=view, empty_text=EMPTY_RESULT_TEXT if not view else None)
