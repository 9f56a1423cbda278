"""View switching between the list, map and form screens."""

from __future__ import annotations

from enum import StrEnum

from evconsole.models.station import Station
from evconsole.views.form import StationFormViewModel


class ActiveView(StrEnum):
    LIST = "list"
    MAP = "map"
    FORM = "form"


class ConsoleShell:
    """Routing state of the console. Owns no data of its own."""

    def __init__(self, form: StationFormViewModel) -> None:
        self._form = form
        self._active_view = ActiveView.LIST
        self._editing: Station | None = None

    @property
    def active_view(self) -> ActiveView:
        return self._active_view

    @property
    def editing_station(self) -> Station | None:
        return self._editing

    @property
    def form(self) -> StationFormViewModel:
        return self._form

    def change_view(self, view: ActiveView | str) -> None:
        self._active_view = ActiveView(view)

    def add_new_station(self) -> None:
        self._editing = None
        self._form.initialize(None)
        self._active_view = ActiveView.FORM

    def edit_station(self, station: Station) -> None:
        self._editing = station
        self._form.initialize(station)
        self._active_view = ActiveView.FORM

    def close_form(self) -> None:
        self._editing = None
        self._active_view = ActiveView.LIST
