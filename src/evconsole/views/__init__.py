"""View models for the list, map and form screens."""

from evconsole.views.filters import ListScreen, StationFilters, StationListView, derive_view
from evconsole.views.form import DraftOrigin, EditingStation, FormState, NewStation, StationFormViewModel
from evconsole.views.map import MapMarker, MapScreen, MapViewModel
from evconsole.views.shell import ActiveView, ConsoleShell

__all__ = [
    "ActiveView",
    "ConsoleShell",
    "DraftOrigin",
    "EditingStation",
    "FormState",
    "ListScreen",
    "MapMarker",
    "MapScreen",
    "MapViewModel",
    "NewStation",
    "StationFilters",
    "StationFormViewModel",
    "StationListView",
    "derive_view",
]
