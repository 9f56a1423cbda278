"""evconsole - Async data layer for an EV charging station admin console."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("evconsole")
except PackageNotFoundError:
    __version__ = "0+local"
from evconsole.client import StationClient
from evconsole.config import ConsoleConfig
from evconsole.console import StationConsole
from evconsole.exceptions import (
    EvConsoleApiError,
    EvConsoleConfigError,
    EvConsoleError,
    EvConsoleTransportError,
    FetchError,
    FormBusyError,
    MutationError,
)
from evconsole.models import Station, StationDraft, StationFields, StationStatus
from evconsole.mutations import StationMutations
from evconsole.notifications import LoggingNotifier, MutationKind, Notification, Notifier
from evconsole.repository import StationRepository
from evconsole.state.cache import StationQueryCache
from evconsole.state.events import QueryState, QueryStatus
from evconsole.views import (
    ActiveView,
    ConsoleShell,
    EditingStation,
    FormState,
    MapViewModel,
    NewStation,
    StationFilters,
    StationFormViewModel,
    StationListView,
    derive_view,
)

__all__ = [
    "__version__",
    "ActiveView",
    "ConsoleConfig",
    "ConsoleShell",
    "EditingStation",
    "EvConsoleApiError",
    "EvConsoleConfigError",
    "EvConsoleError",
    "EvConsoleTransportError",
    "FetchError",
    "FormBusyError",
    "FormState",
    "LoggingNotifier",
    "MapViewModel",
    "MutationError",
    "MutationKind",
    "NewStation",
    "Notification",
    "Notifier",
    "QueryState",
    "QueryStatus",
    "Station",
    "StationClient",
    "StationConsole",
    "StationDraft",
    "StationFields",
    "StationFilters",
    "StationFormViewModel",
    "StationListView",
    "StationMutations",
    "StationQueryCache",
    "StationRepository",
    "StationStatus",
    "derive_view",
]
