"""Query state snapshots delivered to cache subscribers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from evconsole.exceptions import FetchError
from evconsole.models.station import Station


class QueryStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class QueryState:
    """Immutable view of the cache at one point in time.

    ``data`` and ``error`` are independent: after a failed refetch the
    last good collection is still present next to the error so the
    view can decide what to show.
    """

    key: tuple[str, ...]
    status: QueryStatus
    data: tuple[Station, ...] | None = None
    error: FetchError | None = None
    is_stale: bool = True
    is_fetching: bool = False
    updated_at: datetime | None = None
    error_at: datetime | None = None

    @property
    def is_loading(self) -> bool:
        """First load in progress (nothing to show yet)."""
        return self.is_fetching and self.data is None

    @property
    def stations(self) -> tuple[Station, ...]:
        return self.data if self.data is not None else ()
