"""Create/edit form view model."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from evconsole.exceptions import FormBusyError, MutationError
from evconsole.models.station import WRITABLE_FIELDS, Station, StationDraft
from evconsole.mutations import StationMutations

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NewStation:
    """The draft will be inserted as a new station."""


@dataclass(frozen=True, slots=True)
class EditingStation:
    """The draft edits the existing station ``station_id``."""

    station_id: str


DraftOrigin = NewStation | EditingStation


class FormState(StrEnum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SETTLED = "settled"


class StationFormViewModel:
    """Draft holder for the add/edit station form.

    The draft is only changed through :meth:`set_field` and
    :meth:`initialize`; a failed :meth:`submit` leaves it exactly as it
    was so the operator can retry without re-entering data.
    """

    def __init__(
        self,
        mutations: StationMutations,
        *,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        self._mutations = mutations
        self._on_close = on_close
        self._draft = StationDraft()
        self._origin: DraftOrigin = NewStation()
        self._state = FormState.IDLE
        self._last_error: MutationError | None = None
        # Bumped by initialize(); responses for an older generation are ignored.
        self._generation = 0

    def initialize(self, existing: Station | None = None) -> None:
        """Start a new draft, seeded from *existing* when editing."""
        self._generation += 1
        if existing is None:
            self._draft = StationDraft()
            self._origin = NewStation()
        else:
            self._draft = StationDraft.from_station(existing)
            self._origin = EditingStation(station_id=existing.id)
        self._state = FormState.IDLE
        self._last_error = None

    @property
    def draft(self) -> StationDraft:
        """A copy of the current draft."""
        return self._draft.model_copy()

    @property
    def origin(self) -> DraftOrigin:
        return self._origin

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def last_error(self) -> MutationError | None:
        return self._last_error

    @property
    def is_editing(self) -> bool:
        return isinstance(self._origin, EditingStation)

    @property
    def is_submitting(self) -> bool:
        return self._state == FormState.SUBMITTING

    @property
    def title(self) -> str:
        return "Edit Station" if self.is_editing else "Add New Station"

    @property
    def description(self) -> str:
        if self.is_editing:
            return "Update the station information below."
        return "Fill in the details to add a new charging station."

    @property
    def submit_label(self) -> str:
        if self.is_submitting:
            return "Updating..." if self.is_editing else "Creating..."
        return "Update Station" if self.is_editing else "Create Station"

    def set_field(self, name: str, value: Any) -> None:
        """Set one draft field; numeric input that does not parse becomes ``0``."""
        if name not in WRITABLE_FIELDS:
            raise ValueError(f"Unknown station field {name!r}; expected one of {WRITABLE_FIELDS}")
        setattr(self._draft, name, value)

    async def submit(self) -> Station:
        """Insert or update depending on :attr:`origin`.

        On success the ``on_close`` callback runs and the station cache is
        invalidated (by :class:`StationMutations`). On failure the
        :class:`MutationError` is stored in :attr:`last_error` and re-raised.

        Raises
        ------
        FormBusyError
            If a submission is already in flight.
        MutationError
            If the backend rejected the write.
        """
        if self._state == FormState.SUBMITTING:
            raise FormBusyError("A submission is already in progress")

        generation = self._generation
        origin = self._origin
        fields = self._draft.to_fields()
        self._state = FormState.SUBMITTING
        self._last_error = None

        try:
            if isinstance(origin, EditingStation):
                station = await self._mutations.update(origin.station_id, fields)
            else:
                station = await self._mutations.create(fields)
        except MutationError as exc:
            if generation == self._generation:
                self._last_error = exc
            _logger.debug("Form submission error: %s", exc)
            raise
        finally:
            if generation == self._generation:
                self._state = FormState.SETTLED

        if generation != self._generation:
            _logger.debug("Ignoring submit result for a form that was re-initialized")
            return station

        if self._on_close is not None:
            self._on_close()
        return station
