"""Charging station models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from evconsole._constants import DEFAULT_CONNECTOR_TYPE, DEFAULT_POWER_OUTPUT_KW
from evconsole.ingestion.normalize import coerce_float, coerce_int, safe_str
from evconsole.models._base import ConsoleBaseModel, ConsoleEnum


class StationStatus(ConsoleEnum):
    """Operational status of a charging station."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class StationFields(ConsoleBaseModel):
    """The client-writable attributes of a station.

    Insert and update payloads are built exclusively from these fields;
    ``id``, ``created_at`` and ``updated_at`` belong to the server.

    Parameters
    ----------
    name : str
        Display name, e.g. ``"Downtown Charging Hub"``.
    location : str
        Free-text address.
    latitude : float
        Latitude in degrees.
    longitude : float
        Longitude in degrees.
    status : StationStatus
        ``Active`` or ``Inactive``.
    power_output : int
        Rated power in kW.
    connector_type : str
        Plug standard. Usually one of ``KNOWN_CONNECTOR_TYPES`` but not
        enforced by the backend.
    """

    name: str
    location: str
    latitude: float
    longitude: float
    status: StationStatus
    power_output: int
    connector_type: str

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict of the writable fields only."""
        return self.model_dump(mode="json", include=set(WRITABLE_FIELDS))


WRITABLE_FIELDS: tuple[str, ...] = tuple(StationFields.model_fields)


class Station(StationFields):
    """A charging station record as stored by the backend."""

    id: str = Field(..., min_length=1)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # Integer or UUID primary keys are both treated as opaque strings.
        return safe_str(value) if value is not None else value

    def writable_fields(self) -> StationFields:
        """Copy of this station's client-writable attributes."""
        return StationFields.model_validate(self.to_payload())


class StationDraft(StationFields):
    """Mutable, unsaved copy of a station's fields held by a form.

    Assignments are validated: numeric fields coerce unparseable input
    (``"abc"``, ``""``) to ``0`` instead of rejecting it and keep a
    numeric prefix (``"12abc"`` is ``12``). Text fields accept anything
    ``str()``-able.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True, extra="forbid")

    name: str = ""
    location: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    status: StationStatus = StationStatus.ACTIVE
    power_output: int = DEFAULT_POWER_OUTPUT_KW
    connector_type: str = DEFAULT_CONNECTOR_TYPE

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _coerce_coordinates(cls, value: Any) -> float:
        return coerce_float(value)

    @field_validator("power_output", mode="before")
    @classmethod
    def _coerce_power(cls, value: Any) -> int:
        return coerce_int(value)

    @field_validator("name", "location", "connector_type", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return safe_str(value) or ""

    @classmethod
    def from_station(cls, station: StationFields) -> StationDraft:
        """Seed a draft with the writable values of an existing record."""
        return cls.model_validate(station.to_payload())

    def to_fields(self) -> StationFields:
        """Freeze the current draft values."""
        return StationFields.model_validate(self.to_payload())
