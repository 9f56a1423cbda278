"""Data models for station records."""

from evconsole.models._base import ConsoleBaseModel, ConsoleEnum
from evconsole.models.requests import StationIdRequest, UpdateStationRequest
from evconsole.models.station import WRITABLE_FIELDS, Station, StationDraft, StationFields, StationStatus

__all__ = [
    "ConsoleBaseModel",
    "ConsoleEnum",
    "Station",
    "StationDraft",
    "StationFields",
    "StationIdRequest",
    "StationStatus",
    "UpdateStationRequest",
    "WRITABLE_FIELDS",
]
