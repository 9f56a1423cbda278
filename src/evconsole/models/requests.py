"""Pydantic request models for repository entrypoints.

These models provide a consistent "validate → normalize → execute" flow.
They are used internally by :class:`evconsole.client.StationClient`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from evconsole.models.station import StationFields


class StationIdRequest(BaseModel):
    """Request addressing a single station by id."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )

    station_id: str

    @field_validator("station_id")
    @classmethod
    def _station_id_non_empty(cls, value: str) -> str:
        station_id = value.strip()
        if not station_id:
            raise ValueError("station_id must be non-empty")
        return station_id


class UpdateStationRequest(StationIdRequest):
    changes: StationFields
