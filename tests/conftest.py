from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from evconsole.exceptions import EvConsoleApiError, EvConsoleTransportError
from evconsole.models.station import Station, StationFields, StationStatus
from evconsole.notifications import Notification

_EPOCH = datetime(2026, 1, 1, tzinfo=UTC)


def make_station(station_id: str, **overrides: Any) -> Station:
    values: dict[str, Any] = {
        "id": station_id,
        "name": f"Station {station_id}",
        "location": "Main St",
        "latitude": 40.7128,
        "longitude": -74.006,
        "status": StationStatus.ACTIVE,
        "power_output": 50,
        "connector_type": "CCS",
        "created_at": _EPOCH,
    }
    values.update(overrides)
    return Station.model_validate(values)


@dataclass
class FakeStationBackend:
    """In-memory stand-in for the stations table (implements StationRepository)."""

    rows: list[Station] = field(default_factory=list)
    calls: dict[str, int] = field(default_factory=dict)
    fail_on: set[str] = field(default_factory=set)
    list_gate: asyncio.Event | None = None
    _next_id: int = 1

    def _record_call(self, name: str) -> None:
        self.calls[name] = self.calls.get(name, 0) + 1
        if name in self.fail_on:
            raise EvConsoleTransportError(f"{name} failed", status_code=503, endpoint="/stations")

    async def list(self) -> list[Station]:
        self._record_call("list")
        if self.list_gate is not None:
            await self.list_gate.wait()
        return sorted(self.rows, key=lambda s: s.created_at or _EPOCH, reverse=True)

    async def insert(self, fields: StationFields) -> Station:
        self._record_call("insert")
        station_id = f"st-{self._next_id}"
        latest = max((row.created_at for row in self.rows if row.created_at is not None), default=_EPOCH)
        created_at = latest + timedelta(minutes=1)
        self._next_id += 1
        station = Station.model_validate(
            {**fields.to_payload(), "id": station_id, "created_at": created_at, "updated_at": created_at}
        )
        self.rows.append(station)
        return station

    async def update(self, station_id: str, fields: StationFields) -> Station:
        self._record_call("update")
        for index, row in enumerate(self.rows):
            if row.id == station_id:
                updated = Station.model_validate({**row.model_dump(), **fields.to_payload()})
                self.rows[index] = updated
                return updated
        raise EvConsoleApiError("no rows", code="PGRST116", endpoint="/stations")

    async def delete(self, station_id: str) -> None:
        self._record_call("delete")
        self.rows = [row for row in self.rows if row.id != station_id]


@dataclass
class RecordingNotifier:
    received: list[Notification] = field(default_factory=list)

    def notify(self, notification: Notification) -> None:
        self.received.append(notification)


@pytest.fixture
def backend() -> FakeStationBackend:
    return FakeStationBackend(
        rows=[
            make_station(
                "a",
                name="Downtown Hub",
                location="5th Ave",
                status=StationStatus.ACTIVE,
                connector_type="CCS",
                created_at=_EPOCH + timedelta(days=2),
            ),
            make_station(
                "b",
                name="Mall Charger",
                location="Oak Rd",
                status=StationStatus.INACTIVE,
                connector_type="Type 2",
                created_at=_EPOCH + timedelta(days=1),
            ),
        ]
    )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
