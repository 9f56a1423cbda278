from __future__ import annotations

import asyncio

import pytest

from conftest import FakeStationBackend, RecordingNotifier
from evconsole.exceptions import EvConsoleApiError, MutationError
from evconsole.models.station import StationFields, StationStatus
from evconsole.mutations import StationMutations
from evconsole.notifications import MutationKind, NotificationVariant, failure_notification, success_notification
from evconsole.state.cache import StationQueryCache


def _fields(**overrides: object) -> StationFields:
    values: dict[str, object] = {
        "name": "Riverside",
        "location": "1 River Rd",
        "latitude": 51.5,
        "longitude": -0.12,
        "status": StationStatus.ACTIVE,
        "power_output": 150,
        "connector_type": "CHAdeMO",
    }
    values.update(overrides)
    return StationFields.model_validate(values)


def _setup(backend: FakeStationBackend, notifier: RecordingNotifier) -> tuple[StationQueryCache, StationMutations]:
    cache = StationQueryCache(backend)
    return cache, StationMutations(backend, cache, notifier=notifier)


@pytest.mark.asyncio
async def test_create_is_visible_on_next_read(backend: FakeStationBackend, notifier: RecordingNotifier) -> None:
    cache, mutations = _setup(backend, notifier)
    await cache.fetch_all()

    created = await mutations.create(_fields())

    assert cache.state.is_stale is True
    stations = await cache.fetch_all()
    assert stations[0].id == created.id
    assert stations[0].writable_fields() == _fields()
    assert notifier.received == [success_notification(MutationKind.CREATE)]


@pytest.mark.asyncio
async def test_delete_removes_id_from_next_read(backend: FakeStationBackend, notifier: RecordingNotifier) -> None:
    cache, mutations = _setup(backend, notifier)
    await cache.fetch_all()

    await mutations.delete("a")

    assert "a" not in [s.id for s in await cache.fetch_all()]
    assert notifier.received[-1].title == "Station Deleted"


@pytest.mark.asyncio
async def test_update_overwrites_writable_fields(backend: FakeStationBackend, notifier: RecordingNotifier) -> None:
    cache, mutations = _setup(backend, notifier)

    updated = await mutations.update("b", _fields(name="Mall Charger II", status=StationStatus.ACTIVE))

    assert updated.id == "b"
    assert updated.name == "Mall Charger II"
    reread = {s.id: s for s in await cache.fetch_all()}
    assert reread["b"].status == StationStatus.ACTIVE
    assert notifier.received == [success_notification(MutationKind.UPDATE)]


@pytest.mark.parametrize(
    ("kind", "op"),
    [(MutationKind.CREATE, "insert"), (MutationKind.UPDATE, "update"), (MutationKind.DELETE, "delete")],
)
@pytest.mark.asyncio
async def test_failure_notifies_raises_and_keeps_cache_fresh(
    backend: FakeStationBackend,
    notifier: RecordingNotifier,
    kind: MutationKind,
    op: str,
) -> None:
    cache, mutations = _setup(backend, notifier)
    await cache.fetch_all()
    backend.fail_on.add(op)

    with pytest.raises(MutationError) as exc_info:
        if kind == MutationKind.CREATE:
            await mutations.create(_fields())
        elif kind == MutationKind.UPDATE:
            await mutations.update("a", _fields())
        else:
            await mutations.delete("a")

    assert exc_info.value.operation == kind.value
    assert exc_info.value.__cause__ is not None
    assert cache.state.is_stale is False
    assert notifier.received == [failure_notification(kind)]
    assert notifier.received[0].variant == NotificationVariant.DESTRUCTIVE
    assert notifier.received[0].description == f"Failed to {kind.value} station. Please try again."
    assert not mutations.is_pending()


@pytest.mark.asyncio
async def test_update_of_missing_station_is_mutation_error(
    backend: FakeStationBackend, notifier: RecordingNotifier
) -> None:
    _, mutations = _setup(backend, notifier)

    with pytest.raises(MutationError) as exc_info:
        await mutations.update("missing", _fields())

    assert exc_info.value.station_id == "missing"
    assert isinstance(exc_info.value.__cause__, EvConsoleApiError)


@pytest.mark.asyncio
async def test_pending_flag_tracks_in_flight_mutation(
    backend: FakeStationBackend, notifier: RecordingNotifier
) -> None:
    _, mutations = _setup(backend, notifier)
    gate = asyncio.Event()
    original_delete = backend.delete

    async def _slow_delete(station_id: str) -> None:
        await gate.wait()
        await original_delete(station_id)

    backend.delete = _slow_delete  # type: ignore[method-assign]

    task = asyncio.create_task(mutations.delete("a"))
    await asyncio.sleep(0)
    assert mutations.is_pending(MutationKind.DELETE)
    assert not mutations.is_pending(MutationKind.CREATE)

    gate.set()
    await task
    assert not mutations.is_pending()


def test_six_fixed_message_pairs() -> None:
    titles = {kind: success_notification(kind).title for kind in MutationKind}
    assert titles == {
        MutationKind.CREATE: "Station Created",
        MutationKind.UPDATE: "Station Updated",
        MutationKind.DELETE: "Station Deleted",
    }
    assert {failure_notification(kind).title for kind in MutationKind} == {"Error"}
