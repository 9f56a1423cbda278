from __future__ import annotations

import pytest

from conftest import FakeStationBackend, RecordingNotifier
from evconsole.console import StationConsole
from evconsole.exceptions import MutationError
from evconsole.views.shell import ActiveView


@pytest.mark.asyncio
async def test_edit_flow_returns_to_list_and_shows_change(
    backend: FakeStationBackend, notifier: RecordingNotifier
) -> None:
    console = StationConsole(backend, notifier=notifier)
    screen = await console.list_screen()
    assert screen.summary == "2 stations found"

    console.shell.edit_station(screen.stations[1])
    assert console.shell.active_view == ActiveView.FORM
    assert console.shell.editing_station is not None

    console.form.set_field("name", "Mall Charger Plus")
    await console.form.submit()

    assert console.shell.active_view == ActiveView.LIST
    assert console.shell.editing_station is None
    screen = await console.list_screen()
    assert "Mall Charger Plus" in [s.name for s in screen.stations]
    assert backend.calls["list"] == 2


@pytest.mark.asyncio
async def test_add_new_flow_and_filters_apply_to_refreshed_list(
    backend: FakeStationBackend, notifier: RecordingNotifier
) -> None:
    console = StationConsole(backend, notifier=notifier)
    console.list_view.set_connector_filter("CHAdeMO")
    assert (await console.list_screen()).stations == ()

    console.shell.add_new_station()
    console.form.set_field("name", "Quick Stop")
    console.form.set_field("connector_type", "CHAdeMO")
    await console.form.submit()

    screen = await console.list_screen()
    assert [s.name for s in screen.stations] == ["Quick Stop"]


@pytest.mark.asyncio
async def test_fetch_error_replaces_list_and_map(backend: FakeStationBackend, notifier: RecordingNotifier) -> None:
    backend.fail_on.add("list")
    console = StationConsole(backend, notifier=notifier)

    list_screen = await console.list_screen()
    console.shell.change_view("map")
    map_screen = await console.map_screen()

    assert list_screen.error_title == "Error loading stations"
    assert map_screen.error_hint == "Please try refreshing the page"
    assert map_screen.markers == ()
    assert console.shell.active_view == ActiveView.MAP


@pytest.mark.asyncio
async def test_failed_submit_keeps_form_open(backend: FakeStationBackend, notifier: RecordingNotifier) -> None:
    console = StationConsole(backend, notifier=notifier)
    console.shell.add_new_station()
    console.form.set_field("name", "Unsaved")
    backend.fail_on.add("insert")

    with pytest.raises(MutationError):
        await console.form.submit()

    assert console.shell.active_view == ActiveView.FORM
    assert console.form.draft.name == "Unsaved"


@pytest.mark.asyncio
async def test_map_markers_and_selection_follow_deletes(
    backend: FakeStationBackend, notifier: RecordingNotifier
) -> None:
    console = StationConsole(backend, notifier=notifier)
    screen = await console.map_screen()

    assert screen.caption == "2 stations would be shown as markers"
    assert [(m.station_id, m.active) for m in screen.markers] == [("a", True), ("b", False)]

    selected = console.map_view.select("b")
    assert selected is not None and selected.name == "Mall Charger"

    await console.delete_station("b")
    screen = await console.map_screen()

    assert console.map_view.selected is None
    assert [m.station_id for m in screen.markers] == ["a"]


def test_cancel_from_form_returns_to_list(backend: FakeStationBackend, notifier: RecordingNotifier) -> None:
    console = StationConsole(backend, notifier=notifier)
    console.shell.add_new_station()
    console.shell.close_form()
    assert console.shell.active_view == ActiveView.LIST
