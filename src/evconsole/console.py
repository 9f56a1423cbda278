"""Composition root wiring repository, cache, mutations and views."""

from __future__ import annotations

import logging
from typing import Any

from evconsole.client import StationClient
from evconsole.config import ConsoleConfig
from evconsole.mutations import StationMutations
from evconsole.notifications import Notifier
from evconsole.repository import StationRepository
from evconsole.state.cache import StationQueryCache
from evconsole.views.filters import ListScreen, StationListView
from evconsole.views.form import StationFormViewModel
from evconsole.views.map import MapScreen, MapViewModel
from evconsole.views.shell import ConsoleShell

_logger = logging.getLogger(__name__)


class StationConsole:
    """One operator console: a single cache shared by every screen.

    Usage::

        async with StationConsole.connect(ConsoleConfig.from_env()) as console:
            screen = await console.list_screen()
            console.list_view.set_search_term("mall")
    """

    def __init__(
        self,
        repository: StationRepository,
        *,
        notifier: Notifier | None = None,
    ) -> None:
        self.repository = repository
        self.cache = StationQueryCache(repository)
        self.mutations = StationMutations(repository, self.cache, notifier=notifier)
        self.form = StationFormViewModel(self.mutations, on_close=self._on_form_closed)
        self.shell = ConsoleShell(self.form)
        self.list_view = StationListView()
        self.map_view = MapViewModel()
        self._owned_client: StationClient | None = None

    @classmethod
    def connect(cls, config: ConsoleConfig, *, notifier: Notifier | None = None) -> StationConsole:
        """Console backed by a :class:`StationClient` it opens and closes itself."""
        client = StationClient(config)
        console = cls(client, notifier=notifier)
        console._owned_client = client
        return console

    async def __aenter__(self) -> StationConsole:
        if self._owned_client is not None:
            await self._owned_client.__aenter__()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if self._owned_client is not None:
            await self._owned_client.__aexit__(*exc)

    def _on_form_closed(self) -> None:
        _logger.debug("Form closed, returning to list view")
        self.shell.close_form()

    async def list_screen(self) -> ListScreen:
        state = await self.cache.load()
        return self.list_view.screen(state)

    async def map_screen(self) -> MapScreen:
        state = await self.cache.load()
        return self.map_view.screen(state)

    async def delete_station(self, station_id: str) -> None:
        """Delete from the list screen; failures are notified and re-raised."""
        await self.mutations.delete(station_id)
