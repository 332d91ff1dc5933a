"""Dashboard loop: the single consumer of the packet queue.

Each packet is processed in one critical section: apply it to the store,
format the new snapshot and draw it, then release the lock. Only one
aggregate-and-render cycle is ever in flight and the renderer never sees a
partially applied update.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from f1dash.exceptions import F1DashQueueClosedError, F1DashRenderError
from f1dash.ingestion.queue import PacketQueue
from f1dash.models.packets import Packet
from f1dash.models.race import RaceState
from f1dash.presentation.formatter import build_view
from f1dash.presentation.renderer import Renderer
from f1dash.presentation.view import DashboardView
from f1dash.state.store import RaceStateStore

_logger = logging.getLogger(__name__)


class Dashboard:
    """Drains a :class:`PacketQueue` into a store and a renderer."""

    def __init__(
        self,
        queue: PacketQueue,
        renderer: Renderer,
        *,
        store: RaceStateStore | None = None,
        formatter: Callable[[RaceState], DashboardView] = build_view,
    ) -> None:
        self._queue = queue
        self._renderer = renderer
        self._store = store if store is not None else RaceStateStore()
        self._formatter = formatter

    @property
    def store(self) -> RaceStateStore:
        return self._store

    async def process(self, packet: Packet) -> RaceState:
        """Apply, format and render one packet under the store lock.

        Raises
        ------
        F1DashRenderError
            The renderer failed. Not retried.
        """
        async with self._store.exclusive() as store:
            state = store.apply(packet)
            view = self._formatter(state)
            try:
                self._renderer.render(view)
            except F1DashRenderError:
                raise
            except Exception as exc:
                raise F1DashRenderError(f"renderer failed on {packet.kind} packet: {exc}") from exc
        return state

    async def run(self) -> None:
        """Process packets until the queue is closed.

        A render failure propagates and ends the loop.
        """
        _logger.debug("Dashboard loop started")
        while True:
            try:
                packet = await self._queue.get()
            except F1DashQueueClosedError:
                _logger.debug("Packet queue closed; dashboard loop exiting")
                return
            await self.process(packet)
