"""Single owner of the live race-state snapshot.

The store pairs the current :class:`RaceState` with an :class:`asyncio.Lock`.
Callers take the lock once per packet with :meth:`RaceStateStore.exclusive`
and keep it across aggregation *and* rendering, so nothing else can swap the
snapshot while a frame is being drawn.
"""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import AsyncIterator

from f1dash.models.packets import Packet
from f1dash.models.race import RaceState
from f1dash.state.aggregator import apply_packet


class RaceStateStore:
    """In-memory store for the merged race state.

    Deterministic: the same packet sequence always produces the same
    snapshot.
    """

    def __init__(self, state: RaceState | None = None) -> None:
        self._state = state if state is not None else RaceState()
        self._lock = asyncio.Lock()
        self._applied = 0

    @property
    def snapshot(self) -> RaceState:
        """The current snapshot. Immutable; safe to hold after the lock is released."""
        return self._state

    @property
    def packets_applied(self) -> int:
        return self._applied

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    @contextlib.asynccontextmanager
    async def exclusive(self) -> AsyncIterator[RaceStateStore]:
        """Hold the store lock for one aggregate-and-render cycle."""
        async with self._lock:
            yield self

    def apply(self, packet: Packet) -> RaceState:
        """Apply *packet* and return the new snapshot.

        Must be called inside :meth:`exclusive`.
        """
        if not self._lock.locked():
            raise RuntimeError("RaceStateStore.apply() called without holding the store lock")
        self._state = apply_packet(self._state, packet)
        self._applied += 1
        return self._state
