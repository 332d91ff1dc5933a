"""Bounded packet queue between the receive loop and the dashboard loop.

The receive loop calls :meth:`PacketQueue.offer` straight from the datagram
callback, so packets enter in arrival order and there is exactly one
producer and one consumer. When the dashboard cannot keep pace the queue
fills up and the configured :class:`OverflowPolicy` decides which packet
is lost.
"""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from typing import Final

from f1dash.exceptions import F1DashQueueClosedError
from f1dash.models.packets import Packet

_logger = logging.getLogger(__name__)

_CLOSED: Final = object()
_WARN_EVERY = 100


class OverflowPolicy(StrEnum):
    """What to discard when the queue is full.

    The producer is a synchronous datagram callback and cannot wait for
    space, so both policies drop.
    """

    DROP_OLDEST = "drop_oldest"
    DROP_NEWEST = "drop_newest"


class PacketQueue:
    """Single-consumer FIFO with a fixed capacity."""

    def __init__(self, maxsize: int, *, overflow: OverflowPolicy = OverflowPolicy.DROP_OLDEST) -> None:
        if maxsize <= 0:
            raise ValueError(f"maxsize must be positive, got {maxsize}")
        self._maxsize = maxsize
        self._overflow = overflow
        self._queue: asyncio.Queue[object] = asyncio.Queue(maxsize)
        self._closed = False
        self._dropped = 0

    @property
    def maxsize(self) -> int:
        return self._maxsize

    @property
    def overflow(self) -> OverflowPolicy:
        return self._overflow

    @property
    def dropped(self) -> int:
        """Packets discarded because the queue was full."""
        return self._dropped

    @property
    def closed(self) -> bool:
        return self._closed

    def qsize(self) -> int:
        return self._queue.qsize()

    def _record_drop(self) -> None:
        self._dropped += 1
        if self._dropped == 1 or self._dropped % _WARN_EVERY == 0:
            _logger.warning(
                "Packet queue full (maxsize=%s, policy=%s); %s packets dropped so far",
                self._maxsize,
                self._overflow,
                self._dropped,
            )
        else:
            _logger.debug("Packet queue full; dropped packet #%s", self._dropped)

    def offer(self, packet: Packet) -> bool:
        """Enqueue *packet* without waiting.

        Returns ``False`` when the packet itself was dropped, ``True`` when
        it was enqueued (possibly after evicting the oldest packet).

        Raises
        ------
        F1DashQueueClosedError
            The consumer has gone away.
        """
        if self._closed:
            raise F1DashQueueClosedError("packet queue is closed")

        if self._queue.full():
            if self._overflow == OverflowPolicy.DROP_NEWEST:
                self._record_drop()
                return False
            self._queue.get_nowait()
            self._record_drop()

        self._queue.put_nowait(packet)
        return True

    async def get(self) -> Packet:
        """Wait for the next packet.

        Raises
        ------
        F1DashQueueClosedError
            The queue was closed; pending packets ahead of the close are
            still delivered first.
        """
        item = await self._queue.get()
        if item is _CLOSED:
            # Leave the marker for any later get() call.
            self._queue.put_nowait(_CLOSED)
            raise F1DashQueueClosedError("packet queue is closed")
        return item  # type: ignore[return-value]

    def close(self) -> None:
        """Stop accepting packets and wake the consumer once the backlog drains."""
        if self._closed:
            return
        self._closed = True
        if self._queue.full():
            # The close marker needs a slot; the oldest packet gives it up.
            self._queue.get_nowait()
            self._record_drop()
        self._queue.put_nowait(_CLOSED)
