"""UDP receive loop.

:class:`TelemetryReceiver` is an asyncio datagram protocol: every datagram
is decoded and offered to the :class:`~f1dash.ingestion.queue.PacketQueue`
directly from the receive callback. Nothing on this path raises into the
event loop; network errors, undecodable datagrams and a closed queue are
logged and the receiver keeps listening.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from f1dash.exceptions import F1DashDecodeError, F1DashQueueClosedError
from f1dash.ingestion.decode import decode_packet
from f1dash.ingestion.queue import PacketQueue
from f1dash.models.packets import Packet

Decoder = Callable[[bytes], Packet]


class TelemetryReceiver(asyncio.DatagramProtocol):
    """Datagram protocol feeding decoded packets into a queue."""

    def __init__(
        self,
        queue: PacketQueue,
        *,
        decoder: Decoder = decode_packet,
        logger: logging.Logger | None = None,
    ) -> None:
        self._queue = queue
        self._decoder = decoder
        self._logger = logger or logging.getLogger(__name__)
        self._transport: asyncio.DatagramTransport | None = None
        self.received = 0
        self.decode_failures = 0
        self.delivery_failures = 0

    @property
    def is_running(self) -> bool:
        return self._transport is not None and not self._transport.is_closing()

    def connection_made(self, transport: asyncio.BaseTransport) -> None:
        self._transport = transport  # type: ignore[assignment]
        self._logger.debug("UDP listener ready on %s", transport.get_extra_info("sockname"))

    def datagram_received(self, data: bytes, addr: Any) -> None:
        self.received += 1
        try:
            packet = self._decoder(data)
        except (F1DashDecodeError, ValidationError):
            self.decode_failures += 1
            self._logger.debug("Undecodable datagram from %s (%s bytes)", addr, len(data), exc_info=True)
            return

        try:
            self._queue.offer(packet)
        except F1DashQueueClosedError:
            self.delivery_failures += 1
            self._logger.warning("Dropping %s packet: dashboard consumer is gone", packet.kind)

    def error_received(self, exc: Exception) -> None:
        self._logger.warning("Error when receiving UDP packet: %s", exc)

    def connection_lost(self, exc: Exception | None) -> None:
        if exc is not None:
            self._logger.warning("UDP listener closed with error: %s", exc)
        else:
            self._logger.debug("UDP listener closed")
        self._transport = None


async def open_receiver(
    host: str,
    port: int,
    queue: PacketQueue,
    *,
    decoder: Decoder = decode_packet,
) -> tuple[asyncio.DatagramTransport, TelemetryReceiver]:
    """Bind the UDP endpoint and start feeding *queue*.

    The caller owns the returned transport and must close it.
    """
    loop = asyncio.get_running_loop()
    transport, protocol = await loop.create_datagram_endpoint(
        lambda: TelemetryReceiver(queue, decoder=decoder),
        local_addr=(host, port),
    )
    return transport, protocol
