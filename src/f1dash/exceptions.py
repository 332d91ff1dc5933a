"""Custom exception hierarchy for f1dash."""

from __future__ import annotations


class F1DashError(Exception):
    """Base exception for all f1dash errors."""


class F1DashConfigError(F1DashError):
    """Invalid or missing configuration."""


class F1DashDecodeError(F1DashError):
    """A datagram could not be decoded into a telemetry packet."""

    def __init__(self, message: str, *, size: int = 0) -> None:
        self.size = size
        super().__init__(message)


class F1DashQueueClosedError(F1DashError):
    """Packet was offered to a queue whose consumer has gone away."""


class F1DashRenderError(F1DashError):
    """Drawing the dashboard failed.

    Rendering failures are fatal: the dashboard loop does not retry and the
    process terminates with the last good frame on screen.
    """
