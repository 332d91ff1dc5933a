"""Runtime configuration for f1dash."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from f1dash._constants import DEFAULT_PORT, DEFAULT_QUEUE_SIZE
from f1dash.exceptions import F1DashConfigError
from f1dash.ingestion.queue import OverflowPolicy


def parse_port(value: Any) -> int:
    """Parse a UDP port number.

    Raises :class:`F1DashConfigError` unless *value* is an integer in
    ``0..65535``.
    """
    try:
        port = int(str(value).strip())
    except (TypeError, ValueError):
        raise F1DashConfigError(f"port must be a non-negative integer, got {value!r}") from None
    if not 0 <= port <= 65535:
        raise F1DashConfigError(f"port must be between 0 and 65535, got {port}")
    return port


def _parse_positive_int(name: str, value: Any) -> int:
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        raise F1DashConfigError(f"{name} must be an integer, got {value!r}") from None
    if parsed <= 0:
        raise F1DashConfigError(f"{name} must be positive, got {parsed}")
    return parsed


def _parse_overflow(value: Any) -> OverflowPolicy:
    if isinstance(value, OverflowPolicy):
        return value
    try:
        return OverflowPolicy(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(policy.value for policy in OverflowPolicy)
        raise F1DashConfigError(f"overflow must be one of {choices}, got {value!r}") from None


@dataclasses.dataclass(frozen=True)
class DashConfig:
    """Dashboard configuration.

    Parameters
    ----------
    host : str
        Address the UDP listener binds to.
    port : int
        UDP port the game sends telemetry to.
    queue_size : int
        Capacity of the packet queue between the receive loop and the
        dashboard loop.
    overflow : OverflowPolicy
        What happens to packets when the queue is full.
    log_file : str or None
        Write logs here instead of stderr. Keeps the live display clean.
    """

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    queue_size: int = DEFAULT_QUEUE_SIZE
    overflow: OverflowPolicy = OverflowPolicy.DROP_OLDEST
    log_file: str | None = None

    def __post_init__(self) -> None:
        # Normalise loosely-typed values (env strings, CLI args) in place.
        object.__setattr__(self, "port", parse_port(self.port))
        object.__setattr__(self, "queue_size", _parse_positive_int("queue_size", self.queue_size))
        object.__setattr__(self, "overflow", _parse_overflow(self.overflow))
        if not str(self.host).strip():
            raise F1DashConfigError("host must be non-empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> DashConfig:
        """Create configuration from environment variables.

        Reads ``F1DASH_HOST``, ``F1DASH_PORT``, ``F1DASH_QUEUE_SIZE``,
        ``F1DASH_OVERFLOW`` and ``F1DASH_LOG_FILE``. Explicit keyword arguments
        override environment values; ``None`` overrides are ignored.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "F1DASH_HOST": "host",
            "F1DASH_PORT": "port",
            "F1DASH_QUEUE_SIZE": "queue_size",
            "F1DASH_OVERFLOW": "overflow",
            "F1DASH_LOG_FILE": "log_file",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        config_kwargs.update({key: value for key, value in overrides.items() if value is not None})

        return cls(**config_kwargs)
