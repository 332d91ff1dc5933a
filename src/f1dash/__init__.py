"""f1dash - Live terminal dashboard for F1 2020 UDP telemetry."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("f1dash")
except PackageNotFoundError:
    __version__ = "0+local"
from f1dash.config import DashConfig
from f1dash.dashboard import Dashboard
from f1dash.exceptions import (
    F1DashConfigError,
    F1DashDecodeError,
    F1DashError,
    F1DashQueueClosedError,
    F1DashRenderError,
)
from f1dash.ingestion import OverflowPolicy, PacketQueue
from f1dash.models import (
    CarStatusSummary,
    DriverDetails,
    Packet,
    PlayerCarStatus,
    PlayerTelemetrySnapshot,
    PositionEntry,
    RaceState,
)
from f1dash.state import RaceStateStore, apply_packet, format_lap_time

__all__ = [
    "__version__",
    "CarStatusSummary",
    "DashConfig",
    "Dashboard",
    "DriverDetails",
    "F1DashConfigError",
    "F1DashDecodeError",
    "F1DashError",
    "F1DashQueueClosedError",
    "F1DashRenderError",
    "OverflowPolicy",
    "Packet",
    "PacketQueue",
    "PlayerCarStatus",
    "PlayerTelemetrySnapshot",
    "PositionEntry",
    "RaceState",
    "RaceStateStore",
    "apply_packet",
    "format_lap_time",
]
