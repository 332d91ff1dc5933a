"""State layer.

This package is the single source of truth for how decoded telemetry
packets are merged into the race-state snapshot the dashboard renders.
"""

from f1dash.state.aggregator import apply_packet, format_lap_time
from f1dash.state.store import RaceStateStore

__all__ = ["RaceStateStore", "apply_packet", "format_lap_time"]
