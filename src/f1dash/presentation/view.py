"""Display tree handed from the formatter to the renderer.

Everything here is already formatted: the renderer only maps buckets and
row styles to colours and lays the pieces out.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from f1dash.models._base import F1BaseModel

POSITION_COLUMNS: tuple[str, ...] = ("P", "Driver", "Lap", "Last Lap", "Best Lap", "Tyre")


class WearBucket(StrEnum):
    """Severity of a 0-100 usage or wear percentage."""

    SAFE = "safe"
    WARNING = "warning"
    CRITICAL = "critical"


class RowStyle(StrEnum):
    DEFAULT = "default"
    HIGHLIGHT = "highlight"


class Gauge(F1BaseModel):
    title: str
    percent: int = Field(ge=0, le=100)
    bucket: WearBucket


class InfoPanel(F1BaseModel):
    title: str
    lines: tuple[str, ...] = ()


class PositionRow(F1BaseModel):
    cells: tuple[str, ...]
    style: RowStyle = RowStyle.DEFAULT


class DashboardView(F1BaseModel):
    """One frame of the dashboard.

    Player panels are ``None`` (or empty) until the matching packets have
    been seen, so the renderer can leave their area blank.
    """

    tyre_wear: tuple[Gauge, ...] = ()
    status: InfoPanel | None = None
    rev_lights: Gauge | None = None
    brake: Gauge | None = None
    throttle: Gauge | None = None
    car_info: InfoPanel | None = None
    position_columns: tuple[str, ...] = POSITION_COLUMNS
    positions: tuple[PositionRow, ...] = ()
