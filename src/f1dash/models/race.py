"""Race-state data model.

:class:`RaceState` is the aggregate root the dashboard renders from. Per-car
rosters are keyed by car slot, the index every per-car packet payload uses,
so filtering a roster never shifts the identity of the remaining cars.
"""

from __future__ import annotations

from pydantic import Field

from f1dash._constants import PLAYER_INDEX_UNKNOWN
from f1dash.models._base import F1BaseModel


class DriverDetails(F1BaseModel):
    """Identity of the driver in one car slot.

    Parameters
    ----------
    driver : str
        Display name of the driver (e.g. ``"Lewis Hamilton"``).
    team : str
        Team name.
    race_number : int
        Race number; ``0`` means unassigned.
    nationality : str
        Nationality label.
    name : str
        Name string as sent by the game (player name for human drivers).
    """

    driver: str
    team: str
    race_number: int
    nationality: str
    name: str


class CarStatusSummary(F1BaseModel):
    tyre: str
    rear_left: int = 0
    rear_right: int = 0
    front_left: int = 0
    front_right: int = 0


class PlayerCarStatus(CarStatusSummary):
    """The player's own car status, with the fuel and ERS details shown on the status panel."""

    fuel_mix: str = "Standard"
    fuel_in_tank: float = 0.0
    fuel_remaining_laps: float = 0.0
    drs_allowed: bool = False
    ers_deploy_mode: str = "None"


class PlayerTelemetrySnapshot(F1BaseModel):
    speed: int = 0
    throttle: float = 0.0
    brake: float = 0.0
    gear: int = 0
    suggested_gear: int = 0
    engine_rpm: int = 0
    drs: bool = False
    rev_lights_percent: int = 0


class PositionEntry(F1BaseModel):
    """One row of the live position table."""

    car_slot: int
    position: int = Field(gt=0)
    is_player: bool = False
    driver: DriverDetails
    best_lap: str
    last_lap: str
    s1: str
    s2: str
    s3: str
    tyre: str
    current_lap_num: int = 0


class RaceState(F1BaseModel):
    """Snapshot of everything the dashboard knows about the session."""

    player_index: int = PLAYER_INDEX_UNKNOWN
    player_details: DriverDetails | None = None
    player_car_status: PlayerCarStatus | None = None
    player_telemetry: PlayerTelemetrySnapshot | None = None
    positions: tuple[PositionEntry, ...] = ()
    participants: dict[int, DriverDetails] = Field(default_factory=dict)
    car_status: dict[int, CarStatusSummary] = Field(default_factory=dict)
    speed_trap: float | None = None

    @property
    def roster_populated(self) -> bool:
        return bool(self.participants)
