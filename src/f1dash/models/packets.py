"""Decoded telemetry packet models.

These are the already-parsed packet values the aggregator consumes. Each
variant carries a :class:`PacketHeader` naming the observer's own car slot
and, where the game sends per-car data, a payload list indexed by car slot.

The set of variants is closed: :data:`Packet` is a discriminated union on
``kind``. Packet ids the dashboard has no use for decode to
:class:`OtherPacket`.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Literal

from pydantic import Field

from f1dash._constants import PLAYER_INDEX_UNKNOWN
from f1dash.models._base import F1BaseModel


class PacketHeader(F1BaseModel):
    player_car_index: int = PLAYER_INDEX_UNKNOWN
    session_uid: int = 0
    session_time: float = 0.0
    frame_identifier: int = 0


# ------------------------------------------------------------------
# Payload rows
# ------------------------------------------------------------------


class TyresWear(F1BaseModel):
    """Wear percentage (0-100) per tyre corner."""

    rear_left: int = 0
    rear_right: int = 0
    front_left: int = 0
    front_right: int = 0


class CarStatusData(F1BaseModel):
    visual_tyre_compound: str = "Unknown"
    tyres_wear: TyresWear = Field(default_factory=TyresWear)
    fuel_mix: str = "Standard"
    fuel_in_tank: float = 0.0
    fuel_remaining_laps: float = 0.0
    drs_allowed: bool = False
    ers_deploy_mode: str = "None"


class CarTelemetryData(F1BaseModel):
    speed: int = Field(default=0, ge=0)
    throttle: float = 0.0
    brake: float = 0.0
    gear: int = 0
    engine_rpm: int = Field(default=0, ge=0)
    drs: bool = False
    rev_lights_percent: int = 0


class ParticipantData(F1BaseModel):
    """One participant row.

    ``driver`` and ``team`` are display names resolved from the game's ids;
    ``name`` is the free-form name string the game sends.
    """

    driver: str = ""
    team: str = ""
    race_number: int = 0
    nationality: str = "Unknown"
    name: str = ""


class LapData(F1BaseModel):
    last_lap_time: timedelta = timedelta(0)
    best_lap_time: timedelta = timedelta(0)
    best_lap_sector_1_time: timedelta = timedelta(0)
    best_lap_sector_2_time: timedelta = timedelta(0)
    best_lap_sector_3_time: timedelta = timedelta(0)
    car_position: int = 0
    current_lap_num: int = 0


# ------------------------------------------------------------------
# Events
# ------------------------------------------------------------------


class SpeedTrapEvent(F1BaseModel):
    code: Literal["SPTP"] = "SPTP"
    vehicle_index: int
    speed: float


class OtherEvent(F1BaseModel):
    """Any event code the dashboard ignores (session start, fastest lap, ...)."""

    code: str


# ------------------------------------------------------------------
# Packets
# ------------------------------------------------------------------


class MotionPacket(F1BaseModel):
    kind: Literal["motion"] = "motion"
    header: PacketHeader = Field(default_factory=PacketHeader)


class CarStatusPacket(F1BaseModel):
    kind: Literal["car_status"] = "car_status"
    header: PacketHeader = Field(default_factory=PacketHeader)
    car_status_data: list[CarStatusData] = Field(default_factory=list)


class CarTelemetryPacket(F1BaseModel):
    kind: Literal["car_telemetry"] = "car_telemetry"
    header: PacketHeader = Field(default_factory=PacketHeader)
    car_telemetry_data: list[CarTelemetryData] = Field(default_factory=list)
    suggested_gear: int = 0


class ParticipantsPacket(F1BaseModel):
    kind: Literal["participants"] = "participants"
    header: PacketHeader = Field(default_factory=PacketHeader)
    participants: list[ParticipantData] = Field(default_factory=list)


class LapPacket(F1BaseModel):
    kind: Literal["lap"] = "lap"
    header: PacketHeader = Field(default_factory=PacketHeader)
    lap_data: list[LapData] = Field(default_factory=list)


class EventPacket(F1BaseModel):
    kind: Literal["event"] = "event"
    header: PacketHeader = Field(default_factory=PacketHeader)
    event: SpeedTrapEvent | OtherEvent


class OtherPacket(F1BaseModel):
    kind: Literal["other"] = "other"
    header: PacketHeader = Field(default_factory=PacketHeader)
    packet_id: int = -1


Packet = Annotated[
    MotionPacket | CarStatusPacket | CarTelemetryPacket | ParticipantsPacket | LapPacket | EventPacket | OtherPacket,
    Field(discriminator="kind"),
]
"""Closed union of every packet variant the aggregator understands."""
