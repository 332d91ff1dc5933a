"""Packet and race-state models."""

from f1dash.models._base import F1BaseModel
from f1dash.models.packets import (
    CarStatusData,
    CarStatusPacket,
    CarTelemetryData,
    CarTelemetryPacket,
    EventPacket,
    LapData,
    LapPacket,
    MotionPacket,
    OtherEvent,
    OtherPacket,
    Packet,
    PacketHeader,
    ParticipantData,
    ParticipantsPacket,
    SpeedTrapEvent,
    TyresWear,
)
from f1dash.models.race import (
    CarStatusSummary,
    DriverDetails,
    PlayerCarStatus,
    PlayerTelemetrySnapshot,
    PositionEntry,
    RaceState,
)

__all__ = [
    "CarStatusData",
    "CarStatusPacket",
    "CarStatusSummary",
    "CarTelemetryData",
    "CarTelemetryPacket",
    "DriverDetails",
    "EventPacket",
    "F1BaseModel",
    "LapData",
    "LapPacket",
    "MotionPacket",
    "OtherEvent",
    "OtherPacket",
    "Packet",
    "PacketHeader",
    "ParticipantData",
    "ParticipantsPacket",
    "PlayerCarStatus",
    "PlayerTelemetrySnapshot",
    "PositionEntry",
    "RaceState",
    "SpeedTrapEvent",
    "TyresWear",
]
