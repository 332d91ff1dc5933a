"""Datagram → packet model decoding.

Wire-level unpacking is delegated to :mod:`f1_2020_telemetry`, which returns
ctypes structures. This module maps those structures onto the f1dash
packet models, resolving game ids (drivers, teams, compounds) to display
labels on the way.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from f1_2020_telemetry.packets import unpack_udp_packet

from f1dash._constants import (
    DRIVER_NAMES,
    ERS_DEPLOY_MODES,
    FUEL_MIXES,
    NATIONALITIES,
    PLAYER_INDEX_UNKNOWN,
    TEAM_NAMES,
    VISUAL_TYRE_COMPOUNDS,
    lookup_name,
)
from f1dash.exceptions import F1DashDecodeError
from f1dash.ingestion.normalize import (
    decode_event_code,
    decode_name,
    field,
    milliseconds,
    safe_float,
    safe_int,
    seconds,
)
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

SPEED_TRAP_CODE = "SPTP"


class PacketId(IntEnum):
    MOTION = 0
    SESSION = 1
    LAP_DATA = 2
    EVENT = 3
    PARTICIPANTS = 4
    CAR_SETUPS = 5
    CAR_TELEMETRY = 6
    CAR_STATUS = 7
    FINAL_CLASSIFICATION = 8
    LOBBY_INFO = 9


def _header(raw: Any) -> PacketHeader:
    header = field(raw, "header")
    return PacketHeader(
        player_car_index=safe_int(field(header, "playerCarIndex"), PLAYER_INDEX_UNKNOWN),
        session_uid=safe_int(field(header, "sessionUID")),
        session_time=safe_float(field(header, "sessionTime")),
        frame_identifier=safe_int(field(header, "frameIdentifier")),
    )


def _tyres_wear(values: Any) -> TyresWear:
    # Wheel arrays are ordered RL, RR, FL, FR.
    wear = [safe_int(value) for value in (values if values is not None else ())]
    wear.extend([0] * (4 - len(wear)))
    return TyresWear(rear_left=wear[0], rear_right=wear[1], front_left=wear[2], front_right=wear[3])


def _car_status(raw: Any) -> CarStatusPacket:
    rows = [
        CarStatusData(
            visual_tyre_compound=lookup_name(VISUAL_TYRE_COMPOUNDS, safe_int(field(car, "visualTyreCompound")), "Tyre"),
            tyres_wear=_tyres_wear(field(car, "tyresWear")),
            fuel_mix=lookup_name(FUEL_MIXES, safe_int(field(car, "fuelMix"), 1), "Mix"),
            fuel_in_tank=safe_float(field(car, "fuelInTank")),
            fuel_remaining_laps=safe_float(field(car, "fuelRemainingLaps")),
            drs_allowed=safe_int(field(car, "drsAllowed")) == 1,
            ers_deploy_mode=lookup_name(ERS_DEPLOY_MODES, safe_int(field(car, "ersDeployMode")), "Mode"),
        )
        for car in field(raw, "carStatusData", ())
    ]
    return CarStatusPacket(header=_header(raw), car_status_data=rows)


def _car_telemetry(raw: Any) -> CarTelemetryPacket:
    rows = [
        CarTelemetryData(
            speed=max(safe_int(field(car, "speed")), 0),
            throttle=safe_float(field(car, "throttle")),
            brake=safe_float(field(car, "brake")),
            gear=safe_int(field(car, "gear")),
            engine_rpm=max(safe_int(field(car, "engineRPM")), 0),
            drs=safe_int(field(car, "drs")) == 1,
            rev_lights_percent=safe_int(field(car, "revLightsPercent")),
        )
        for car in field(raw, "carTelemetryData", ())
    ]
    return CarTelemetryPacket(
        header=_header(raw),
        car_telemetry_data=rows,
        suggested_gear=safe_int(field(raw, "suggestedGear")),
    )


def _participants(raw: Any) -> ParticipantsPacket:
    rows = [
        ParticipantData(
            driver=lookup_name(DRIVER_NAMES, safe_int(field(participant, "driverId")), "Driver"),
            team=lookup_name(TEAM_NAMES, safe_int(field(participant, "teamId")), "Team"),
            race_number=safe_int(field(participant, "raceNumber")),
            nationality=lookup_name(NATIONALITIES, safe_int(field(participant, "nationality")), "Nationality"),
            name=decode_name(field(participant, "name")),
        )
        for participant in field(raw, "participants", ())
    ]
    return ParticipantsPacket(header=_header(raw), participants=rows)


def _lap(raw: Any) -> LapPacket:
    rows = [
        LapData(
            last_lap_time=seconds(field(lap, "lastLapTime")),
            best_lap_time=seconds(field(lap, "bestLapTime")),
            best_lap_sector_1_time=milliseconds(field(lap, "bestLapSector1TimeInMS")),
            best_lap_sector_2_time=milliseconds(field(lap, "bestLapSector2TimeInMS")),
            best_lap_sector_3_time=milliseconds(field(lap, "bestLapSector3TimeInMS")),
            car_position=safe_int(field(lap, "carPosition")),
            current_lap_num=safe_int(field(lap, "currentLapNum")),
        )
        for lap in field(raw, "lapData", ())
    ]
    return LapPacket(header=_header(raw), lap_data=rows)


def _event(raw: Any) -> EventPacket:
    code = decode_event_code(field(raw, "eventStringCode", b""))
    if code == SPEED_TRAP_CODE:
        details = field(field(raw, "eventDetails"), "speedTrap")
        event: SpeedTrapEvent | OtherEvent = SpeedTrapEvent(
            vehicle_index=safe_int(field(details, "vehicleIdx"), PLAYER_INDEX_UNKNOWN),
            speed=safe_float(field(details, "speed")),
        )
    else:
        event = OtherEvent(code=code)
    return EventPacket(header=_header(raw), event=event)


def adapt_packet(raw: Any) -> Packet:
    """Map an unpacked ctypes packet onto the matching packet model."""
    packet_id = safe_int(field(field(raw, "header"), "packetId"), -1)

    if packet_id == PacketId.MOTION:
        return MotionPacket(header=_header(raw))
    if packet_id == PacketId.CAR_STATUS:
        return _car_status(raw)
    if packet_id == PacketId.CAR_TELEMETRY:
        return _car_telemetry(raw)
    if packet_id == PacketId.PARTICIPANTS:
        return _participants(raw)
    if packet_id == PacketId.LAP_DATA:
        return _lap(raw)
    if packet_id == PacketId.EVENT:
        return _event(raw)
    return OtherPacket(header=_header(raw), packet_id=packet_id)


def decode_packet(data: bytes) -> Packet:
    """Decode one UDP datagram.

    Raises
    ------
    F1DashDecodeError
        The datagram is not a well-formed F1 2020 packet.
    """
    try:
        raw = unpack_udp_packet(data)
    except Exception as exc:
        raise F1DashDecodeError(f"cannot unpack {len(data)}-byte datagram: {exc}", size=len(data)) from exc
    return adapt_packet(raw)
