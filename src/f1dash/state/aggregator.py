"""Packet → race-state aggregation.

This is the only component allowed to derive a new :class:`RaceState`
from an incoming packet. :func:`apply_packet` is pure: it never mutates
its input snapshot, so a renderer holding the previous snapshot can never
observe a half-applied update.

Packet payloads are lists indexed by car slot. Participants, car status and
lap data arrive independently; the Lap handler is the one place they are
joined, and only once both rosters exist.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import assert_never

from f1dash._constants import PLAYER_INDEX_UNKNOWN
from f1dash.models.packets import (
    CarStatusData,
    CarStatusPacket,
    CarTelemetryPacket,
    EventPacket,
    LapPacket,
    MotionPacket,
    OtherEvent,
    OtherPacket,
    Packet,
    PacketHeader,
    ParticipantData,
    ParticipantsPacket,
    SpeedTrapEvent,
)
from f1dash.models.race import (
    CarStatusSummary,
    DriverDetails,
    PlayerCarStatus,
    PlayerTelemetrySnapshot,
    PositionEntry,
    RaceState,
)

_logger = logging.getLogger(__name__)


def format_lap_time(duration: timedelta) -> str:
    """Render a lap or sector duration as ``M:S.mmm``.

    Minutes wrap at 60 and seconds are not zero-padded, so 75.25 s renders
    as ``"1:15.250"`` and 3605 s as ``"0:5.000"``.
    """
    total = duration.total_seconds()
    minutes = (int(total) // 60) % 60
    seconds = total % 60
    return f"{minutes}:{seconds:.3f}"


def _player_slot(header: PacketHeader, size: int) -> int | None:
    index = header.player_car_index
    if index == PLAYER_INDEX_UNKNOWN or not 0 <= index < size:
        return None
    return index


def _driver_details(participant: ParticipantData) -> DriverDetails:
    return DriverDetails(
        driver=participant.driver,
        team=participant.team,
        race_number=participant.race_number,
        nationality=participant.nationality,
        name=participant.name,
    )


def _status_summary(status: CarStatusData) -> CarStatusSummary:
    wear = status.tyres_wear
    return CarStatusSummary(
        tyre=status.visual_tyre_compound,
        rear_left=wear.rear_left,
        rear_right=wear.rear_right,
        front_left=wear.front_left,
        front_right=wear.front_right,
    )


def _apply_car_status(state: RaceState, packet: CarStatusPacket) -> RaceState:
    update: dict[str, object] = {}

    slot = _player_slot(packet.header, len(packet.car_status_data))
    if slot is not None:
        own = packet.car_status_data[slot]
        update["player_car_status"] = PlayerCarStatus(
            **_status_summary(own).model_dump(),
            fuel_mix=own.fuel_mix,
            fuel_in_tank=own.fuel_in_tank,
            fuel_remaining_laps=own.fuel_remaining_laps,
            drs_allowed=own.drs_allowed,
            ers_deploy_mode=own.ers_deploy_mode,
        )

    update["car_status"] = {index: _status_summary(status) for index, status in enumerate(packet.car_status_data)}
    return state.model_copy(update=update)


def _apply_car_telemetry(state: RaceState, packet: CarTelemetryPacket) -> RaceState:
    slot = _player_slot(packet.header, len(packet.car_telemetry_data))
    if slot is None:
        return state

    car = packet.car_telemetry_data[slot]
    telemetry = PlayerTelemetrySnapshot(
        speed=car.speed,
        throttle=car.throttle,
        brake=car.brake,
        gear=car.gear,
        suggested_gear=packet.suggested_gear,
        engine_rpm=car.engine_rpm,
        drs=car.drs,
        rev_lights_percent=car.rev_lights_percent,
    )
    return state.model_copy(update={"player_telemetry": telemetry})


def _apply_participants(state: RaceState, packet: ParticipantsPacket) -> RaceState:
    # The grid is captured once; later participant packets never replace it.
    if state.roster_populated:
        return state

    update: dict[str, object] = {}
    slot = _player_slot(packet.header, len(packet.participants))
    if slot is not None:
        update["player_details"] = _driver_details(packet.participants[slot])

    roster = {
        index: _driver_details(participant)
        for index, participant in enumerate(packet.participants)
        if participant.race_number > 0
    }
    if roster:
        _logger.debug("Driver roster captured with %s cars", len(roster))
    update["participants"] = roster
    return state.model_copy(update=update)


def _apply_lap(state: RaceState, packet: LapPacket) -> RaceState:
    if not state.participants or not state.car_status:
        return state

    player_index = packet.header.player_car_index
    entries: list[PositionEntry] = []
    for slot, lap in enumerate(packet.lap_data):
        if lap.car_position <= 0:
            continue

        driver = state.participants.get(slot)
        car = state.car_status.get(slot)
        if driver is None or car is None:
            _logger.debug("Lap data for car slot %s has no roster entry; skipped", slot)
            continue

        entries.append(
            PositionEntry(
                car_slot=slot,
                position=lap.car_position,
                is_player=slot == player_index,
                driver=driver,
                best_lap=format_lap_time(lap.best_lap_time),
                last_lap=format_lap_time(lap.last_lap_time),
                s1=format_lap_time(lap.best_lap_sector_1_time),
                s2=format_lap_time(lap.best_lap_sector_2_time),
                s3=format_lap_time(lap.best_lap_sector_3_time),
                tyre=car.tyre,
                current_lap_num=lap.current_lap_num,
            )
        )

    entries.sort(key=lambda entry: entry.position)
    return state.model_copy(update={"positions": tuple(entries)})


def _apply_event(state: RaceState, packet: EventPacket) -> RaceState:
    event = packet.event
    if isinstance(event, SpeedTrapEvent):
        player = packet.header.player_car_index
        if player != PLAYER_INDEX_UNKNOWN and event.vehicle_index == player:
            return state.model_copy(update={"speed_trap": event.speed})
        return state
    if isinstance(event, OtherEvent):
        return state
    assert_never(event)


def _observe_player(state: RaceState, header: PacketHeader) -> RaceState:
    index = header.player_car_index
    if index == PLAYER_INDEX_UNKNOWN or index == state.player_index:
        return state
    return state.model_copy(update={"player_index": index})


def apply_packet(state: RaceState, packet: Packet) -> RaceState:
    """Return the state that results from applying *packet* to *state*.

    Motion packets, non speed-trap events and unsupported packet ids are
    explicit no-ops. A Lap packet that arrives before both rosters are
    known is also a no-op rather than an error.
    """
    if isinstance(packet, (MotionPacket, OtherPacket)):
        return state

    state = _observe_player(state, packet.header)

    if isinstance(packet, CarStatusPacket):
        return _apply_car_status(state, packet)
    if isinstance(packet, CarTelemetryPacket):
        return _apply_car_telemetry(state, packet)
    if isinstance(packet, ParticipantsPacket):
        return _apply_participants(state, packet)
    if isinstance(packet, LapPacket):
        return _apply_lap(state, packet)
    if isinstance(packet, EventPacket):
        return _apply_event(state, packet)
    assert_never(packet)
