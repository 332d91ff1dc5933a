"""Tests for mapping unpacked F1 2020 structures onto packet models."""

from __future__ import annotations

from datetime import timedelta
from types import SimpleNamespace

import pytest

from f1dash.exceptions import F1DashDecodeError
from f1dash.ingestion import decode
from f1dash.ingestion.decode import PacketId, adapt_packet, decode_packet
from f1dash.models.packets import (
    CarStatusPacket,
    CarTelemetryPacket,
    EventPacket,
    LapPacket,
    MotionPacket,
    OtherEvent,
    OtherPacket,
    ParticipantsPacket,
    SpeedTrapEvent,
)


def _header(packet_id: int, player: int = 0) -> SimpleNamespace:
    return SimpleNamespace(
        packetId=packet_id,
        playerCarIndex=player,
        sessionUID=42,
        sessionTime=12.5,
        frameIdentifier=7,
    )


def test_motion_packet() -> None:
    packet = adapt_packet(SimpleNamespace(header=_header(PacketId.MOTION, player=3)))

    assert isinstance(packet, MotionPacket)
    assert packet.header.player_car_index == 3
    assert packet.header.frame_identifier == 7


def test_car_telemetry_packet() -> None:
    raw = SimpleNamespace(
        header=_header(PacketId.CAR_TELEMETRY),
        carTelemetryData=[
            SimpleNamespace(
                speed=250,
                throttle=1.0,
                brake=0.0,
                gear=4,
                engineRPM=11000,
                drs=1,
                revLightsPercent=80,
            )
        ],
        suggestedGear=5,
    )

    packet = adapt_packet(raw)

    assert isinstance(packet, CarTelemetryPacket)
    assert packet.suggested_gear == 5
    car = packet.car_telemetry_data[0]
    assert (car.speed, car.gear, car.engine_rpm, car.drs, car.rev_lights_percent) == (250, 4, 11000, True, 80)


def test_car_status_packet_resolves_labels_and_wear_order() -> None:
    raw = SimpleNamespace(
        header=_header(PacketId.CAR_STATUS),
        carStatusData=[
            SimpleNamespace(
                visualTyreCompound=16,
                tyresWear=[10, 20, 30, 40],
                fuelMix=2,
                fuelInTank=20.5,
                fuelRemainingLaps=6.25,
                drsAllowed=1,
                ersDeployMode=3,
            )
        ],
    )

    packet = adapt_packet(raw)

    assert isinstance(packet, CarStatusPacket)
    status = packet.car_status_data[0]
    assert status.visual_tyre_compound == "Soft"
    assert status.tyres_wear.rear_left == 10
    assert status.tyres_wear.rear_right == 20
    assert status.tyres_wear.front_left == 30
    assert status.tyres_wear.front_right == 40
    assert status.fuel_mix == "Rich"
    assert status.drs_allowed is True
    assert status.ers_deploy_mode == "Hotlap"


def test_participants_packet_decodes_names() -> None:
    raw = SimpleNamespace(
        header=_header(PacketId.PARTICIPANTS),
        participants=[
            SimpleNamespace(driverId=7, teamId=0, raceNumber=44, nationality=10, name=b"HAMILTON\x00\x00\x00"),
            SimpleNamespace(driverId=200, teamId=99, raceNumber=0, nationality=0, name=b"\x00" * 8),
        ],
    )

    packet = adapt_packet(raw)

    assert isinstance(packet, ParticipantsPacket)
    first, second = packet.participants
    assert (first.driver, first.team, first.race_number, first.nationality, first.name) == (
        "Lewis Hamilton",
        "Mercedes",
        44,
        "British",
        "HAMILTON",
    )
    assert second.driver == "Driver 200"
    assert second.team == "Team 99"
    assert second.name == ""


def test_lap_packet_converts_times() -> None:
    raw = SimpleNamespace(
        header=_header(PacketId.LAP_DATA),
        lapData=[
            SimpleNamespace(
                lastLapTime=91.5,
                bestLapTime=90.25,
                bestLapSector1TimeInMS=28100,
                bestLapSector2TimeInMS=31200,
                bestLapSector3TimeInMS=30950,
                carPosition=2,
                currentLapNum=5,
            )
        ],
    )

    packet = adapt_packet(raw)

    assert isinstance(packet, LapPacket)
    lap = packet.lap_data[0]
    assert lap.last_lap_time == timedelta(seconds=91.5)
    assert lap.best_lap_sector_1_time == timedelta(milliseconds=28100)
    assert lap.best_lap_sector_3_time == timedelta(milliseconds=30950)
    assert (lap.car_position, lap.current_lap_num) == (2, 5)


def test_speed_trap_event() -> None:
    raw = SimpleNamespace(
        header=_header(PacketId.EVENT),
        eventStringCode=b"SPTP",
        eventDetails=SimpleNamespace(speedTrap=SimpleNamespace(vehicleIdx=4, speed=321.5)),
    )

    packet = adapt_packet(raw)

    assert isinstance(packet, EventPacket)
    assert isinstance(packet.event, SpeedTrapEvent)
    assert packet.event.vehicle_index == 4
    assert packet.event.speed == pytest.approx(321.5)


def test_other_event_code() -> None:
    raw = SimpleNamespace(header=_header(PacketId.EVENT), eventStringCode=b"FTLP", eventDetails=None)

    packet = adapt_packet(raw)

    assert isinstance(packet, EventPacket)
    assert isinstance(packet.event, OtherEvent)
    assert packet.event.code == "FTLP"


@pytest.mark.parametrize("packet_id", [PacketId.SESSION, PacketId.CAR_SETUPS, PacketId.LOBBY_INFO, 42])
def test_unused_packet_ids_become_other(packet_id: int) -> None:
    packet = adapt_packet(SimpleNamespace(header=_header(packet_id)))

    assert isinstance(packet, OtherPacket)
    assert packet.packet_id == packet_id


def test_decode_packet_wraps_unpack_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(data: bytes) -> None:
        raise ValueError("short packet")

    monkeypatch.setattr(decode, "unpack_udp_packet", _boom)

    with pytest.raises(F1DashDecodeError) as excinfo:
        decode_packet(b"\x00" * 5)

    assert excinfo.value.size == 5


def test_decode_packet_adapts_unpacked_structure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(decode, "unpack_udp_packet", lambda data: SimpleNamespace(header=_header(PacketId.MOTION)))

    assert isinstance(decode_packet(b"payload"), MotionPacket)
