from __future__ import annotations

import pytest

from f1dash.models.race import (
    DriverDetails,
    PlayerCarStatus,
    PlayerTelemetrySnapshot,
    PositionEntry,
    RaceState,
)
from f1dash.presentation.formatter import (
    NOT_APPLICABLE,
    build_view,
    last_name,
    suggested_gear_label,
    to_percent,
    wear_bucket,
)
from f1dash.presentation.view import RowStyle, WearBucket


def _entry(slot: int, position: int, driver: str, *, is_player: bool = False) -> PositionEntry:
    return PositionEntry(
        car_slot=slot,
        position=position,
        is_player=is_player,
        driver=DriverDetails(driver=driver, team="Team", race_number=slot + 1, nationality="British", name=driver),
        best_lap="1:30.000",
        last_lap="1:31.000",
        s1="0:30.000",
        s2="0:30.000",
        s3="0:30.000",
        tyre="Soft",
        current_lap_num=4,
    )


@pytest.mark.parametrize(
    ("value", "bucket"),
    [
        (0, WearBucket.SAFE),
        (50, WearBucket.SAFE),
        (51, WearBucket.WARNING),
        (70, WearBucket.WARNING),
        (71, WearBucket.CRITICAL),
        (100, WearBucket.CRITICAL),
    ],
)
def test_wear_bucket_boundaries(value: int, bucket: WearBucket) -> None:
    assert wear_bucket(value) == bucket


@pytest.mark.parametrize(("gear", "label"), [(-1, NOT_APPLICABLE), (0, NOT_APPLICABLE), (1, "1"), (7, "7")])
def test_suggested_gear_label(gear: int, label: str) -> None:
    assert suggested_gear_label(gear) == label


def test_last_name_uses_second_token() -> None:
    assert last_name("Lewis Hamilton") == "Hamilton"
    assert last_name("Kimi  Räikkönen") == "Räikkönen"


def test_last_name_guards_single_and_empty_names() -> None:
    assert last_name("Zhou") == "Zhou"
    assert last_name("") == ""


def test_to_percent_rounds() -> None:
    assert to_percent(0.8) == 80
    assert to_percent(0.0) == 0
    assert to_percent(1.0) == 100


def test_empty_state_renders_empty_panels() -> None:
    view = build_view(RaceState())

    assert view.positions == ()
    assert view.tyre_wear == ()
    assert view.status is None
    assert view.car_info is None
    assert view.throttle is None


def test_player_row_highlighted() -> None:
    state = RaceState(
        positions=(
            _entry(1, 1, "Max Verstappen"),
            _entry(0, 2, "Lewis Hamilton", is_player=True),
        )
    )

    view = build_view(state)

    assert [row.cells[1] for row in view.positions] == ["Verstappen", "Hamilton"]
    assert [row.style for row in view.positions] == [RowStyle.DEFAULT, RowStyle.HIGHLIGHT]
    assert view.positions[0].cells == ("1", "Verstappen", "4", "1:31.000", "1:30.000", "Soft")


def test_player_panels_from_status_and_telemetry() -> None:
    state = RaceState(
        player_car_status=PlayerCarStatus(
            tyre="Medium",
            rear_left=20,
            rear_right=55,
            front_left=70,
            front_right=90,
            fuel_mix="Rich",
            fuel_in_tank=12.5,
            fuel_remaining_laps=3.5,
        ),
        player_telemetry=PlayerTelemetrySnapshot(
            speed=287,
            throttle=0.8,
            brake=0.0,
            gear=6,
            suggested_gear=0,
            engine_rpm=11500,
            rev_lights_percent=60,
        ),
        speed_trap=318.4,
    )

    view = build_view(state)

    assert [gauge.title for gauge in view.tyre_wear] == ["Rear Left", "Rear Right", "Front Left", "Front Right"]
    assert [gauge.bucket for gauge in view.tyre_wear] == [
        WearBucket.SAFE,
        WearBucket.WARNING,
        WearBucket.WARNING,
        WearBucket.CRITICAL,
    ]
    assert view.status is not None
    assert "Fuel mix: Rich" in view.status.lines
    assert "Fuel in tank: 12.50" in view.status.lines
    assert view.throttle is not None and view.throttle.percent == 80
    assert view.throttle.bucket == WearBucket.CRITICAL
    assert view.brake is not None and view.brake.bucket == WearBucket.SAFE
    assert view.rev_lights is not None and view.rev_lights.bucket == WearBucket.WARNING
    assert view.car_info is not None
    assert "Speed: 287 KM/H" in view.car_info.lines
    assert f"Suggested Gear: {NOT_APPLICABLE}" in view.car_info.lines
    assert "Speed trap: 318.4 KM/H" in view.car_info.lines


def test_build_view_does_not_mutate_state() -> None:
    state = RaceState(positions=(_entry(0, 1, "Lewis Hamilton", is_player=True),))
    before = state.model_dump()

    build_view(state)

    assert state.model_dump() == before
