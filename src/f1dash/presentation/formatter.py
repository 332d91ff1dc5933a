"""Race state → display tree projection.

:func:`build_view` reads a :class:`RaceState` snapshot and returns a
:class:`DashboardView`. It never modifies the snapshot.
"""

from __future__ import annotations

from f1dash.models.race import PlayerCarStatus, PlayerTelemetrySnapshot, PositionEntry, RaceState
from f1dash.presentation.view import DashboardView, Gauge, InfoPanel, PositionRow, RowStyle, WearBucket

NOT_APPLICABLE = "[N/A]"


def wear_bucket(value: int) -> WearBucket:
    """Classify a 0-100 percentage: ``<=50`` safe, ``<=70`` warning, above that critical."""
    if value <= 50:
        return WearBucket.SAFE
    if value <= 70:
        return WearBucket.WARNING
    return WearBucket.CRITICAL


def to_percent(fraction: float) -> int:
    """Convert a 0.0-1.0 pedal value to a whole percentage."""
    return round(fraction * 100)


def suggested_gear_label(gear: int) -> str:
    if gear < 1:
        return NOT_APPLICABLE
    return str(gear)


def last_name(driver: str) -> str:
    """Second word of a driver display name.

    Single-word names are returned unchanged.
    """
    parts = driver.split()
    if len(parts) >= 2:
        return parts[1]
    return parts[0] if parts else ""


def _gauge(title: str, percent: int) -> Gauge:
    clamped = max(0, min(100, percent))
    return Gauge(title=title, percent=clamped, bucket=wear_bucket(clamped))


def _tyre_gauges(status: PlayerCarStatus) -> tuple[Gauge, ...]:
    return (
        _gauge("Rear Left", status.rear_left),
        _gauge("Rear Right", status.rear_right),
        _gauge("Front Left", status.front_left),
        _gauge("Front Right", status.front_right),
    )


def _status_panel(status: PlayerCarStatus) -> InfoPanel:
    return InfoPanel(
        title="Status",
        lines=(
            f"Tyre: {status.tyre}",
            f"Fuel remaining in laps: {status.fuel_remaining_laps:.2f}",
            f"Fuel mix: {status.fuel_mix}",
            f"Fuel in tank: {status.fuel_in_tank:.2f}",
            f"DRS allowed: {status.drs_allowed}",
            f"ERS deployment mode: {status.ers_deploy_mode}",
        ),
    )


def _car_info_panel(telemetry: PlayerTelemetrySnapshot, speed_trap: float | None) -> InfoPanel:
    lines = [
        f"Speed: {telemetry.speed} KM/H",
        f"Gear: {telemetry.gear}",
        f"Suggested Gear: {suggested_gear_label(telemetry.suggested_gear)}",
        f"DRS: {telemetry.drs}",
        f"Engine RPM: {telemetry.engine_rpm}",
        f"Throttle: {telemetry.throttle}",
    ]
    if speed_trap is not None:
        lines.append(f"Speed trap: {speed_trap:.1f} KM/H")
    return InfoPanel(title="Car Info", lines=tuple(lines))


def position_row(entry: PositionEntry) -> PositionRow:
    return PositionRow(
        cells=(
            str(entry.position),
            last_name(entry.driver.driver),
            str(entry.current_lap_num),
            entry.last_lap,
            entry.best_lap,
            entry.tyre,
        ),
        style=RowStyle.HIGHLIGHT if entry.is_player else RowStyle.DEFAULT,
    )


def build_view(state: RaceState) -> DashboardView:
    view: dict[str, object] = {
        "positions": tuple(position_row(entry) for entry in state.positions),
    }

    status = state.player_car_status
    if status is not None:
        view["tyre_wear"] = _tyre_gauges(status)
        view["status"] = _status_panel(status)

    telemetry = state.player_telemetry
    if telemetry is not None:
        view["rev_lights"] = _gauge("Rev", telemetry.rev_lights_percent)
        view["brake"] = _gauge("Brake", to_percent(telemetry.brake))
        view["throttle"] = _gauge("Throttle", to_percent(telemetry.throttle))
        view["car_info"] = _car_info_panel(telemetry, state.speed_trap)

    return DashboardView(**view)
