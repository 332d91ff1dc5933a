from __future__ import annotations

import pytest

from f1dash import cli
from f1dash.config import DashConfig, parse_port
from f1dash.exceptions import F1DashConfigError, F1DashRenderError
from f1dash.ingestion.queue import OverflowPolicy


def test_parse_port_accepts_range() -> None:
    assert parse_port("20777") == 20777
    assert parse_port(0) == 0


@pytest.mark.parametrize("value", ["abc", "-1", "65536", ""])
def test_parse_port_rejects_invalid(value: str) -> None:
    with pytest.raises(F1DashConfigError):
        parse_port(value)


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("F1DASH_HOST", "127.0.0.1")
    monkeypatch.setenv("F1DASH_PORT", "20778")
    monkeypatch.setenv("F1DASH_QUEUE_SIZE", "64")
    monkeypatch.setenv("F1DASH_OVERFLOW", "drop_newest")

    config = DashConfig.from_env()

    assert config.host == "127.0.0.1"
    assert config.port == 20778
    assert config.queue_size == 64
    assert config.overflow == OverflowPolicy.DROP_NEWEST


def test_config_overrides_win_and_none_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("F1DASH_PORT", "20778")
    monkeypatch.setenv("F1DASH_QUEUE_SIZE", "64")

    config = DashConfig.from_env(port=30000, queue_size=None)

    assert config.port == 30000
    assert config.queue_size == 64


def test_config_rejects_bad_overflow() -> None:
    with pytest.raises(F1DashConfigError):
        DashConfig(overflow="block")


def test_config_rejects_non_positive_queue_size() -> None:
    with pytest.raises(F1DashConfigError):
        DashConfig(queue_size=0)


def test_cli_requires_host_and_port(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2
    assert "required" in capsys.readouterr().err


def test_cli_rejects_bad_port(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["127.0.0.1", "not-a-port"])

    assert excinfo.value.code == 2
    assert "port" in capsys.readouterr().err


def test_cli_render_failure_exits_non_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[DashConfig] = []

    async def _serve(config: DashConfig) -> None:
        seen.append(config)
        raise F1DashRenderError("terminal went away")

    monkeypatch.setattr(cli, "serve", _serve)
    monkeypatch.setattr(cli, "_configure_logging", lambda config, *, verbose: None)

    assert cli.main(["127.0.0.1", "20777", "--queue-size", "16", "--overflow", "drop_newest"]) == 1
    assert seen[0].queue_size == 16
    assert seen[0].overflow == OverflowPolicy.DROP_NEWEST
