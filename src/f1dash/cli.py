"""Command-line entry point: ``f1dash HOST PORT``."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from f1dash.config import DashConfig, parse_port
from f1dash.dashboard import Dashboard
from f1dash.exceptions import F1DashConfigError, F1DashRenderError
from f1dash.ingestion.queue import OverflowPolicy, PacketQueue
from f1dash.ingestion.udp import open_receiver
from f1dash.presentation.renderer import RichRenderer

_logger = logging.getLogger("f1dash")


def _port(value: str) -> int:
    try:
        return parse_port(value)
    except F1DashConfigError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="f1dash",
        description="Live terminal dashboard for F1 2020 UDP telemetry.",
    )
    parser.add_argument("host", help="Address to listen on for telemetry (e.g. 0.0.0.0).")
    parser.add_argument("port", type=_port, help="UDP port the game sends telemetry to.")
    parser.add_argument(
        "--queue-size",
        type=int,
        default=None,
        help="Packets buffered between receiver and dashboard.",
    )
    parser.add_argument(
        "--overflow",
        choices=[policy.value for policy in OverflowPolicy],
        default=None,
        help="Which packet to drop when the buffer is full.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file instead of stderr.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logs.",
    )
    return parser


def _configure_logging(config: DashConfig, *, verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif config.log_file:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        filename=config.log_file,
        format="%(levelname)s %(name)s: %(message)s",
    )


async def serve(config: DashConfig) -> None:
    """Listen for telemetry and drive the dashboard until a render failure or cancellation."""
    queue = PacketQueue(config.queue_size, overflow=config.overflow)
    transport, receiver = await open_receiver(config.host, config.port, queue)
    _logger.info("Listening for telemetry on %s:%s", config.host, config.port)
    try:
        with RichRenderer() as renderer:
            await Dashboard(queue, renderer).run()
    finally:
        queue.close()
        transport.close()
        _logger.info(
            "Stopped: received=%s undecodable=%s dropped=%s",
            receiver.received,
            receiver.decode_failures,
            queue.dropped,
        )


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = DashConfig.from_env(
            host=args.host,
            port=args.port,
            queue_size=args.queue_size,
            overflow=args.overflow,
            log_file=args.log_file,
        )
    except F1DashConfigError as exc:
        parser.error(str(exc))

    _configure_logging(config, verbose=args.verbose)

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        return 0
    except F1DashRenderError:
        _logger.exception("Rendering failed; shutting down")
        return 1
    except OSError as exc:
        print(f"f1dash: cannot listen on {config.host}:{config.port}: {exc}", file=sys.stderr)
        return 1
    return 0
