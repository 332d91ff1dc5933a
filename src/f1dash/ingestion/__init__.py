"""Ingestion layer.

This package receives telemetry datagrams, decodes them into packet
models and hands them to the dashboard loop through a bounded queue.
"""

from f1dash.ingestion.queue import OverflowPolicy, PacketQueue

__all__ = ["OverflowPolicy", "PacketQueue"]
