"""Presentation layer: race state → display tree → terminal."""

from f1dash.presentation.formatter import build_view, last_name, suggested_gear_label, wear_bucket
from f1dash.presentation.view import DashboardView, RowStyle, WearBucket

__all__ = [
    "DashboardView",
    "RowStyle",
    "WearBucket",
    "build_view",
    "last_name",
    "suggested_gear_label",
    "wear_bucket",
]
