"""Terminal drawing of the dashboard with :mod:`rich`.

The left "Car Data" panel shows tyre wear, car status, rev/brake/throttle
bars and car info; the right panel shows the live position table.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from rich.console import Console, Group, RenderableType
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from f1dash.exceptions import F1DashRenderError
from f1dash.presentation.view import DashboardView, Gauge, InfoPanel, RowStyle, WearBucket

_logger = logging.getLogger(__name__)

BUCKET_COLORS: dict[WearBucket, str] = {
    WearBucket.SAFE: "green",
    WearBucket.WARNING: "yellow",
    WearBucket.CRITICAL: "red",
}

ROW_STYLES: dict[RowStyle, str] = {
    RowStyle.DEFAULT: "white",
    RowStyle.HIGHLIGHT: "bold white on magenta",
}

_POSITION_WIDTHS = (2, 10, 3, 8, 8, 5)


class Renderer(Protocol):
    def render(self, view: DashboardView) -> None: ...


def _gauge(gauge: Gauge | None, title: str) -> RenderableType:
    if gauge is None:
        return Panel("", title=title)
    color = BUCKET_COLORS[gauge.bucket]
    bar = ProgressBar(total=100, completed=gauge.percent, complete_style=color, finished_style=color)
    return Panel(Group(bar, Text(f"{gauge.percent}%", style="white")), title=gauge.title)


def _info(panel: InfoPanel | None, title: str) -> RenderableType:
    if panel is None:
        return Panel("", title=title)
    return Panel(Text("\n".join(panel.lines), style="white"), title=panel.title)


def _positions(view: DashboardView) -> Table:
    table = Table(title="Live Position", style="white", padding=(0, 2), expand=True)
    for column, width in zip(view.position_columns, _POSITION_WIDTHS, strict=False):
        table.add_column(column, min_width=width, no_wrap=True)
    for row in view.positions:
        table.add_row(*row.cells, style=ROW_STYLES[row.style])
    return table


def build_renderable(view: DashboardView) -> RenderableType:
    """Lay out one frame. Pure: depends only on *view*."""
    tyres = Layout(name="tyres")
    if view.tyre_wear:
        tyres.split_column(*(Layout(_gauge(gauge, gauge.title)) for gauge in view.tyre_wear))
    else:
        tyres.update(Panel("", title="Tyres Wear"))

    car_status = Layout(name="car_status", ratio=35)
    car_status.split_row(tyres, Layout(_info(view.status, "Status"), name="status"))

    car_data = Layout(name="car_data")
    car_data.split_column(
        car_status,
        Layout(_gauge(view.rev_lights, "Rev"), name="rev", ratio=10),
        Layout(_gauge(view.brake, "Brake"), name="brake", ratio=10),
        Layout(_gauge(view.throttle, "Throttle"), name="throttle", ratio=10),
        Layout(_info(view.car_info, "Car Info"), name="car_info", ratio=35),
    )

    root = Layout(name="root")
    root.split_row(
        Layout(Panel(car_data, title="Car Data"), name="left", ratio=7),
        Layout(Panel(_positions(view)), name="right", ratio=3),
    )
    return root


class RichRenderer:
    """Draws dashboard frames on a :class:`rich.live.Live` display.

    Usage::

        with RichRenderer() as renderer:
            renderer.render(view)
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        screen: bool = True,
    ) -> None:
        self._console = console or Console()
        self._screen = screen
        self._live: Live | None = None
        self.frames = 0

    @property
    def is_running(self) -> bool:
        return self._live is not None

    def start(self) -> None:
        if self._live is not None:
            return
        live = Live(
            build_renderable(DashboardView()),
            console=self._console,
            auto_refresh=False,
            screen=self._screen,
        )
        try:
            live.start()
        except Exception as exc:
            raise F1DashRenderError(f"failed to start live display: {exc}") from exc
        self._live = live
        _logger.debug("Live display started (screen=%s)", self._screen)

    def stop(self) -> None:
        live = self._live
        self._live = None
        if live is not None:
            live.stop()

    def render(self, view: DashboardView) -> None:
        """Draw *view*.

        Raises
        ------
        F1DashRenderError
            Anything went wrong while laying out or drawing the frame.
        """
        try:
            renderable = build_renderable(view)
            if self._live is None:
                self._console.print(renderable)
            else:
                self._live.update(renderable, refresh=True)
        except Exception as exc:
            raise F1DashRenderError(f"failed to draw dashboard frame: {exc}") from exc
        self.frames += 1

    def __enter__(self) -> RichRenderer:
        self.start()
        return self

    def __exit__(self, *exc: Any) -> None:
        self.stop()
