"""Interactive Textual screen: click to place, space to search."""

from __future__ import annotations

import logging
from typing import Callable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Static

from gridstar.db.replay_log import RunLog
from gridstar.render.grid_view import STATUS_HELP, render_legend, render_status
from gridstar.render.textual_widgets import CellClicked, GridWidget
from gridstar.sim.contracts import InputEvent, TickPayload
from gridstar.sim.search import SearchEngine
from gridstar.sim.sources import EventQueue
from gridstar.sim.tick_loop import advance_tick

logger = logging.getLogger(__name__)


class GridScreen(Screen):
    CSS = """
    Screen {
        layout: vertical;
    }
    #grid {
        width: auto;
        height: auto;
    }
    #side {
        width: 40;
    }
    """

    BINDINGS = [
        Binding("space", "start_search", "Search"),
        Binding("r", "reset", "Reset"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        build_engine: Callable[[], SearchEngine],
        *,
        tick_rate: float = 60.0,
        run_log: RunLog | None = None,
    ) -> None:
        super().__init__()
        self._build_engine = build_engine
        self._engine = build_engine()
        self._queue = EventQueue()
        self._tick_rate = tick_rate
        self._run_log = run_log
        self._tick = 0
        self._pending_reset = False
        self._last_payload: TickPayload | None = None

    @property
    def engine(self) -> SearchEngine:
        return self._engine

    def compose(self) -> ComposeResult:
        grid = self._engine.grid
        with Horizontal(id="root"):
            yield GridWidget(
                lambda: self._engine.grid.snapshot(),
                width=grid.width,
                height=grid.height,
                id="grid",
            )
            with Vertical(id="side"):
                yield Static(id="status")
                yield Static(render_legend(), id="legend")

    def on_mount(self) -> None:
        self.set_interval(1.0 / self._tick_rate, self._on_tick)

    def on_cell_clicked(self, message: CellClicked) -> None:
        self._queue.push(InputEvent.place(*message.cell))

    def action_start_search(self) -> None:
        self._queue.push(InputEvent.start_search())

    def action_reset(self) -> None:
        logger.info("Resetting grid after %d ticks", self._tick)
        self._engine = self._build_engine()
        self._queue.poll()
        self._pending_reset = True

    def action_quit(self) -> None:
        self.app.exit()

    def _on_tick(self) -> None:
        events = self._queue.poll()
        if not events and self._engine.settled and not self._pending_reset:
            return
        self._tick += 1
        payload = advance_tick(self._engine, self._tick, events)
        if self._pending_reset:
            payload = payload.model_copy(update={"reset": True})
            self._pending_reset = False
        phase_changed = (
            self._last_payload is None or payload.phase != self._last_payload.phase
        )
        if self._run_log is not None and (
            payload.changes or payload.reset or phase_changed
        ):
            self._run_log.append(payload)
        self._last_payload = payload
        self._refresh()

    def _refresh(self) -> None:
        self.query_one("#grid", GridWidget).refresh()
        payload = self._last_payload
        status = render_status(
            tick=self._tick,
            phase=self._engine.phase.value,
            frontier_size=len(self._engine.frontier),
            path=payload.path if payload else [],
            help_text=STATUS_HELP,
        )
        self.query_one("#status", Static).update(status)


class GridstarApp(App):
    """Single-screen app hosting the grid view."""

    def __init__(self, screen: GridScreen, *, title: str = "gridstar") -> None:
        super().__init__()
        self._grid_screen = screen
        self.title = title
        grid = screen.engine.grid
        self.sub_title = f"{grid.width}x{grid.height}"

    def on_mount(self) -> None:
        self.push_screen(self._grid_screen)


def run_live_view(
    build_engine: Callable[[], SearchEngine],
    *,
    tick_rate: float = 60.0,
    run_log: RunLog | None = None,
) -> None:
    app = GridstarApp(
        GridScreen(build_engine, tick_rate=tick_rate, run_log=run_log),
        title="A* pathfinding",
    )
    app.run()
