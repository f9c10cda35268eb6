"""Textual widget that draws the grid and reports clicked cells."""

from __future__ import annotations

from typing import Callable

from rich.console import Group, RenderableType
from textual.events import Click
from textual.message import Message
from textual.widget import Widget

from gridstar.render.grid_view import CELL_WIDTH, render_grid_lines
from gridstar.sim.contracts import CellSnapshot, Coord


class CellClicked(Message):
    """Message emitted when a click lands on a grid cell."""

    def __init__(self, *, cell: Coord) -> None:
        super().__init__()
        self.cell = cell


class GridWidget(Widget):
    """Render grid cells and post the cell under each click."""

    def __init__(
        self,
        snapshot: Callable[[], list[CellSnapshot]],
        *,
        width: int,
        height: int,
        cell_width: int = CELL_WIDTH,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self._snapshot = snapshot
        self._grid_width = width
        self._grid_height = height
        self._cell_width = cell_width

    def render(self) -> RenderableType:
        lines = render_grid_lines(
            self._snapshot(),
            width=self._grid_width,
            height=self._grid_height,
            cell_width=self._cell_width,
        )
        return Group(*lines)

    def on_click(self, event: Click) -> None:
        offset = event.get_content_offset(self)
        if offset is None:
            return
        cell = offset_to_cell(
            offset.x,
            offset.y,
            width=self._grid_width,
            height=self._grid_height,
            cell_width=self._cell_width,
        )
        if cell is None:
            return
        self.post_message(CellClicked(cell=cell))


def offset_to_cell(
    x: int, y: int, *, width: int, height: int, cell_width: int = CELL_WIDTH
) -> Coord | None:
    if x < 0 or y < 0:
        return None
    cell_x = x // cell_width
    if cell_x >= width or y >= height:
        return None
    return (cell_x, y)
