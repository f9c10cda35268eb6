"""Rich rendering of grid roles and search status."""

from __future__ import annotations

from typing import Iterable

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridstar.sim.contracts import CellSnapshot, Coord
from gridstar.sim.roles import Role


ROLE_STYLES = {
    Role.START: "on blue",
    Role.END: "on rgb(255,255,0)",
    Role.WALL: "on rgb(0,0,0)",
    Role.EMPTY: "on rgb(255,255,255)",
    Role.EXPANDED: "on green",
    Role.EXPLORED: "on red",
    Role.PATH: "on rgb(255,115,0)",
}

CELL_WIDTH = 2

STATUS_HELP = "space=search | r=reset | q=quit | click=start, end, walls"


def render_grid_lines(
    cells: Iterable[CellSnapshot],
    *,
    width: int,
    height: int,
    cell_width: int = CELL_WIDTH,
) -> list[Text]:
    roles = [[Role.EMPTY] * width for _ in range(height)]
    for cell in cells:
        if 0 <= cell.y < height and 0 <= cell.x < width:
            roles[cell.y][cell.x] = cell.role

    blank = " " * cell_width
    lines: list[Text] = []
    for row in roles:
        line = Text()
        for role in row:
            line.append(blank, style=ROLE_STYLES[role])
        lines.append(line)
    return lines


def render_status(
    *,
    tick: int,
    phase: str,
    frontier_size: int,
    path: list[Coord],
    help_text: str | None = None,
) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Tick", str(tick))
    table.add_row("Phase", phase)
    table.add_row("Frontier", str(frontier_size))
    table.add_row("Path length", str(len(path)) if path else "-")
    if help_text:
        table.add_row("Keys", help_text)
    return Panel(table, title="Search")


def render_frame(
    cells: Iterable[CellSnapshot],
    *,
    width: int,
    height: int,
    tick: int,
    phase: str,
    frontier_size: int = 0,
    path: list[Coord] | None = None,
) -> RenderableType:
    lines = render_grid_lines(cells, width=width, height=height)
    status = render_status(
        tick=tick, phase=phase, frontier_size=frontier_size, path=path or []
    )
    return Group(Panel(Group(*lines), title="Grid", expand=False), status)


def render_legend() -> RenderableType:
    table = Table(title="Legend", show_header=False)
    table.add_column("Color")
    table.add_column("Role")
    for role, style in ROLE_STYLES.items():
        table.add_row(Text(" " * CELL_WIDTH, style=style), role.value)
    return table
