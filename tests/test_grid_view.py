from rich.console import Console

from gridstar.render.grid_view import (
    ROLE_STYLES,
    render_frame,
    render_grid_lines,
    render_legend,
)
from gridstar.sim.contracts import CellSnapshot
from gridstar.sim.grid import Grid
from gridstar.sim.roles import Role


def test_render_grid_lines_styles_each_cell() -> None:
    cells = [
        CellSnapshot(x=0, y=0, role=Role.START),
        CellSnapshot(x=2, y=1, role=Role.WALL),
    ]
    lines = render_grid_lines(cells, width=3, height=2)

    assert len(lines) == 2
    assert all(len(line.plain) == 6 for line in lines)
    assert lines[0].spans[0].style == ROLE_STYLES[Role.START]
    assert lines[1].spans[2].style == ROLE_STYLES[Role.WALL]
    assert lines[1].spans[0].style == ROLE_STYLES[Role.EMPTY]


def test_every_role_has_a_style() -> None:
    assert set(ROLE_STYLES) == set(Role)


def test_render_frame_contains_status() -> None:
    grid = Grid(4, 3)
    renderable = render_frame(
        grid.snapshot(),
        width=4,
        height=3,
        tick=7,
        phase="tracing",
        frontier_size=3,
        path=[(0, 0), (1, 0)],
    )

    console = Console(width=80, record=True)
    console.print(renderable)
    output = console.export_text()

    assert "Grid" in output
    assert "Search" in output
    assert "tracing" in output
    assert "7" in output


def test_render_legend_lists_roles() -> None:
    console = Console(width=80, record=True)
    console.print(render_legend())
    output = console.export_text()

    for role in Role:
        assert role.value in output
