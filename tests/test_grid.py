import pytest

from gridstar.sim.grid import Grid, GridBoundsError
from gridstar.sim.roles import Role, RoleTransitionError, can_transition


def test_grid_defaults_and_cells_start_empty() -> None:
    grid = Grid()
    assert (grid.width, grid.height, grid.cell_size) == (40, 40, 20)
    assert all(cell.role == Role.EMPTY for cell in grid.iter_cells())
    assert len(grid.snapshot()) == 1600


def test_cell_at_rejects_out_of_bounds() -> None:
    grid = Grid()
    assert grid.cell_at(39, 39).coord == (39, 39)
    for x, y in [(40, 0), (0, 40), (-1, 0), (0, -1)]:
        with pytest.raises(GridBoundsError):
            grid.cell_at(x, y)
    with pytest.raises(IndexError):
        grid.neighbors4(40, 40)


def test_neighbors4_order_and_counts() -> None:
    grid = Grid()
    assert grid.neighbors4(5, 5) == [(4, 5), (6, 5), (5, 4), (5, 6)]
    assert grid.neighbors4(0, 0) == [(1, 0), (0, 1)]
    assert grid.neighbors4(39, 39) == [(38, 39), (39, 38)]
    assert len(grid.neighbors4(0, 7)) == 3
    assert len(grid.neighbors4(12, 39)) == 3


def test_neighbors4_stay_in_bounds_everywhere() -> None:
    grid = Grid(6, 4)
    for cell in grid.iter_cells():
        neighbors = grid.neighbors4(cell.x, cell.y)
        assert cell.coord not in neighbors
        assert all(grid.in_bounds(x, y) for x, y in neighbors)
        assert len(neighbors) in {2, 3, 4}


def test_set_role_enforces_transition_table() -> None:
    grid = Grid(3, 3)
    grid.set_role(1, 1, Role.WALL)
    with pytest.raises(RoleTransitionError):
        grid.set_role(1, 1, Role.EXPLORED)
    grid.set_role(0, 0, Role.START)
    with pytest.raises(RoleTransitionError):
        grid.set_role(0, 0, Role.PATH)

    assert can_transition(Role.EMPTY, Role.EXPLORED)
    assert can_transition(Role.EXPANDED, Role.PATH)
    assert not can_transition(Role.END, Role.PATH)
    assert not can_transition(Role.PATH, Role.EMPTY)


def test_path_cost_follows_parent_chain() -> None:
    grid = Grid(4, 1)
    grid.set_role(0, 0, Role.START)
    grid.cell_at(1, 0).parent = (0, 0)
    grid.cell_at(2, 0).parent = (1, 0)

    assert grid.path_cost(0, 0) == 0
    assert grid.path_cost(2, 0) == 2
    assert grid.parent_chain(2, 0) == [(2, 0), (1, 0), (0, 0)]
    assert grid.path_cost(3, 0) == grid.unreached_cost


def test_point_to_cell_uses_cell_size() -> None:
    grid = Grid(cell_size=20)
    assert grid.point_to_cell(25, 45) == (1, 2)
    assert grid.point_to_cell(799, 799) == (39, 39)
    assert grid.point_to_cell(800, 0) is None
    assert grid.point_to_cell(-1, 10) is None


def test_drain_changes_reports_each_cell_once() -> None:
    grid = Grid(3, 3)
    grid.set_role(2, 1, Role.EXPLORED)
    grid.set_role(0, 0, Role.START)
    grid.set_role(2, 1, Role.EXPANDED)

    changes = grid.drain_changes()
    assert [(c.x, c.y, c.role) for c in changes] == [
        (0, 0, Role.START),
        (2, 1, Role.EXPANDED),
    ]
    assert grid.drain_changes() == []
