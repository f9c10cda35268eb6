from gridstar.sim.grid import Grid
from gridstar.sim.placement import PlacementKind, apply_placement
from gridstar.sim.roles import Role
from gridstar.sim.search import SearchEngine


def test_first_two_placements_set_start_then_end() -> None:
    engine = SearchEngine(Grid(5, 5))
    assert engine.place_or_toggle(1, 1) == PlacementKind.START
    assert engine.place_or_toggle(3, 3) == PlacementKind.END
    assert engine.start == (1, 1)
    assert engine.end == (3, 3)
    assert engine.grid.role_at(1, 1) == Role.START
    assert engine.grid.role_at(3, 3) == Role.END


def test_third_placement_becomes_wall_and_walls_stay() -> None:
    engine = SearchEngine(Grid(5, 5))
    engine.place_or_toggle(0, 0)
    engine.place_or_toggle(4, 4)

    assert engine.place_or_toggle(2, 2) == PlacementKind.WALL
    assert engine.grid.role_at(2, 2) == Role.WALL

    assert engine.place_or_toggle(2, 2) == PlacementKind.REJECTED
    assert engine.grid.role_at(2, 2) == Role.WALL


def test_placements_on_start_or_end_are_rejected() -> None:
    engine = SearchEngine(Grid(5, 5))
    engine.place_or_toggle(0, 0)
    assert engine.place_or_toggle(0, 0) == PlacementKind.REJECTED
    assert engine.end is None

    engine.place_or_toggle(1, 0)
    assert engine.place_or_toggle(1, 0) == PlacementKind.REJECTED
    assert engine.grid.role_at(0, 0) == Role.START
    assert engine.grid.role_at(1, 0) == Role.END
    assert engine.frontier == frozenset({(0, 0)})


def test_apply_placement_ignores_searched_cells() -> None:
    grid = Grid(3, 3)
    grid.set_role(1, 1, Role.EXPLORED)
    kind = apply_placement(grid, 1, 1, has_start=True, has_end=True)
    assert kind == PlacementKind.REJECTED
    assert grid.role_at(1, 1) == Role.EXPLORED


def test_walls_can_be_added_during_search() -> None:
    engine = SearchEngine(Grid(6, 6))
    engine.place_or_toggle(0, 0)
    engine.place_or_toggle(5, 5)
    engine.request_search_start()
    engine.step()

    assert engine.place_or_toggle(1, 0) == PlacementKind.REJECTED
    assert engine.place_or_toggle(3, 3) == PlacementKind.WALL
