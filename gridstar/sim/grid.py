"""Fixed-size grid of cells stored as a flat arena."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from gridstar.sim.contracts import CellSnapshot, Coord
from gridstar.sim.roles import Role, RoleTransitionError, can_transition

DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 40
DEFAULT_CELL_SIZE = 20


class GridBoundsError(IndexError):
    """Raised for coordinates outside the grid (a caller bug)."""


@dataclass
class Cell:
    x: int
    y: int
    role: Role = Role.EMPTY
    h: int = 0
    parent: Coord | None = None

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)


class Grid:
    """Cells indexed ``y * width + x``; parent links are coordinates."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        *,
        cell_size: int = DEFAULT_CELL_SIZE,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid must be non-empty, got {width}x{height}")
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.unreached_cost = (width * height) ** 2
        self._cells = [
            Cell(x, y, h=self.unreached_cost)
            for y in range(height)
            for x in range(width)
        ]
        self._changed: set[Coord] = set()

    @property
    def area(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise GridBoundsError(
                f"({x}, {y}) outside {self.width}x{self.height} grid"
            )
        return self._cells[y * self.width + x]

    def role_at(self, x: int, y: int) -> Role:
        return self.cell_at(x, y).role

    def set_role(self, x: int, y: int, role: Role) -> None:
        cell = self.cell_at(x, y)
        if not can_transition(cell.role, role):
            raise RoleTransitionError(
                f"({x}, {y}) cannot change from {cell.role.value} to {role.value}"
            )
        cell.role = role
        self._changed.add((x, y))

    def neighbors4(self, x: int, y: int) -> list[Coord]:
        """Left, right, up, down; only in-bounds coordinates."""
        if not self.in_bounds(x, y):
            raise GridBoundsError(
                f"({x}, {y}) outside {self.width}x{self.height} grid"
            )
        neighbors = []
        if x > 0:
            neighbors.append((x - 1, y))
        if x < self.width - 1:
            neighbors.append((x + 1, y))
        if y > 0:
            neighbors.append((x, y - 1))
        if y < self.height - 1:
            neighbors.append((x, y + 1))
        return neighbors

    def parent_chain(self, x: int, y: int) -> list[Coord]:
        """Coordinates from ``(x, y)`` back to the first cell without a parent."""
        chain = [(x, y)]
        cell = self.cell_at(x, y)
        while cell.parent is not None:
            if len(chain) > self.area:
                raise RuntimeError(f"parent chain from ({x}, {y}) does not terminate")
            chain.append(cell.parent)
            cell = self.cell_at(*cell.parent)
        return chain

    def path_cost(self, x: int, y: int) -> int:
        """Cost from Start along the parent chain, ``unreached_cost`` if none."""
        chain = self.parent_chain(x, y)
        root = self.cell_at(*chain[-1])
        if root.role != Role.START:
            return self.unreached_cost
        return len(chain) - 1

    def point_to_cell(self, px: int, py: int) -> Coord | None:
        if px < 0 or py < 0:
            return None
        x, y = px // self.cell_size, py // self.cell_size
        if not self.in_bounds(x, y):
            return None
        return (x, y)

    def iter_cells(self) -> Iterator[Cell]:
        return iter(self._cells)

    def snapshot(self) -> list[CellSnapshot]:
        return [
            CellSnapshot(x=cell.x, y=cell.y, role=cell.role) for cell in self._cells
        ]

    def drain_changes(self) -> list[CellSnapshot]:
        changed = sorted(self._changed, key=lambda coord: (coord[1], coord[0]))
        self._changed.clear()
        return [
            CellSnapshot(x=x, y=y, role=self.cell_at(x, y).role) for x, y in changed
        ]
