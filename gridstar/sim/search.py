"""Incremental A* search: one expansion or one trace-back per step."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from gridstar.sim.contracts import Coord
from gridstar.sim.grid import Grid
from gridstar.sim.placement import PlacementKind, apply_placement
from gridstar.sim.roles import Role

logger = logging.getLogger(__name__)


class SearchPhase(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    TRACING = "tracing"
    DONE = "done"
    EXHAUSTED = "exhausted"


TERMINAL_PHASES = frozenset({SearchPhase.DONE, SearchPhase.EXHAUSTED})


@dataclass(frozen=True)
class StepOutcome:
    phase: SearchPhase
    current: Coord | None = None
    marked: list[Coord] = field(default_factory=list)


class SearchEngine:
    """A* over a ``Grid``, advanced by the caller one tick at a time.

    Frontier ties on ``f`` are broken by the lowest ``x`` and then the lowest
    ``y`` so that identical inputs always give the same path.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._frontier: set[Coord] = set()
        self._start: Coord | None = None
        self._end: Coord | None = None
        self._trace_cursor: Coord | None = None
        self._phase = SearchPhase.IDLE

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def phase(self) -> SearchPhase:
        return self._phase

    @property
    def start(self) -> Coord | None:
        return self._start

    @property
    def end(self) -> Coord | None:
        return self._end

    @property
    def frontier(self) -> frozenset[Coord]:
        return frozenset(self._frontier)

    @property
    def trace_cursor(self) -> Coord | None:
        return self._trace_cursor

    @property
    def search_active(self) -> bool:
        return self._phase == SearchPhase.SEARCHING

    @property
    def search_done(self) -> bool:
        return self._phase == SearchPhase.DONE

    @property
    def exhausted(self) -> bool:
        return self._phase == SearchPhase.EXHAUSTED

    @property
    def settled(self) -> bool:
        return self._phase in TERMINAL_PHASES

    @property
    def path(self) -> list[Coord]:
        """Start to End inclusive, once the trace-back has finished."""
        if self._phase != SearchPhase.DONE or self._end is None:
            return []
        return list(reversed(self._grid.parent_chain(*self._end)))

    def place_or_toggle(self, x: int, y: int) -> PlacementKind:
        kind = apply_placement(
            self._grid,
            x,
            y,
            has_start=self._start is not None,
            has_end=self._end is not None,
        )
        if kind == PlacementKind.START:
            self._start = (x, y)
            self._frontier.add((x, y))
        elif kind == PlacementKind.END:
            self._end = (x, y)
        return kind

    def request_search_start(self) -> bool:
        if self._phase != SearchPhase.IDLE:
            return False
        if self._start is None or self._end is None:
            logger.debug("Search requested before Start and End were placed")
            return False
        start_cell = self._grid.cell_at(*self._start)
        start_cell.h = _manhattan(self._start, self._end)
        self._set_phase(SearchPhase.SEARCHING)
        return True

    def cost_from_start(self, coord: Coord) -> int:
        return self._grid.path_cost(*coord)

    def f_score(self, coord: Coord) -> int:
        return self.cost_from_start(coord) + self._grid.cell_at(*coord).h

    def step(self) -> StepOutcome:
        if self._phase == SearchPhase.TRACING:
            return self._advance_trace()
        if self._phase == SearchPhase.SEARCHING:
            return self._expand()
        return StepOutcome(phase=self._phase)

    def _advance_trace(self) -> StepOutcome:
        assert self._trace_cursor is not None
        coord = self._trace_cursor
        cell = self._grid.cell_at(*coord)
        marked: list[Coord] = []
        if cell.role != Role.START:
            self._grid.set_role(*coord, Role.PATH)
            marked.append(coord)
        if cell.parent is not None:
            self._trace_cursor = cell.parent
        else:
            self._trace_cursor = None
            self._set_phase(SearchPhase.DONE)
            logger.info("Path found with %d cells", len(self.path))
        return StepOutcome(phase=self._phase, current=coord, marked=marked)

    def _expand(self) -> StepOutcome:
        if not self._frontier:
            self._set_phase(SearchPhase.EXHAUSTED)
            logger.info("Frontier exhausted; End is unreachable")
            return StepOutcome(phase=self._phase)

        assert self._end is not None
        current = self._select_best()
        self._frontier.remove(current)
        marked: list[Coord] = []
        if self._grid.role_at(*current) != Role.START:
            self._grid.set_role(*current, Role.EXPANDED)
            marked.append(current)

        tentative = self.cost_from_start(current) + 1
        for neighbor in self._grid.neighbors4(*current):
            cell = self._grid.cell_at(*neighbor)
            if cell.role in (Role.WALL, Role.START):
                continue
            if tentative < self.cost_from_start(neighbor):
                cell.parent = current
            cell.h = _manhattan(neighbor, self._end)

            if cell.role == Role.EMPTY:
                self._grid.set_role(*neighbor, Role.EXPLORED)
                self._frontier.add(neighbor)
                marked.append(neighbor)
            elif cell.role == Role.END:
                self._trace_cursor = current
                self._set_phase(SearchPhase.TRACING)
        return StepOutcome(phase=self._phase, current=current, marked=marked)

    def _select_best(self) -> Coord:
        return min(self._frontier, key=lambda coord: (self.f_score(coord), coord))

    def _set_phase(self, phase: SearchPhase) -> None:
        if phase != self._phase:
            logger.debug("Search phase %s -> %s", self._phase.value, phase.value)
        self._phase = phase


def _manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
