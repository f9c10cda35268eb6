"""Input sources and cell observers that sit around the search engine."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Iterable, Protocol

from gridstar.sim.contracts import CellSnapshot, Coord, InputEvent, coerce_input
from gridstar.sim.roles import Role

logger = logging.getLogger(__name__)


class PlacementSource(Protocol):
    @property
    def exhausted(self) -> bool:
        """True once the source will never produce another event."""

    def poll(self) -> list[InputEvent]:
        """Return the events that arrived since the previous tick."""


class CellObserver(Protocol):
    def observe(self, tick: int, cells: list[CellSnapshot]) -> None:
        """Receive the cells whose role changed during ``tick``."""


class EventQueue(PlacementSource):
    """Push-driven source; every poll drains everything queued so far."""

    def __init__(self) -> None:
        self._pending: deque[InputEvent] = deque()

    @property
    def exhausted(self) -> bool:
        return False

    def push(self, raw: Any) -> bool:
        """Queue an event or a raw record; invalid records are dropped."""
        event = coerce_input(raw)
        if event is None:
            logger.debug("Dropping invalid input %r", raw)
            return False
        self._pending.append(event)
        return True

    def poll(self) -> list[InputEvent]:
        events = list(self._pending)
        self._pending.clear()
        return events


class ScriptedSource(PlacementSource):
    """Replays a fixed event list, ``per_tick`` events per poll."""

    def __init__(self, events: Iterable[InputEvent], *, per_tick: int = 1) -> None:
        if per_tick < 1:
            raise ValueError(f"per_tick must be at least 1, got {per_tick}")
        self._pending = deque(events)
        self._per_tick = per_tick

    @property
    def exhausted(self) -> bool:
        return not self._pending

    def poll(self) -> list[InputEvent]:
        batch: list[InputEvent] = []
        while self._pending and len(batch) < self._per_tick:
            batch.append(self._pending.popleft())
        return batch


class SnapshotRecorder(CellObserver):
    """Keeps the latest observed role of every cell."""

    def __init__(self) -> None:
        self.roles: dict[Coord, Role] = {}
        self.last_tick = 0

    def observe(self, tick: int, cells: list[CellSnapshot]) -> None:
        self.last_tick = tick
        for cell in cells:
            self.roles[(cell.x, cell.y)] = cell.role

    def cells_with(self, role: Role) -> list[Coord]:
        return sorted(coord for coord, value in self.roles.items() if value == role)
