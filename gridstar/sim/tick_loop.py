"""Tick orchestration: input, one search step, then observers."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from gridstar.sim.contracts import InputEvent, InputKind, TickPayload
from gridstar.sim.search import SearchEngine, SearchPhase
from gridstar.sim.sources import CellObserver, PlacementSource

logger = logging.getLogger(__name__)


def advance_tick(
    engine: SearchEngine,
    tick: int,
    events: Sequence[InputEvent],
    *,
    observers: Iterable[CellObserver] = (),
) -> TickPayload:
    for event in events:
        _apply_input(engine, event)
    engine.step()

    changes = engine.grid.drain_changes()
    for observer in observers:
        observer.observe(tick, changes)
    return TickPayload(
        tick=tick,
        phase=engine.phase.value,
        inputs=list(events),
        changes=changes,
        frontier_size=len(engine.frontier),
        path=engine.path,
    )


def run_ticks(
    engine: SearchEngine,
    source: PlacementSource,
    ticks: int | None = None,
    *,
    observers: Iterable[CellObserver] = (),
) -> Iterator[TickPayload]:
    """Yield one payload per tick.

    Without a tick limit the loop ends once the source has nothing left and
    the engine can no longer change the grid.
    """
    observers = list(observers)
    tick = 0
    while ticks is None or tick < ticks:
        tick += 1
        payload = advance_tick(engine, tick, source.poll(), observers=observers)
        yield payload
        if ticks is None and source.exhausted and _is_quiet(engine):
            logger.debug("Run settled at tick %d in phase %s", tick, payload.phase)
            return


def _apply_input(engine: SearchEngine, event: InputEvent) -> None:
    if event.kind == InputKind.START_SEARCH:
        engine.request_search_start()
        return

    assert event.x is not None and event.y is not None
    if event.kind == InputKind.CLICK:
        coord = engine.grid.point_to_cell(event.x, event.y)
        if coord is None:
            logger.debug("Ignoring click outside the grid at (%d, %d)", event.x, event.y)
            return
    else:
        coord = (event.x, event.y)
    engine.place_or_toggle(*coord)


def _is_quiet(engine: SearchEngine) -> bool:
    return engine.settled or engine.phase == SearchPhase.IDLE
