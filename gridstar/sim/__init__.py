"""Grid model and incremental A* search engine."""

from gridstar.sim.contracts import (
    CellSnapshot,
    InputEvent,
    InputKind,
    Scenario,
    TickPayload,
    coerce_input,
)
from gridstar.sim.grid import Cell, Grid, GridBoundsError
from gridstar.sim.placement import PlacementKind, apply_placement
from gridstar.sim.roles import Role, RoleTransitionError, can_transition
from gridstar.sim.search import SearchEngine, SearchPhase, StepOutcome
from gridstar.sim.sources import (
    CellObserver,
    EventQueue,
    PlacementSource,
    ScriptedSource,
    SnapshotRecorder,
)
from gridstar.sim.tick_loop import advance_tick, run_ticks

__all__ = [
    "Cell",
    "CellObserver",
    "CellSnapshot",
    "EventQueue",
    "Grid",
    "GridBoundsError",
    "InputEvent",
    "InputKind",
    "PlacementKind",
    "PlacementSource",
    "Role",
    "RoleTransitionError",
    "Scenario",
    "ScriptedSource",
    "SearchEngine",
    "SearchPhase",
    "SnapshotRecorder",
    "StepOutcome",
    "TickPayload",
    "advance_tick",
    "apply_placement",
    "can_transition",
    "coerce_input",
    "run_ticks",
]
