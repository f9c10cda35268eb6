"""Application entry for headless and interactive runs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from gridstar.db.replay_log import RunLog
from gridstar.render.live_view import run_live_view
from gridstar.sim.grid import (
    DEFAULT_CELL_SIZE,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    Grid,
)
from gridstar.sim.scenario_loader import load_scenario
from gridstar.sim.search import SearchEngine
from gridstar.sim.sources import ScriptedSource
from gridstar.sim.tick_loop import run_ticks

DEFAULT_TICK_RATE = 60.0


@dataclass(frozen=True)
class GridConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    cell_size: int = DEFAULT_CELL_SIZE


@dataclass(frozen=True)
class ScenarioRun:
    run_dir: Path
    engine: SearchEngine
    ticks: int


def resolve_grid_config(
    width: int | None = None,
    height: int | None = None,
    cell_size: int | None = None,
) -> GridConfig:
    return GridConfig(
        width=_resolve("width", width, "GRIDSTAR_WIDTH", DEFAULT_WIDTH),
        height=_resolve("height", height, "GRIDSTAR_HEIGHT", DEFAULT_HEIGHT),
        cell_size=_resolve(
            "cell_size", cell_size, "GRIDSTAR_CELL_SIZE", DEFAULT_CELL_SIZE
        ),
    )


def build_engine(config: GridConfig) -> SearchEngine:
    grid = Grid(config.width, config.height, cell_size=config.cell_size)
    return SearchEngine(grid)


def run_scenario(
    scenario_path: Path,
    base_dir: Path,
    *,
    config: GridConfig | None = None,
    ticks: int | None = None,
    per_tick: int = 1,
) -> ScenarioRun:
    config = config or resolve_grid_config()
    scenario = load_scenario(scenario_path, width=config.width, height=config.height)
    run_log = RunLog.create(base_dir, metadata=_run_metadata(config, ticks=ticks))
    engine = build_engine(config)
    source = ScriptedSource(scenario.to_events(), per_tick=per_tick)
    last_tick = 0
    for payload in run_ticks(engine, source, ticks):
        run_log.append(payload)
        last_tick = payload.tick
    return ScenarioRun(run_dir=run_log.run_dir, engine=engine, ticks=last_tick)


def run_interactive(
    base_dir: Path,
    *,
    config: GridConfig | None = None,
    tick_rate: float = DEFAULT_TICK_RATE,
) -> Path:
    config = config or resolve_grid_config()
    run_log = RunLog.create(base_dir, metadata=_run_metadata(config, ticks=None))
    run_live_view(lambda: build_engine(config), tick_rate=tick_rate, run_log=run_log)
    return run_log.run_dir


def _run_metadata(config: GridConfig, *, ticks: int | None) -> dict[str, object]:
    return {
        "ticks": ticks,
        "width": config.width,
        "height": config.height,
        "cell_size": config.cell_size,
    }


def _resolve(name: str, value: int | None, env_name: str, default: int) -> int:
    if value is None:
        return _env_int(env_name, default)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value
