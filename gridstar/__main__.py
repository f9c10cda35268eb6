"""Module entry point for `python -m gridstar`."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from gridstar.app import (
    DEFAULT_TICK_RATE,
    resolve_grid_config,
    run_interactive,
    run_scenario,
)
from gridstar.db.replay_log import RUN_LOG_NAME
from gridstar.render.grid_view import render_frame
from gridstar.render.replay_reader import read_header, read_tick_payloads, rebuild_cells
from gridstar.sim.grid import DEFAULT_HEIGHT, DEFAULT_WIDTH

DEFAULT_REPLAY_DIR = Path("replay")
DEFAULT_LOG_LEVEL = "WARNING"


def main() -> None:
    parser = argparse.ArgumentParser(description="Step-wise A* grid visualizer.")
    parser.add_argument(
        "--scenario",
        type=Path,
        default=None,
        help="Run a JSON placement scenario headless and print the final grid.",
    )
    parser.add_argument(
        "--replay",
        type=Path,
        default=None,
        help="Print the final grid of a saved run folder.",
    )
    parser.add_argument(
        "--replay-dir",
        type=Path,
        default=DEFAULT_REPLAY_DIR,
        help="Base replay directory for new runs.",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=None,
        help="Tick limit for scenario runs. Omit to run until settled.",
    )
    parser.add_argument("--width", type=int, default=None, help="Grid width in cells.")
    parser.add_argument(
        "--height", type=int, default=None, help="Grid height in cells."
    )
    parser.add_argument(
        "--tick-rate",
        type=float,
        default=DEFAULT_TICK_RATE,
        help="Ticks per second in the interactive viewer.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to GRIDSTAR_LOG_LEVEL or WARNING).",
    )
    args = parser.parse_args()
    _configure_logging(args.log_level)

    try:
        config = resolve_grid_config(width=args.width, height=args.height)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    if args.replay is not None:
        _print_replay(args.replay)
        return

    if args.scenario is not None:
        try:
            run = run_scenario(
                args.scenario, args.replay_dir, config=config, ticks=args.ticks
            )
        except (FileNotFoundError, ValueError) as exc:
            raise SystemExit(str(exc)) from exc
        engine = run.engine
        console = Console()
        console.print(
            render_frame(
                engine.grid.snapshot(),
                width=config.width,
                height=config.height,
                tick=run.ticks,
                phase=engine.phase.value,
                frontier_size=len(engine.frontier),
                path=engine.path,
            )
        )
        print(f"Run saved to {run.run_dir}")
        return

    run_dir = run_interactive(args.replay_dir, config=config, tick_rate=args.tick_rate)
    print(f"Run saved to {run_dir}")


def _configure_logging(level: str | None) -> None:
    name = (level or os.getenv("GRIDSTAR_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=name,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _print_replay(run_folder: Path) -> None:
    log_path = run_folder / RUN_LOG_NAME
    if not log_path.exists():
        raise SystemExit(f"No replay log found at {log_path}")
    header = read_header(log_path) or {}
    width = int(header.get("width", DEFAULT_WIDTH))
    height = int(header.get("height", DEFAULT_HEIGHT))
    payloads = list(read_tick_payloads(log_path))
    last = payloads[-1] if payloads else None
    Console().print(
        render_frame(
            rebuild_cells(payloads, width=width, height=height),
            width=width,
            height=height,
            tick=last.tick if last else 0,
            phase=last.phase if last else "idle",
            frontier_size=last.frontier_size if last else 0,
            path=last.path if last else [],
        )
    )


if __name__ == "__main__":
    main()
