"""Load scripted placement scenarios from JSON."""

from __future__ import annotations

import json
from pathlib import Path

from gridstar.sim.contracts import Scenario


def load_scenario(path: Path, *, width: int, height: int) -> Scenario:
    data = _load_json(path)
    scenario = Scenario.model_validate(data)
    _validate_bounds(scenario, width=width, height=height)
    return scenario


def _load_json(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing scenario file: {path}") from exc
    return json.loads(text)


def _validate_bounds(scenario: Scenario, *, width: int, height: int) -> None:
    for x, y in scenario.coordinates():
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(
                f"Scenario coordinate ({x}, {y}) is outside the {width}x{height} grid."
            )
