"""Read run logs back and rebuild grid state from them."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Iterator

from gridstar.sim.contracts import CellSnapshot, TickPayload
from gridstar.sim.roles import Role


def read_header(path: Path) -> dict[str, Any] | None:
    for record in _iter_records(path, "header"):
        return record.get("metadata", {})
    return None


def read_tick_payloads(path: Path) -> Iterator[TickPayload]:
    for record in _iter_records(path, "tick"):
        if record.get("payload") is not None:
            yield TickPayload.model_validate(record["payload"])


def rebuild_cells(
    payloads: Iterable[TickPayload], *, width: int, height: int
) -> list[CellSnapshot]:
    """Fold per-tick role changes onto an all-empty grid.

    A payload flagged ``reset`` starts again from an empty grid.
    """
    roles = {(x, y): Role.EMPTY for y in range(height) for x in range(width)}
    for payload in payloads:
        if payload.reset:
            roles = dict.fromkeys(roles, Role.EMPTY)
        for change in payload.changes:
            if (change.x, change.y) in roles:
                roles[(change.x, change.y)] = change.role
    return [CellSnapshot(x=x, y=y, role=role) for (x, y), role in roles.items()]


def _iter_records(path: Path, record_type: str) -> Iterator[dict[str, Any]]:
    """Yield records of one type, skipping lines that are not valid JSON."""
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            try:
                record = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(record, dict) and record.get("type") == record_type:
                yield record
