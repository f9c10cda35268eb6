"""Append-only JSONL log of a run: one header, then one record per tick."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from gridstar.sim.contracts import TickPayload

SCHEMA_VERSION = 1
RUN_LOG_NAME = "run.jsonl"


@dataclass(frozen=True)
class RunLog:
    run_dir: Path

    @property
    def path(self) -> Path:
        return self.run_dir / RUN_LOG_NAME

    @classmethod
    def create(
        cls,
        base_dir: Path,
        *,
        metadata: dict[str, Any],
        timestamp: str | None = None,
    ) -> "RunLog":
        stamp = timestamp or datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%SZ")
        base_dir.mkdir(parents=True, exist_ok=True)
        run_id = stamp
        suffix = 1
        while True:
            try:
                (base_dir / run_id).mkdir()
                break
            except FileExistsError:
                suffix += 1
                run_id = f"{stamp}-{suffix}"
        log = cls(run_dir=base_dir / run_id)
        log.write("header", metadata={"run_id": run_id, **metadata})
        return log

    def append(self, payload: TickPayload) -> None:
        self.write("tick", payload=payload.model_dump(mode="json"))

    def write(self, record_type: str, **fields: Any) -> None:
        record = {"type": record_type, "schema_version": SCHEMA_VERSION, **fields}
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record) + "\n")
