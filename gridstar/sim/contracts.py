"""Serialisable records exchanged between the engine and its collaborators."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)

from gridstar.sim.roles import Role

Coord = tuple[int, int]


class InputKind(str, Enum):
    PLACE = "place"
    CLICK = "click"
    START_SEARCH = "start_search"


class InputEvent(BaseModel):
    """One user input, already debounced by whoever produced it.

    ``place`` carries grid coordinates; ``click`` carries a pointer position in
    display units that the tick loop converts with ``Grid.point_to_cell``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: InputKind
    x: int | None = None
    y: int | None = None

    @model_validator(mode="after")
    def validate_event(self) -> "InputEvent":
        if self.kind == InputKind.START_SEARCH:
            if self.x is not None or self.y is not None:
                raise ValueError("start_search cannot include coordinates")
        elif self.x is None or self.y is None:
            raise ValueError(f"{self.kind.value} requires x and y")
        return self

    @classmethod
    def place(cls, x: int, y: int) -> "InputEvent":
        return cls(kind=InputKind.PLACE, x=x, y=y)

    @classmethod
    def click(cls, px: int, py: int) -> "InputEvent":
        return cls(kind=InputKind.CLICK, x=px, y=py)

    @classmethod
    def start_search(cls) -> "InputEvent":
        return cls(kind=InputKind.START_SEARCH)


class CellSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    x: int
    y: int
    role: Role


class TickPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tick: int
    phase: str
    inputs: list[InputEvent] = Field(default_factory=list)
    changes: list[CellSnapshot] = Field(default_factory=list)
    frontier_size: int = 0
    path: list[Coord] = Field(default_factory=list)
    reset: bool = False


class Scenario(BaseModel):
    """A scripted set of placements followed by an optional search request."""

    model_config = ConfigDict(extra="forbid")

    start: Coord
    end: Coord
    walls: list[Coord] = Field(default_factory=list)
    search: bool = True

    @model_validator(mode="after")
    def validate_scenario(self) -> "Scenario":
        if self.start == self.end:
            raise ValueError("start and end must differ")
        taken = {self.start, self.end}
        for wall in self.walls:
            if wall in taken:
                raise ValueError(f"wall {wall} overlaps another placement")
            taken.add(wall)
        return self

    def coordinates(self) -> list[Coord]:
        return [self.start, self.end, *self.walls]

    def to_events(self) -> list[InputEvent]:
        events = [InputEvent.place(x, y) for x, y in self.coordinates()]
        if self.search:
            events.append(InputEvent.start_search())
        return events


def coerce_input(raw: Any) -> InputEvent | None:
    """Validate a raw input record or drop it."""
    try:
        return InputEvent.model_validate(raw)
    except ValidationError:
        return None
