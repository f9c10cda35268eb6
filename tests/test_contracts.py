import pytest
from pydantic import ValidationError

from gridstar.sim.contracts import (
    CellSnapshot,
    InputEvent,
    InputKind,
    Scenario,
    TickPayload,
    coerce_input,
)
from gridstar.sim.roles import Role


def test_input_event_requires_coordinates_for_placement() -> None:
    event = InputEvent.place(3, 4)
    assert event.kind == InputKind.PLACE
    assert (event.x, event.y) == (3, 4)

    with pytest.raises(ValidationError):
        InputEvent(kind="place", x=1)
    with pytest.raises(ValidationError):
        InputEvent(kind="start_search", x=1, y=1)


def test_coerce_input_drops_invalid_records() -> None:
    assert coerce_input({"kind": "start_search"}) == InputEvent.start_search()
    assert coerce_input({"kind": "click", "x": 40, "y": 60}) is not None
    assert coerce_input({"kind": "erase", "x": 1, "y": 1}) is None
    assert coerce_input({"kind": "place", "x": 1, "y": 1, "z": 0}) is None
    assert coerce_input("place") is None


def test_scenario_expands_to_ordered_events() -> None:
    scenario = Scenario(start=(0, 0), end=(3, 3), walls=[(1, 1), (2, 2)])
    events = scenario.to_events()

    assert [event.kind for event in events] == [
        InputKind.PLACE,
        InputKind.PLACE,
        InputKind.PLACE,
        InputKind.PLACE,
        InputKind.START_SEARCH,
    ]
    assert (events[1].x, events[1].y) == (3, 3)

    quiet = Scenario(start=(0, 0), end=(3, 3), search=False)
    assert all(event.kind == InputKind.PLACE for event in quiet.to_events())


def test_scenario_rejects_overlapping_placements() -> None:
    with pytest.raises(ValidationError):
        Scenario(start=(1, 1), end=(1, 1))
    with pytest.raises(ValidationError):
        Scenario(start=(0, 0), end=(2, 2), walls=[(0, 0)])
    with pytest.raises(ValidationError):
        Scenario(start=(0, 0), end=(2, 2), walls=[(1, 1), (1, 1)])


def test_tick_payload_serialises_roles_as_strings() -> None:
    payload = TickPayload(
        tick=2,
        phase="tracing",
        changes=[CellSnapshot(x=1, y=0, role=Role.PATH)],
        path=[],
    )
    dumped = payload.model_dump(mode="json")

    assert dumped["changes"][0]["role"] == "path"
    assert dumped["reset"] is False
