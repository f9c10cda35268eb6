"""Cell roles and the legal transitions between them."""

from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    END = "end"
    EXPANDED = "expanded"
    EXPLORED = "explored"
    PATH = "path"


class RoleTransitionError(ValueError):
    """Raised when a cell is forced into a role its current role forbids."""


# Start, End and Wall are never overwritten by the search.
TRANSITIONS: dict[Role, frozenset[Role]] = {
    Role.EMPTY: frozenset(
        {Role.WALL, Role.START, Role.END, Role.EXPLORED, Role.EXPANDED}
    ),
    Role.EXPLORED: frozenset({Role.EXPANDED, Role.PATH}),
    Role.EXPANDED: frozenset({Role.PATH}),
    Role.START: frozenset(),
    Role.END: frozenset(),
    Role.WALL: frozenset(),
    Role.PATH: frozenset(),
}


def can_transition(current: Role, target: Role) -> bool:
    return target in TRANSITIONS[current]
