"""Placement policy for user clicks on the grid."""

from __future__ import annotations

import logging
from enum import Enum

from gridstar.sim.grid import Grid
from gridstar.sim.roles import Role

logger = logging.getLogger(__name__)


class PlacementKind(str, Enum):
    START = "start"
    END = "end"
    WALL = "wall"
    REJECTED = "rejected"


def apply_placement(
    grid: Grid, x: int, y: int, *, has_start: bool, has_end: bool
) -> PlacementKind:
    """Place Start, then End, then Walls; only Empty cells accept a placement.

    Walls are never removed again.
    """
    role = grid.role_at(x, y)
    if role != Role.EMPTY:
        logger.debug("Ignoring placement on %s cell (%d, %d)", role.value, x, y)
        return PlacementKind.REJECTED

    if not has_start:
        grid.set_role(x, y, Role.START)
        return PlacementKind.START
    if not has_end:
        grid.set_role(x, y, Role.END)
        return PlacementKind.END
    grid.set_role(x, y, Role.WALL)
    return PlacementKind.WALL
