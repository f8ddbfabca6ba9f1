# Start/exit placement. Both sit one cell inside the rim on opposite corners.

from typing import Tuple

from ..grid import Grid
from ..tiles import EXIT, SAFE

XY = Tuple[int, int]


def start_position(grid: Grid) -> XY:
    return (1, 1)


def exit_position(grid: Grid) -> XY:
    return (grid.width - 2, grid.height - 2)


def place_start_and_exit(grid: Grid) -> Tuple[XY, XY]:
    """Mark start SAFE and exit EXIT. Returns (player, exit)."""
    player = start_position(grid)
    exit_xy = exit_position(grid)
    assert player != exit_xy, "grid too small for distinct start/exit"
    grid.at(player).state = SAFE
    grid.at(exit_xy).state = EXIT
    return player, exit_xy
