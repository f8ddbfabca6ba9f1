# src/crystalmaze/engine/liveness.py
# Read-only checks run after every non-winning move.

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Set, Tuple

from ..grid import DIRECTIONS, Grid
from . import messages

if TYPE_CHECKING:
    from .state import GameSession

XY = Tuple[int, int]


def path_exists(grid: Grid, start: XY, goal: XY) -> bool:
    """BFS over non-wall tiles, 4-neighbour, bounded by the grid."""
    seen: Set[XY] = {start}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        if cur == goal:
            return True
        for nxt in grid.neighbors(*cur):
            if nxt in seen or grid.is_wall(*nxt):
                continue
            seen.add(nxt)
            queue.append(nxt)
    return False


def is_trapped(grid: Grid, pos: XY) -> bool:
    # Off-grid counts as blocking.
    x, y = pos
    for dx, dy, _ in DIRECTIONS:
        nx, ny = x + dx, y + dy
        if grid.in_bounds(nx, ny) and not grid.is_wall(nx, ny):
            return False
    return True


def check_failure(session: "GameSession") -> None:
    """Reachability first; entrapment overwrites when both apply."""
    if not path_exists(session.grid, session.player, session.exit):
        session.flash(messages.SEALED)
    if is_trapped(session.grid, session.player):
        session.flash(messages.TRAPPED)
