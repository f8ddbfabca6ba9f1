# src/crystalmaze/engine/moves.py
# Move processor: one discrete step of the player.
# Hardening trails the player: only the tile being left is evaluated, never the
# destination.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..grid import STEP_NAMES
from ..tiles import EXIT, NEUTRAL, SAFE, is_passable
from . import messages
from .liveness import check_failure
from .rules import apply_tile_rule
from .state import GameSession

NORTH = (0, -1)
EAST = (1, 0)
SOUTH = (0, 1)
WEST = (-1, 0)


@dataclass
class MoveResult:
    moved: bool
    message: str
    crystallized: bool = False
    flashes: List[str] = field(default_factory=list)


def attempt_move(session: Optional[GameSession], dx: int, dy: int) -> MoveResult:
    if session is None:
        return MoveResult(moved=False, message="")

    # Non-unit vectors and off-grid targets are silent no-ops.
    name = STEP_NAMES.get((dx, dy))
    if name is None:
        return MoveResult(moved=False, message=session.message)

    px, py = session.player
    nx, ny = px + dx, py + dy
    grid = session.grid

    if not grid.in_bounds(nx, ny):
        return MoveResult(moved=False, message=session.message)

    session.flashes = []

    dest = grid.get(nx, ny)
    if not is_passable(dest.state):
        session.flash(messages.BLOCKED)
        return MoveResult(moved=False, message=session.message, flashes=list(session.flashes))

    # 1) Leave: bump count, then let the vacated tile's rule decide.
    here = grid.get(px, py)
    here.leave_count += 1
    hardened = apply_tile_rule(session, here)

    # 2) Enter
    dest.last_entry = name
    dest.visits += 1

    # 3) Step
    session.player = (nx, ny)

    # 4) History windows evict their oldest entry on overflow.
    session.recent_directions.append(name)
    session.recent_archetypes.append(dest.archetype)
    session.recent_positions.append((nx, ny))

    # 5) Counters
    session.move_count += 1
    session.message = messages.IN_PROGRESS

    if dest.state == EXIT:
        session.flash(messages.WON)
    else:
        if dest.state == NEUTRAL:
            dest.state = SAFE
        check_failure(session)

    return MoveResult(
        moved=True,
        message=session.message,
        crystallized=hardened,
        flashes=list(session.flashes),
    )
