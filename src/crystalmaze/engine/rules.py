# src/crystalmaze/engine/rules.py
# Archetype rules. Each archetype maps to exactly one pure predicate
# (tile, session) -> bool; a tile only ever answers to its own archetype.
#
# Timing: rules run on the tile being vacated, after its leave_count bump and
# before the current move lands in the history windows. So "recent_*" below
# never includes the step that is being taken right now.

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Deque, List, Mapping, TypeVar

from ..tiles import (
    BACKTRACK,
    FREQUENCY,
    NORTH_ENTRY,
    SEQUENCE,
    THIRD_EXIT,
    WALL,
    Tile,
    is_settled,
)
from . import messages

if TYPE_CHECKING:
    from .state import GameSession

log = logging.getLogger(__name__)

T = TypeVar("T")
Rule = Callable[[Tile, "GameSession"], bool]


def _tail(window: Deque[T], n: int) -> List[T]:
    # Last n entries; n == 0 keeps the whole window.
    return list(window)[-n:]


def third_exit(tile: Tile, session: "GameSession") -> bool:
    return tile.leave_count >= session.thresholds.third_exit


def north_entry(tile: Tile, session: "GameSession") -> bool:
    return tile.last_entry == "north"


def sequence(tile: Tile, session: "GameSession") -> bool:
    # Global repeat detector; an empty or one-entry window counts as a repeat.
    last = _tail(session.recent_directions, 2)
    return all(d == last[0] for d in last)


def frequency(tile: Tile, session: "GameSession") -> bool:
    t = session.thresholds
    recent = _tail(session.recent_archetypes, t.frequency_window)
    return recent.count(tile.archetype) >= t.frequency_count


def backtrack(tile: Tile, session: "GameSession") -> bool:
    recent = _tail(session.recent_positions, session.thresholds.backtrack_window)
    return tile.pos in recent


RULES: Mapping[str, Rule] = MappingProxyType({
    THIRD_EXIT: third_exit,
    NORTH_ENTRY: north_entry,
    SEQUENCE: sequence,
    FREQUENCY: frequency,
    BACKTRACK: backtrack,
})


def should_crystallize(tile: Tile, session: "GameSession") -> bool:
    if is_settled(tile.state):
        return False
    rule = RULES.get(tile.archetype)
    if rule is None:
        return False
    return rule(tile, session)


def apply_tile_rule(session: "GameSession", tile: Tile) -> bool:
    """Harden ``tile`` if its archetype rule fires. Returns True on hardening."""
    if not should_crystallize(tile, session):
        return False
    tile.state = WALL
    tile.reveal = 1.0
    session.crystallized += 1
    log.debug("crystallized %s at %s (total %d)", tile.archetype, tile.pos, session.crystallized)
    session.flash(messages.CRYSTALLIZED)
    return True
