# Tile states, archetype names and the per-cell record.

from dataclasses import dataclass
from typing import Optional, Tuple

NEUTRAL = "neutral"
SAFE = "safe"
WALL = "wall"
EXIT = "exit"
STATES = (NEUTRAL, SAFE, WALL, EXIT)

THIRD_EXIT = "third-exit"
NORTH_ENTRY = "north-entry"
SEQUENCE = "sequence"
FREQUENCY = "frequency"
BACKTRACK = "backtrack"

# Canonical order matters: the session pool is a shuffle of this tuple.
ARCHETYPES = (THIRD_EXIT, NORTH_ENTRY, SEQUENCE, FREQUENCY, BACKTRACK)

DESCRIPTIONS = {
    THIRD_EXIT: "Hardens after leaving it three times.",
    NORTH_ENTRY: "Hardens if entered from the north.",
    SEQUENCE: "Hardens if you repeat a direction twice.",
    FREQUENCY: "Hardens if you visited similar tiles too often recently.",
    BACKTRACK: "Hardens if you return too soon.",
}


def is_passable(state: str) -> bool:
    return state != WALL


def is_settled(state: str) -> bool:
    # Walls and the exit never re-evaluate their rule.
    return state in (WALL, EXIT)


@dataclass
class Tile:
    x: int
    y: int
    archetype: str
    state: str = NEUTRAL
    leave_count: int = 0
    visits: int = 0
    last_entry: Optional[str] = None
    reveal: float = 0.0  # presentation only

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)
