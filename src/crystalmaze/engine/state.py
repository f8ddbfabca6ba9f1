# src/crystalmaze/engine/state.py
# GameSession: one game from creation to reset. Mutated in place by moves and
# ticks, replaced wholesale on "new game".

from __future__ import annotations

import logging
import random
from collections import deque
from typing import Deque, List, Optional, Tuple, Union

from ..config import DEFAULT_CONFIG, GameConfig
from ..grid import Grid
from ..mapgen.generator import Level, Thresholds, generate_level
from . import messages

log = logging.getLogger(__name__)

XY = Tuple[int, int]
Seed = Union[int, float]


class GameSession:
    def __init__(self, level: Level, *, seed: Seed, config: GameConfig = DEFAULT_CONFIG) -> None:
        self.seed = seed
        self.config = config

        # Map
        self.grid: Grid = level.grid
        self.player: XY = level.player
        self.exit: XY = level.exit
        self.thresholds: Thresholds = level.thresholds
        self.archetype_pool: Tuple[str, ...] = level.archetype_pool

        # Counters
        self.move_count = 0
        self.crystallized = 0

        # Sliding windows (oldest evicted by maxlen)
        self.recent_directions: Deque[str] = deque(maxlen=config.directions_cap)
        self.recent_archetypes: Deque[str] = deque(maxlen=config.archetypes_cap)
        self.recent_positions: Deque[XY] = deque(maxlen=config.positions_cap)

        # Status + presentation
        self.message = messages.IN_PROGRESS
        self.flashes: List[str] = []  # messages emitted during the last move
        self.reveal_timer = 0

    def flash(self, message: str) -> None:
        self.message = message
        self.flashes.append(message)

    @property
    def won(self) -> bool:
        return self.player == self.exit

    def __repr__(self) -> str:
        return (
            f"GameSession(seed={self.seed!r}, player={self.player}, "
            f"moves={self.move_count}, crystallized={self.crystallized})"
        )


def create_session(seed: Optional[Seed] = None, config: GameConfig = DEFAULT_CONFIG) -> GameSession:
    """Build a fresh session. Without a seed, one is drawn at random."""
    if seed is None:
        seed = random.random()
    session = GameSession(generate_level(seed, config), seed=seed, config=config)
    log.debug("new session %r pool=%s", session, session.archetype_pool)
    return session
