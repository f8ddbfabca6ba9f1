# src/crystalmaze/engine/timing.py
# Presentation clock. Touches only reveal_timer and Tile.reveal, never gameplay
# state, so it can run at any cadence relative to moves (runner uses tick_hz).

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .state import GameSession


def trigger_reveal(session: Optional["GameSession"]) -> None:
    if session is None:
        return
    session.reveal_timer = session.config.reveal_ticks


def tick(session: Optional["GameSession"]) -> None:
    """Advance one presentation frame: countdown + per-tile glow decay."""
    if session is None:
        return
    if session.reveal_timer > 0:
        session.reveal_timer -= 1
    decay = session.config.reveal_decay
    for tile in session.grid.tiles():
        if tile.reveal > 0:
            tile.reveal = max(0.0, tile.reveal - decay)


def tick_period_ms(session: "GameSession") -> int:
    return round(1000 / session.config.tick_hz)
