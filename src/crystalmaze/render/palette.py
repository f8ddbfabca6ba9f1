# src/crystalmaze/render/palette.py
# Board colours. Pure functions; pygame and Pillow front-ends both draw from here.

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from ..tiles import BACKTRACK, FREQUENCY, NORTH_ENTRY, SAFE, SEQUENCE, THIRD_EXIT, WALL, Tile

if TYPE_CHECKING:
    from ..engine.state import GameSession

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

BG = "#0b0f19"
RIM = "#1c2234"
FLOOR = "#121827"
WALL_FILL = "#283146"
SAFE_FILL = "#151e2f"
PLAYER = "#fefefe"

EXIT_GLOW: RGBA = (120, 255, 200, 89)    # ~0.35 alpha
WALL_EDGE: RGBA = (80, 100, 140, 128)    # ~0.5 alpha

ARCHETYPE_COLORS = {
    THIRD_EXIT: "#365b9d",
    NORTH_ENTRY: "#5f3a88",
    SEQUENCE: "#5a7d3b",
    FREQUENCY: "#7c4a2a",
    BACKTRACK: "#4e7b7a",
}
UNKNOWN_ARCHETYPE = "#2b3446"

# Tint strength: freshly hardened tiles glow brighter than a board-wide reveal.
TINT_FRESH = 0.8
TINT_REVEAL = 0.4


def hex_to_rgb(color: str) -> RGB:
    v = int(color.lstrip("#"), 16)
    return ((v >> 16) & 255, (v >> 8) & 255, v & 255)


def as_rgb(color) -> RGB:
    return hex_to_rgb(color) if isinstance(color, str) else tuple(color[:3])


def tint(base, overlay, alpha: float) -> RGB:
    b, o = as_rgb(base), as_rgb(overlay)
    return tuple(round(b[i] * (1 - alpha) + o[i] * alpha) for i in range(3))


def archetype_color(archetype: str) -> str:
    return ARCHETYPE_COLORS.get(archetype, UNKNOWN_ARCHETYPE)


def is_rim(tile: Tile, width: int, height: int) -> bool:
    return tile.x in (0, width - 1) or tile.y in (0, height - 1)


def tile_fill(tile: Tile, session: "GameSession") -> RGB:
    """Final fill colour of one cell, before the exit/wall decorations."""
    g = session.grid
    fill = RIM if is_rim(tile, g.width, g.height) else FLOOR
    if tile.state == WALL:
        fill = WALL_FILL
    elif tile.state == SAFE:
        fill = SAFE_FILL

    if tile.reveal > 0 or session.reveal_timer > 0:
        strength = TINT_FRESH if tile.reveal > 0 else TINT_REVEAL
        return tint(fill, archetype_color(tile.archetype), strength)
    return hex_to_rgb(fill)
