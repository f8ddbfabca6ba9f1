# src/crystalmaze/render/board.py
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from ..tiles import EXIT, WALL
from . import palette

if TYPE_CHECKING:
    from ..engine.state import GameSession


def _overlay_rect(surface: pygame.Surface, rect: pygame.Rect, rgba, width: int = 0) -> None:
    # pygame.draw ignores alpha on the target; go through a per-pixel-alpha layer.
    layer = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(layer, rgba, layer.get_rect(), width)
    surface.blit(layer, rect.topleft)


def draw_board(surface: pygame.Surface, session: "GameSession", tile_px: int, origin=(0, 0)) -> None:
    """Draw grid + player. Reads the session, never mutates it."""
    ox, oy = origin
    for tile in session.grid.tiles():
        rect = pygame.Rect(ox + tile.x * tile_px, oy + tile.y * tile_px, tile_px, tile_px)
        pygame.draw.rect(surface, palette.tile_fill(tile, session), rect)

        if tile.state == EXIT:
            _overlay_rect(surface, rect.inflate(-8, -8), palette.EXIT_GLOW)
        elif tile.state == WALL:
            _overlay_rect(surface, rect.inflate(-4, -4), palette.WALL_EDGE, width=1)

    px, py = session.player
    center = (ox + px * tile_px + tile_px // 2, oy + py * tile_px + tile_px // 2)
    pygame.draw.circle(surface, palette.hex_to_rgb(palette.PLAYER), center, tile_px // 3)
