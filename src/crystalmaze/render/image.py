# Render a session snapshot to PNG using Pillow (debug/replay export).

import os

from PIL import Image, ImageDraw

from ..tiles import EXIT, WALL
from . import palette


def render_session(session, tile_size: int = 24, margin: int = 0) -> Image.Image:
    g = session.grid
    w = g.width * tile_size + 2 * margin
    h = g.height * tile_size + 2 * margin
    canvas = Image.new("RGBA", (w, h), palette.hex_to_rgb(palette.BG) + (255,))
    overlay = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    fx = ImageDraw.Draw(overlay)

    for tile in g.tiles():
        x0 = margin + tile.x * tile_size
        y0 = margin + tile.y * tile_size
        x1, y1 = x0 + tile_size - 1, y0 + tile_size - 1
        draw.rectangle((x0, y0, x1, y1), fill=palette.tile_fill(tile, session))
        if tile.state == EXIT:
            fx.rectangle((x0 + 4, y0 + 4, x1 - 4, y1 - 4), fill=palette.EXIT_GLOW)
        elif tile.state == WALL:
            fx.rectangle((x0 + 2, y0 + 2, x1 - 2, y1 - 2), outline=palette.WALL_EDGE)

    canvas = Image.alpha_composite(canvas, overlay)

    px, py = session.player
    cx = margin + px * tile_size + tile_size / 2
    cy = margin + py * tile_size + tile_size / 2
    r = tile_size / 3
    ImageDraw.Draw(canvas).ellipse((cx - r, cy - r, cx + r, cy + r), fill=palette.hex_to_rgb(palette.PLAYER))
    return canvas


def save_session_png(session, out_png: str, tile_size: int = 24, margin: int = 0) -> str:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_session(session, tile_size=tile_size, margin=margin).save(out_png)
    return out_png
