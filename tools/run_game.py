# tools/run_game.py
# Playable pygame front-end. Input events drive attempt_move; a fixed-rate loop
# timer event drives the presentation tick. The core never sees pygame.

from __future__ import annotations

import argparse
import logging
from typing import Optional

import pygame

# Project imports
try:
    from crystalmaze.config import GameConfig
    from crystalmaze.engine.moves import EAST, NORTH, SOUTH, WEST, attempt_move
    from crystalmaze.engine.replay import parse_seed as _parse_seed
    from crystalmaze.engine.state import create_session
    from crystalmaze.engine.timing import tick, tick_period_ms, trigger_reveal
    from crystalmaze.logging_config import configure_logging
    from crystalmaze.render import palette
    from crystalmaze.render.board import draw_board
    from crystalmaze.ui.status_bar import StatusBarState, render_status_bar
except ImportError as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

log = logging.getLogger("crystalmaze.tools.run_game")

TICK_EVENT = pygame.USEREVENT + 1

KEYMAP = {
    pygame.K_UP: NORTH, pygame.K_w: NORTH,
    pygame.K_DOWN: SOUTH, pygame.K_s: SOUTH,
    pygame.K_LEFT: WEST, pygame.K_a: WEST,
    pygame.K_RIGHT: EAST, pygame.K_d: EAST,
}


def parse_seed(text: Optional[str]):
    if text is None:
        return None
    try:
        return _parse_seed(text)
    except ValueError as e:
        raise SystemExit(f"Invalid --seed: {e}") from None


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="crystalmaze: reach the exit before the path seals")
    parser.add_argument("--seed", type=str, default=None, help="int or float seed (random if omitted)")
    parser.add_argument("--size", type=int, default=18, help="grid width/height in tiles")
    parser.add_argument("--tile", type=int, default=32, help="tile size in pixels")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    configure_logging(args.log_level.upper())
    try:
        config = GameConfig(grid_size=args.size)
    except ValueError as e:
        raise SystemExit(f"Invalid --size: {e}") from None
    seed = parse_seed(args.seed)

    session = create_session(seed, config)
    log.info("seed=%r pool=%s thresholds=%s", session.seed, session.archetype_pool, session.thresholds)

    pygame.init()
    board_px = config.grid_size * args.tile
    bar_h = max(20, args.tile)
    screen = pygame.display.set_mode((board_px, board_px + bar_h))
    pygame.display.set_caption("crystalmaze  |  arrows/WASD move  R reveal  N new game  Esc quit")
    clock = pygame.time.Clock()
    pygame.time.set_timer(TICK_EVENT, tick_period_ms(session))

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == TICK_EVENT:
                tick(session)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_n:
                    # N always draws a fresh seed, even when --seed was given.
                    session = create_session(None, config)
                    log.info("new game seed=%r", session.seed)
                elif event.key == pygame.K_r:
                    trigger_reveal(session)
                elif event.key in KEYMAP:
                    dx, dy = KEYMAP[event.key]
                    res = attempt_move(session, dx, dy)
                    if res.crystallized:
                        log.info("crystallized (%d total)", session.crystallized)
                    if res.moved and session.won:
                        log.info("won in %d moves", session.move_count)

        screen.fill(palette.hex_to_rgb(palette.BG))
        draw_board(screen, session, args.tile)
        render_status_bar(screen, (0, board_px), board_px, bar_h, StatusBarState.from_session(session))

        pygame.display.flip()
        clock.tick(config.tick_hz)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
