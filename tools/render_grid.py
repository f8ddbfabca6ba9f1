#!/usr/bin/env python3
# Replay a seed + move script and write the resulting board as a PNG (Pillow).

import argparse
import os

from crystalmaze.engine.replay import parse_seed, replay
from crystalmaze.engine.timing import trigger_reveal
from crystalmaze.logging_config import configure_logging
from crystalmaze.render.image import save_session_png


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=str, required=True, help="int or float seed")
    ap.add_argument("--moves", type=str, default="", help="move script, e.g. EESSWN")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=24, help="Tile size in pixels")
    ap.add_argument("--reveal", action="store_true", help="Tint every tile by archetype")
    args = ap.parse_args()

    configure_logging("WARNING")
    try:
        seed = parse_seed(args.seed)
        session, _ = replay(seed, args.moves)
    except ValueError as e:
        raise SystemExit(str(e))
    if args.reveal:
        trigger_reveal(session)

    png = os.path.join(args.outdir, f"seed_{args.seed}_{session.move_count:03d}.png")
    save_session_png(session, png, tile_size=args.tile)
    print(f"Wrote {png} ({session.message})")

if __name__ == "__main__":
    main()
