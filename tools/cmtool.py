#!/usr/bin/env python3
import argparse, csv, sys

from crystalmaze.engine.replay import format_moves, parse_moves, replay
from crystalmaze.engine.replay import parse_seed as _parse_seed
from crystalmaze.engine.state import create_session
from crystalmaze.logging_config import configure_logging
from crystalmaze.tiles import DESCRIPTIONS

def parse_seed(text):
    try:
        return _parse_seed(text)
    except ValueError as e:
        raise SystemExit(str(e))

def write_tsv(mat, out):
    w = csv.writer(out, delimiter='\t', lineterminator='\n')
    for r in mat:
        w.writerow(r)

def cmd_emit(args):
    session = create_session(parse_seed(args.seed))
    mat = session.grid.archetype_matrix() if args.layer == 'archetype' else session.grid.state_matrix()
    if args.out == '-':
        write_tsv(mat, sys.stdout)
    else:
        with open(args.out, 'w', newline='') as f:
            write_tsv(mat, f)
        print(f"Wrote {args.out}")

def cmd_replay(args):
    seed = parse_seed(args.seed)
    try:
        script = format_moves(parse_moves(args.moves))
    except ValueError as e:
        raise SystemExit(str(e))
    session, results = replay(seed, script)
    print(f"seed={seed!r} script={script}")
    for i, r in enumerate(results, 1):
        mark = '*' if r.crystallized else ' '
        print(f"{i:3d} {mark} moved={int(r.moved)} {r.message}")
    print(f"thresholds={session.thresholds}")
    for name in session.archetype_pool:
        print(f"  {name:12s} {DESCRIPTIONS[name]}")
    print(f"player={session.player} moves={session.move_count} crystallized={session.crystallized} won={session.won}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--log-level', default='WARNING')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=str, required=True)
    p1.add_argument('--layer', choices=['archetype', 'state'], default='archetype')
    p1.add_argument('--out', type=str, default='-')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('replay')
    p2.add_argument('--seed', type=str, required=True)
    p2.add_argument('--moves', type=str, required=True)
    p2.set_defaults(func=cmd_replay)
    args = p.parse_args()
    configure_logging(args.log_level.upper())
    args.func(args)

if __name__ == '__main__':
    main()
