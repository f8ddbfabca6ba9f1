# src/crystalmaze/engine/replay.py
# Replay a move script on a fresh session. Scripts are letters N/E/S/W
# (case-insensitive); whitespace and commas are ignored.

from __future__ import annotations

from typing import List, Tuple, Union

from ..config import DEFAULT_CONFIG, GameConfig
from .moves import EAST, NORTH, SOUTH, WEST, MoveResult, attempt_move
from .state import GameSession, create_session

LETTERS = {"N": NORTH, "E": EAST, "S": SOUTH, "W": WEST}


def parse_seed(text: str) -> Union[int, float]:
    """Seed from the command line: int if it looks like one, else float."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"bad seed {text!r}; expected an int or float") from None


def parse_moves(script: str) -> List[Tuple[int, int]]:
    steps = []
    for i, ch in enumerate(script):
        if ch.isspace() or ch == ",":
            continue
        try:
            steps.append(LETTERS[ch.upper()])
        except KeyError:
            raise ValueError(f"bad move {ch!r} at offset {i}; expected N/E/S/W") from None
    return steps


def format_moves(steps: List[Tuple[int, int]]) -> str:
    names = {v: k for k, v in LETTERS.items()}
    return "".join(names[s] for s in steps)


def replay(
    seed: Union[int, float],
    script: str,
    config: GameConfig = DEFAULT_CONFIG,
) -> Tuple[GameSession, List[MoveResult]]:
    steps = parse_moves(script)
    session = create_session(seed, config)
    results = [attempt_move(session, dx, dy) for dx, dy in steps]
    return session, results
