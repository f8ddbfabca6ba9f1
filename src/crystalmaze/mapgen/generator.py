# Level generator: archetype pool, thresholds, tile grid, start/exit.
# Draw order is part of the contract (same seed -> same level):
#   pool shuffle, 4 thresholds, then one archetype per cell row-major.

import logging
from dataclasses import dataclass
from typing import Tuple, Union

from ..config import DEFAULT_CONFIG, GameConfig
from ..grid import Grid
from ..rng import Mulberry32
from ..tiles import ARCHETYPES
from .placement import place_start_and_exit

log = logging.getLogger(__name__)

XY = Tuple[int, int]


@dataclass(frozen=True)
class Thresholds:
    third_exit: int
    frequency_window: int
    frequency_count: int
    backtrack_window: int


@dataclass
class Level:
    grid: Grid
    player: XY
    exit: XY
    thresholds: Thresholds
    archetype_pool: Tuple[str, ...]


def draw_pool(rng: Mulberry32, config: GameConfig = DEFAULT_CONFIG) -> Tuple[str, ...]:
    return tuple(rng.shuffled(ARCHETYPES)[: config.pool_size])


def draw_thresholds(rng: Mulberry32, config: GameConfig = DEFAULT_CONFIG) -> Thresholds:
    c = config
    # Statement order is the draw order.
    third_exit = c.third_exit_base + rng.below(c.third_exit_spread)
    frequency_window = c.frequency_window_base + rng.below(c.frequency_window_spread)
    frequency_count = c.frequency_count_base + rng.below(c.frequency_count_spread)
    backtrack_window = c.backtrack_window_base + rng.below(c.backtrack_window_spread)
    return Thresholds(
        third_exit=third_exit,
        frequency_window=frequency_window,
        frequency_count=frequency_count,
        backtrack_window=backtrack_window,
    )


def generate_level(seed: Union[int, float], config: GameConfig = DEFAULT_CONFIG) -> Level:
    rng = Mulberry32.from_seed(seed)

    pool = draw_pool(rng, config)
    thresholds = draw_thresholds(rng, config)

    n = config.grid_size
    grid = Grid.build(n, n, lambda x, y: rng.choice(pool))
    player, exit_xy = place_start_and_exit(grid)

    log.debug("level seed=%r pool=%s thresholds=%s", seed, pool, thresholds)
    return Level(
        grid=grid,
        player=player,
        exit=exit_xy,
        thresholds=thresholds,
        archetype_pool=pool,
    )
