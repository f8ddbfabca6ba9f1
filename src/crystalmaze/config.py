from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    grid_size: int = 18

    # History windows (FIFO, oldest evicted)
    directions_cap: int = 12
    archetypes_cap: int = 20
    positions_cap: int = 14

    # Thresholds are base + floor(rng * spread), drawn once per session
    third_exit_base: int = 3
    third_exit_spread: int = 2
    frequency_window_base: int = 6
    frequency_window_spread: int = 4
    frequency_count_base: int = 3
    frequency_count_spread: int = 2
    backtrack_window_base: int = 4
    backtrack_window_spread: int = 3

    pool_size: int = 4

    # Presentation only
    reveal_ticks: int = 60
    reveal_decay: float = 0.02
    tick_hz: int = 30

    def __post_init__(self) -> None:
        # Start (1,1) and exit (n-2,n-2) must differ and sit inside the rim.
        if self.grid_size < 4:
            raise ValueError(f"grid_size must be >= 4, got {self.grid_size}")
        if not 1 <= self.pool_size <= 5:
            raise ValueError(f"pool_size must be in 1..5, got {self.pool_size}")


# Default config (tools may build their own)
DEFAULT_CONFIG = GameConfig()
