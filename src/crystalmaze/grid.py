from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .tiles import WALL, Tile

XY = Tuple[int, int]

# (dx, dy, name); order is the BFS/entrapment scan order.
DIRECTIONS = (
    (0, -1, "north"),
    (1, 0, "east"),
    (0, 1, "south"),
    (-1, 0, "west"),
)

STEP_NAMES = {(dx, dy): name for dx, dy, name in DIRECTIONS}


def direction_name(dx: int, dy: int) -> str:
    name = STEP_NAMES.get((dx, dy))
    if name is not None:
        return name
    raise ValueError(f"not a unit direction: ({dx}, {dy})")


@dataclass
class Grid:
    rows: List[List[Tile]]

    @classmethod
    def build(cls, width: int, height: int, archetype_at) -> "Grid":
        # archetype_at(x, y) is called row-major; generators rely on that order.
        rows = []
        for y in range(height):
            rows.append([Tile(x, y, archetype_at(x, y)) for x in range(width)])
        return cls(rows=rows)

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Tile:
        return self.rows[y][x]

    def at(self, pos: XY) -> Tile:
        return self.rows[pos[1]][pos[0]]

    def is_wall(self, x: int, y: int) -> bool:
        return self.rows[y][x].state == WALL

    def neighbors(self, x: int, y: int) -> Iterator[XY]:
        """In-bounds 4-neighbours, in DIRECTIONS order."""
        for dx, dy, _ in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield (nx, ny)

    def tiles(self) -> Iterator[Tile]:
        for row in self.rows:
            yield from row

    def state_matrix(self) -> List[List[str]]:
        return [[t.state for t in row] for row in self.rows]

    def archetype_matrix(self) -> List[List[str]]:
        return [[t.archetype for t in row] for row in self.rows]
