import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")

M32 = 0xFFFFFFFF
GOLDEN = 0x6D2B79F5  # Mulberry32 increment
SEED_SCALE = 10 ** 9


def imul32(a: int, b: int) -> int:
    # 32-bit wrapping multiply, kept unsigned
    return (a * b) & M32


def mulberry32_next(state: int) -> Tuple[int, int]:
    """Advance one step. Returns (new_state, output_u32)."""
    state = (state + GOLDEN) & M32
    t = state
    t = imul32(t ^ (t >> 15), t | 1)
    t ^= (t + imul32(t ^ (t >> 7), t | 61)) & M32
    return state, (t ^ (t >> 14)) & M32


def seed_to_state(seed: Union[int, float]) -> int:
    """
    Map a game seed to the 32-bit generator state.
    Seeds are scaled by 1e9 and floored; ints are scaled exactly so large
    integer seeds do not lose precision through float math.
    """
    if isinstance(seed, bool):
        raise TypeError("seed must be int or float")
    if isinstance(seed, int):
        return (seed * SEED_SCALE) & M32
    return math.floor(seed * 1e9) & M32


@dataclass
class Mulberry32:
    state: int

    @classmethod
    def from_seed(cls, seed: Union[int, float]) -> "Mulberry32":
        return cls(seed_to_state(seed))

    def next32(self) -> int:
        self.state, out = mulberry32_next(self.state)
        return out

    def random(self) -> float:
        return self.next32() / 4294967296

    def below(self, n: int) -> int:
        assert n > 0
        return int(self.random() * n)

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.below(len(seq))]

    def shuffled(self, seq: Sequence[T]) -> List[T]:
        return shuffled(seq, self)


def shuffled(seq: Sequence[T], rng) -> List[T]:
    """
    Fisher-Yates on a copy. Draws are consumed for i = len-1 down to 1,
    so any object with a ``random()`` method can drive it.
    """
    out = list(seq)
    for i in range(len(out) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        out[i], out[j] = out[j], out[i]
    return out
