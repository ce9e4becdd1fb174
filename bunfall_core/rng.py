from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar('T')

_STATE_BITS = 64


@dataclass(frozen=True)
class Seed:
    """Opaque PRNG state. Every draw consumes a seed and hands back the next one."""
    state: int


def initial_seed(value: int) -> Seed:
    return Seed(int(value) & ((1 << _STATE_BITS) - 1))


def seed_from_time() -> Seed:
    """Seed derived from the wall clock, for fresh process starts."""
    return initial_seed(time.time_ns())


def step_int(seed: Seed, low: int, high: int) -> Tuple[int, Seed]:
    """Draw a uniform integer in [low, high] and return it with the next seed."""
    rng = random.Random(seed.state)
    value = rng.randint(low, high)
    return value, Seed(rng.getrandbits(_STATE_BITS))


def pick_random(seed: Seed, items: Sequence[T]) -> Tuple[Optional[T], Seed]:
    """Pick one element uniformly. An empty sequence yields None and the same seed."""
    if not items:
        return None, seed
    index, next_seed = step_int(seed, 0, len(items) - 1)
    return items[index], next_seed


def seed_debug_repr(seed: Seed) -> str:
    return f"seed:{seed.state:016x}"
