import hashlib
import random
from typing import Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

# Returns a float in [0, 1)
RandomSource = Callable[[], float]


def shuffle(items: Sequence[T], random_source: RandomSource = random.random) -> List[T]:
    """Fisher-Yates shuffle into a new list, leaving ``items`` untouched."""
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(random_source() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def seeded_random(seed: str) -> RandomSource:
    """Deterministic source: equal seeds give equal sequences across runs."""
    numeric_seed = int(hashlib.md5(seed.encode()).hexdigest()[:8], 16)
    return random.Random(numeric_seed).random


def make_random_source(seed: Optional[str] = None) -> RandomSource:
    if seed:
        return seeded_random(seed)
    return random.random
