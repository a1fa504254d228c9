# core/random_selector.py
import random
from typing import Optional, Sequence


class RandomSelector:
    """
    Uniform pick over a non-empty key list. Not cryptographically strong.
    Pass a seeded `random.Random` for reproducible picks.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def select(self, keys: Sequence[str]) -> str:
        # Caller guarantees keys is non-empty
        return keys[self._rng.randrange(len(keys))]
