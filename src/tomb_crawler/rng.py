from __future__ import annotations

import logging
import random
from bisect import bisect_right
from itertools import accumulate
from typing import Hashable, Mapping, Optional, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class RandomSource:
    """The single source of randomness for a run.

    Generation draws every number from here, in a fixed order, so one seed
    reproduces the same floor, population and corridor shapes.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)
        logger.debug("RandomSource seeded with %s", "entropy" if seed is None else seed)

    def randint(self, a: int, b: int) -> int:
        """Inclusive on both ends."""
        return self._rng.randint(a, b)

    def random(self) -> float:
        return self._rng.random()

    def coin_flip(self) -> bool:
        return self.random() < 0.5

    def weighted_choice(self, weights: Mapping[K, float]) -> K:
        """Pick a key with probability proportional to its weight.

        Keys are laid out in mapping order; zero-weight keys are never picked.
        """
        if any(w < 0 for w in weights.values()):
            raise ValueError("weights must be non-negative")
        keys = [k for k, w in weights.items() if w > 0]
        if not keys:
            raise ValueError("weighted_choice needs at least one positive weight")
        bounds = list(accumulate(weights[k] for k in keys))
        roll = self.random() * bounds[-1]
        return keys[min(bisect_right(bounds, roll), len(keys) - 1)]

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed!r})"


__all__ = ["RandomSource"]
