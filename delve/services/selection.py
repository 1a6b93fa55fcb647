from __future__ import annotations

import random
from typing import Generic, Iterable, List, Tuple, TypeVar

from ..errors import ConfigurationError

T = TypeVar("T")


class WeightedChoice(Generic[T]):
    """Roulette-wheel pick over (category, weight) pairs.

    Weights are non-negative integers. Zero-weight categories stay in the table
    but can never be drawn. An empty table or one summing to zero is rejected at
    construction.
    """

    def __init__(self, pairs: Iterable[Tuple[T, int]]):
        self.pairs: List[Tuple[T, int]] = list(pairs)
        if not self.pairs:
            raise ConfigurationError("weighted table is empty", code="weights_empty")
        for category, weight in self.pairs:
            if isinstance(weight, bool) or not isinstance(weight, int):
                raise ConfigurationError(f"weight for {category!r} must be an integer", code="weights_type")
            if weight < 0:
                raise ConfigurationError(f"weight for {category!r} is negative ({weight})", code="weights_negative")
        self.total = sum(w for _, w in self.pairs)
        if self.total <= 0:
            raise ConfigurationError("weighted table sums to zero", code="weights_zero")

    def choose(self, rng: random.Random) -> T:
        r = rng.randint(1, self.total)
        upto = 0
        for category, weight in self.pairs:
            upto += weight
            if r <= upto:
                return category
        # unreachable: r never exceeds total
        return self.pairs[-1][0]


__all__ = ["WeightedChoice"]
