"""
Random Source - Where system-picked targets come from.

Sessions take a RandomSource instead of calling the random module, so a
seeded source makes the "system picks the target" path reproducible.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional


@dataclass
class RandomSource:
    """Seedable wrapper around random.Random, private to one session."""

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)
