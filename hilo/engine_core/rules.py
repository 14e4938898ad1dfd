"""
Game Rules - The fixed parameters of the guessing game.
"""

from __future__ import annotations
from dataclasses import dataclass


MIN_NUMBER = 1
MAX_NUMBER = 99


@dataclass(frozen=True)
class GameRules:
    """
    Inclusive range that targets and guesses must fall in.

    The reducer validates every number against these bounds.
    """
    min_number: int = MIN_NUMBER
    max_number: int = MAX_NUMBER

    def __post_init__(self):
        if self.min_number > self.max_number:
            raise ValueError(
                f"min_number ({self.min_number}) must be <= max_number ({self.max_number})"
            )

    def in_range(self, value: int) -> bool:
        return self.min_number <= value <= self.max_number

    @property
    def range_text(self) -> str:
        return f"{self.min_number} to {self.max_number}"


DEFAULT_RULES = GameRules()
