"""
Game State - Snapshot of one guessing session.

Design principles:
- Immutable-friendly: transitions return a new state
- Serializable: plain values only
- All state changes go through the reducer
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class GameStatus(Enum):
    """Lifecycle of a session."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"


class Outcome(Enum):
    """Classification of a single valid guess."""
    CORRECT = "correct"
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"


@dataclass(frozen=True)
class GameState:
    """
    Complete session state at a point in time.

    `guesses` is most-recent-first. `target` is None until the session
    starts and is discarded on reset.
    """
    status: GameStatus = GameStatus.NOT_STARTED
    target: int | None = None
    guesses: tuple[int, ...] = ()

    @property
    def guess_count(self) -> int:
        return len(self.guesses)

    @property
    def last_guess(self) -> int | None:
        """Most recently recorded guess, if any."""
        return self.guesses[0] if self.guesses else None

    @property
    def is_won(self) -> bool:
        return self.status == GameStatus.WON

    def with_guess(self, guess: int, status: GameStatus) -> GameState:
        """Return new state with the guess recorded in front."""
        return self._copy_with(guesses=(guess,) + self.guesses, status=status)

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return GameState(
            status=kwargs.get("status", self.status),
            target=kwargs.get("target", self.target),
            guesses=kwargs.get("guesses", self.guesses),
        )

    @classmethod
    def initial(cls) -> GameState:
        """A fresh, not-started state."""
        return cls()
