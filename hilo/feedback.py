"""
Feedback text shown to the player.

Presentation layers call these to word engine results; the engine itself
only returns enums and counts.
"""

from __future__ import annotations

from .engine_core.errors import ValidationError, ValidationReason
from .engine_core.rules import GameRules, DEFAULT_RULES
from .engine_core.state import Outcome


def outcome_message(outcome: Outcome, guess_count: int) -> str:
    """Message for a valid guess."""
    if outcome == Outcome.TOO_LOW:
        return "Too low! Try a higher number."
    if outcome == Outcome.TOO_HIGH:
        return "Too high! Try a lower number."
    noun = "guess" if guess_count == 1 else "guesses"
    return f"Congratulations! You guessed it in {guess_count} {noun}."


def error_message(error: ValidationError, rules: GameRules = DEFAULT_RULES) -> str:
    """Message for a rejected input."""
    if error.reason in (ValidationReason.NOT_A_NUMBER, ValidationReason.OUT_OF_RANGE):
        return f"Invalid number! The number must be between {rules.min_number} and {rules.max_number}."
    return error.message


def history_lines(history: list[tuple[int, int]]) -> list[str]:
    """Render (number, value) pairs newest first, as the guess list shows them."""
    return [f"Guess #{n}: {value}" for n, value in reversed(history)]
