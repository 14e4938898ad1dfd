"""
Action System - Actions, payloads, and results.

Actions represent the three things a player can do to a session:
start it, guess, or reset it. All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import ValidationError
from .state import GameState, Outcome


class ActionType(Enum):
    """Types of actions in the system."""
    START = "start"
    GUESS = "guess"
    RESET = "reset"


@dataclass
class ActionPayload:
    """
    Payload for an action.

    Different action types use different fields; validation happens
    in the reducer.
    """
    # For START: the player's chosen number (None means draw at random)
    seed: Any | None = None
    # For START without a seed: the number drawn by the session's random source
    drawn_target: int | None = None

    # For GUESS: raw text as typed by the player
    raw_guess: Any | None = None


@dataclass
class Action:
    """
    A complete action to be applied to the game state.

    Actions are validated before application and applied atomically
    by the reducer.
    """
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)
    timestamp: float | None = None

    @classmethod
    def start(cls, seed: Any | None = None, drawn_target: int | None = None) -> Action:
        """Factory for start action."""
        return cls(
            action_type=ActionType.START,
            payload=ActionPayload(seed=seed, drawn_target=drawn_target),
        )

    @classmethod
    def guess(cls, raw: Any) -> Action:
        """Factory for guess action."""
        return cls(
            action_type=ActionType.GUESS,
            payload=ActionPayload(raw_guess=raw),
        )

    @classmethod
    def reset(cls) -> Action:
        """Factory for reset action."""
        return cls(action_type=ActionType.RESET)


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (if succeeded)
    - The validation error (if failed)
    - The guess outcome and running count (for GUESS)
    """
    success: bool
    new_state: GameState | None = None
    error: ValidationError | None = None

    # For GUESS
    outcome: Outcome | None = None
    guess: int | None = None
    guess_count: int = 0

    # For UI/presentation
    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: ValidationError, state: GameState | None = None) -> ActionResult:
        """Create a failure result. The state, if given, is the unchanged one."""
        return cls(
            success=False,
            new_state=state,
            error=error,
            guess_count=state.guess_count if state else 0,
        )

    @classmethod
    def success_with_state(
        cls,
        state: GameState,
        changes: list[str] | None = None,
        outcome: Outcome | None = None,
        guess: int | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            outcome=outcome,
            guess=guess,
            guess_count=state.guess_count,
            state_changes=changes or [],
        )
