"""
Reducer - Applies actions to game state.

The reducer is the single point of state transition.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> ActionResult
- Validates before applying
- Player input errors come back as failed results, never as exceptions
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .state import GameState, GameStatus, Outcome
from .action import Action, ActionType, ActionResult
from .errors import ValidationError, parse_number
from .rules import GameRules, DEFAULT_RULES


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    Rules provide the number range for validation.
    """
    rules: GameRules = field(default_factory=lambda: DEFAULT_RULES)

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or a ValidationError.
        """
        validation_error = self._validate_action(state, action)
        if validation_error:
            return ActionResult.failure(validation_error, state)

        handler = self._get_handler(action.action_type)
        if not handler:
            raise ValueError(f"No handler for action type: {action.action_type}")

        return handler(state, action)

    def _validate_action(self, state: GameState, action: Action) -> ValidationError | None:
        """
        Check that the action is allowed in the current status.

        Returns the error if not allowed, None otherwise.
        """
        if action.action_type == ActionType.START:
            if state.status != GameStatus.NOT_STARTED:
                return ValidationError.invalid_state(
                    "Game already started - reset to start a new game"
                )

        if action.action_type == ActionType.GUESS:
            if state.status == GameStatus.NOT_STARTED:
                return ValidationError.invalid_state("Game not started - no guesses allowed")
            if state.status == GameStatus.WON:
                return ValidationError.invalid_state("Game is over - no guesses allowed")

        # RESET is allowed from every status
        return None

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.START: self._handle_start,
            ActionType.GUESS: self._handle_guess,
            ActionType.RESET: self._handle_reset,
        }
        return handlers.get(action_type)

    def _handle_start(self, state: GameState, action: Action) -> ActionResult:
        """Handle start action."""
        seed = action.payload.seed

        if seed is None:
            target = action.payload.drawn_target
            if target is None or not self.rules.in_range(target):
                raise ValueError(f"Start without seed needs a drawn target in range, got {target!r}")
            change = "Started a new game with a random number"
        else:
            # Any bad seed, numeric or not, is reported as out of range
            target = parse_number(seed)
            if target is None or not self.rules.in_range(target):
                return ActionResult.failure(ValidationError.out_of_range(seed, self.rules), state)
            change = "Started a new game with the chosen number"

        new_state = state._copy_with(
            status=GameStatus.IN_PROGRESS,
            target=target,
            guesses=(),
        )
        return ActionResult.success_with_state(new_state, changes=[change])

    def _handle_guess(self, state: GameState, action: Action) -> ActionResult:
        """Handle guess action."""
        raw = action.payload.raw_guess

        guess = parse_number(raw)
        if guess is None:
            return ActionResult.failure(ValidationError.not_a_number(raw), state)
        if not self.rules.in_range(guess):
            return ActionResult.failure(ValidationError.out_of_range(raw, self.rules), state)

        outcome = self.evaluate(guess, state.target)
        status = GameStatus.WON if outcome == Outcome.CORRECT else GameStatus.IN_PROGRESS
        new_state = state.with_guess(guess, status)

        return ActionResult.success_with_state(
            new_state,
            changes=[f"Guess #{new_state.guess_count}: {guess} ({outcome.value})"],
            outcome=outcome,
            guess=guess,
        )

    def _handle_reset(self, state: GameState, action: Action) -> ActionResult:
        """Handle reset action."""
        new_state = state._copy_with(
            status=GameStatus.NOT_STARTED,
            target=None,
            guesses=(),
        )
        return ActionResult.success_with_state(new_state, changes=["Game reset"])

    @staticmethod
    def evaluate(guess: int, target: int) -> Outcome:
        """Compare a guess with the target."""
        if guess == target:
            return Outcome.CORRECT
        if guess < target:
            return Outcome.TOO_LOW
        return Outcome.TOO_HIGH


def apply_action(state: GameState, action: Action, rules: GameRules | None = None) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer(rules=rules or DEFAULT_RULES)
    return reducer.apply(state, action)
