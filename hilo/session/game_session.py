"""
Game Session - Controller owning one playthrough.

A GameSession holds the current GameState snapshot and a random source,
and routes every operation through the reducer. Presentation layers
(CLI, REST API) keep a reference to the session and render what it
reports; there is no process-wide game state.

Usage:
    session = GameSession()

    result = session.start()            # or session.start(42)
    result = session.submit_guess("50")
    if result.success:
        print(result.outcome, result.guess_count)
    else:
        print(result.error.reason)

    session.reset()
"""

from __future__ import annotations
import logging
import time
import uuid

from ..engine_core.action import Action, ActionResult
from ..engine_core.reducer import Reducer
from ..engine_core.rng import RandomSource
from ..engine_core.rules import GameRules, DEFAULT_RULES
from ..engine_core.state import GameState, GameStatus

logger = logging.getLogger(__name__)


class GameSession:
    """
    One guessing game, from start to a correct guess or a reset.

    Args:
        rng: Random source used when the system picks the target
        rules: Number range (defaults to 1..99)
        session_id: Identifier; generated when omitted
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        rules: GameRules | None = None,
        session_id: str | None = None,
    ):
        self.session_id = session_id or str(uuid.uuid4())
        self.rules = rules or DEFAULT_RULES
        self._rng = rng or RandomSource()
        self._reducer = Reducer(rules=self.rules)
        self._state = GameState.initial()

        self.created_at = time.time()
        self.last_active_at = self.created_at

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def start(self, seed: int | str | None = None) -> ActionResult:
        """
        Start a game.

        With a seed, the seed becomes the target. Without one, the target
        is drawn uniformly from the rules' range.
        """
        drawn = None
        if seed is None and self._state.status == GameStatus.NOT_STARTED:
            drawn = self._rng.randint(self.rules.min_number, self.rules.max_number)
        return self._dispatch(Action.start(seed=seed, drawn_target=drawn))

    def submit_guess(self, raw: int | str) -> ActionResult:
        """Validate and record a guess, returning its outcome and the new count."""
        return self._dispatch(Action.guess(raw))

    def reset(self) -> ActionResult:
        """Return to NOT_STARTED, discarding the target and all guesses."""
        return self._dispatch(Action.reset())

    def _dispatch(self, action: Action) -> ActionResult:
        action.timestamp = time.time()
        result = self._reducer.apply(self._state, action)
        self.last_active_at = action.timestamp

        if result.success:
            self._state = result.new_state
            logger.debug(
                "session %s: %s -> %s (%s)",
                self.session_id,
                action.action_type.value,
                self._state.status.value,
                "; ".join(result.state_changes),
            )
        else:
            logger.debug(
                "session %s: %s rejected: %s",
                self.session_id,
                action.action_type.value,
                result.error.reason.value,
            )
        return result

    # -------------------------------------------------------------------------
    # Read accessors
    # -------------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def target(self) -> int | None:
        return self._state.target

    @property
    def guesses(self) -> list[int]:
        """Guesses, most recent first."""
        return list(self._state.guesses)

    @property
    def guess_count(self) -> int:
        return self._state.guess_count

    @property
    def last_guess(self) -> int | None:
        return self._state.last_guess

    @property
    def is_won(self) -> bool:
        return self._state.is_won

    def history(self) -> list[tuple[int, int]]:
        """(guess number, value) pairs, oldest first."""
        return list(enumerate(reversed(self._state.guesses), start=1))

    def __repr__(self) -> str:
        return (
            f"GameSession(session_id={self.session_id!r}, "
            f"status={self.status.value}, guess_count={self.guess_count})"
        )
