"""
Engine Core - Guess evaluation and session state transitions.

The engine is the runtime that:
1. Holds a GameState snapshot
2. Validates player input against GameRules
3. Applies actions via the reducer
4. Reports outcomes and validation errors as values
"""

from .rules import GameRules, DEFAULT_RULES, MIN_NUMBER, MAX_NUMBER
from .state import GameState, GameStatus, Outcome
from .errors import ValidationError, ValidationReason, parse_number
from .action import Action, ActionType, ActionPayload, ActionResult
from .reducer import Reducer, apply_action
from .rng import RandomSource

__all__ = [
    "GameRules",
    "DEFAULT_RULES",
    "MIN_NUMBER",
    "MAX_NUMBER",
    "GameState",
    "GameStatus",
    "Outcome",
    "ValidationError",
    "ValidationReason",
    "parse_number",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "Reducer",
    "apply_action",
    "RandomSource",
]
