"""
Validation errors - Recoverable input errors returned by the engine.

The engine never raises for bad player input. Fallible operations return
an ActionResult whose `error` is a ValidationError value; callers decide
how to word and display it.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .rules import GameRules


# Longest digit string converted exactly; anything longer is out of any range
MAX_DIGITS = 100


def _shown(raw: object) -> str | None:
    """Short text form of raw input for messages."""
    if raw is None:
        return None
    if isinstance(raw, int) and not isinstance(raw, bool) and abs(raw) >= 10 ** MAX_DIGITS:
        return "<number too large>"
    text = str(raw)
    return text if len(text) <= 40 else text[:37] + "..."


class ValidationReason(Enum):
    """Why an input was rejected."""
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"
    INVALID_STATE = "invalid_state"


@dataclass(frozen=True)
class ValidationError:
    """A rejected input, with a machine-readable reason."""
    reason: ValidationReason
    message: str
    value: str | None = None

    @classmethod
    def not_a_number(cls, raw: object) -> ValidationError:
        return cls(
            reason=ValidationReason.NOT_A_NUMBER,
            message=f"{_shown(raw)!r} is not a whole number",
            value=_shown(raw),
        )

    @classmethod
    def out_of_range(cls, raw: object, rules: GameRules) -> ValidationError:
        return cls(
            reason=ValidationReason.OUT_OF_RANGE,
            message=f"{_shown(raw)!r} is not a number from {rules.range_text}",
            value=_shown(raw),
        )

    @classmethod
    def invalid_state(cls, message: str) -> ValidationError:
        return cls(reason=ValidationReason.INVALID_STATE, message=message)


def parse_number(raw: object) -> int | None:
    """
    Parse player input as a whole number.

    Accepts ints and decimal strings with optional sign and surrounding
    whitespace. Returns None when the input is not a whole number.
    Booleans are rejected even though they subclass int. Digit strings
    longer than MAX_DIGITS parse to a stand-in of the same sign and
    magnitude 10**MAX_DIGITS, so they fail the range check instead of
    hitting the interpreter's int conversion limit.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        return None

    text = raw.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    # str.isdigit() also accepts superscripts and other non-decimal digits
    if not digits or not digits.isascii() or not digits.isdigit():
        return None

    sign = -1 if text.startswith("-") else 1
    significant = digits.lstrip("0") or "0"
    if len(significant) > MAX_DIGITS:
        return sign * 10 ** MAX_DIGITS
    return sign * int(significant)
