"""
Session Module - Manages ephemeral game sessions.

A session represents one play-through of the game:
- Created when a client asks for one
- Holds the current game state and its random source
- Started, guessed at, and reset by the client
- Destroyed when the client ends it or it goes stale

Sessions are EPHEMERAL: nothing is persisted.
"""

from .game_session import GameSession
from .manager import SessionManager

__all__ = [
    "GameSession",
    "SessionManager",
]
