"""
Session Manager - Creates and tracks game sessions.

LIFECYCLE:
1. Client creates a session -> new GameSession (in-memory only)
2. Client starts it, guesses, resets as often as it likes
3. Client ends the session, or it goes stale -> removed from memory

PERSISTENCE RULES:
- NO database for gameplay
- Sessions are ephemeral and disappear with the process
"""

from __future__ import annotations
import logging
import time

from ..engine_core.rng import RandomSource
from ..engine_core.rules import GameRules
from .game_session import GameSession

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions, each with its own random source
    - Look sessions up by ID
    - Clean up ended and stale sessions
    """

    def __init__(self, rules: GameRules | None = None):
        self.rules = rules
        self._sessions: dict[str, GameSession] = {}

    def create_session(self, random_seed: int | None = None) -> GameSession:
        """
        Create a new, not-yet-started session.

        Args:
            random_seed: Seed for the session's random source, for
                reproducible random targets

        Returns:
            New GameSession
        """
        session = GameSession(rng=RandomSource(seed=random_seed), rules=self.rules)
        self._sessions[session.session_id] = session
        logger.info("Created session %s", session.session_id)
        return session

    def get_session(self, session_id: str) -> GameSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and drop it from memory.

        Returns False if no such session exists.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.info(
            "Ended session %s (%s) after %d guess(es)",
            session_id, reason, session.guess_count,
        )
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of all live sessions."""
        return list(self._sessions)

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> list[str]:
        """
        Remove sessions with no activity for longer than max_age_seconds.

        Returns the IDs that were removed.
        """
        current_time = time.time()
        to_remove = [
            session_id
            for session_id, session in self._sessions.items()
            if current_time - session.last_active_at > max_age_seconds
        ]

        for session_id in to_remove:
            self.end_session(session_id, reason="stale")
        return to_remove

    def __len__(self) -> int:
        return len(self._sessions)
