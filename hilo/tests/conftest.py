"""
Pytest fixtures for Hilo tests.
"""

import pytest

from ..engine_core.reducer import Reducer
from ..engine_core.rng import RandomSource
from ..engine_core.state import GameState, GameStatus
from ..session import GameSession, SessionManager


@pytest.fixture
def reducer() -> Reducer:
    """Reducer with the default 1..99 rules."""
    return Reducer()


@pytest.fixture
def fresh_state() -> GameState:
    """A not-started state."""
    return GameState.initial()


@pytest.fixture
def started_state() -> GameState:
    """An in-progress state with target 42 and no guesses."""
    return GameState(status=GameStatus.IN_PROGRESS, target=42)


@pytest.fixture
def session() -> GameSession:
    """A not-started session with a seeded random source."""
    return GameSession(rng=RandomSource(seed=1234))


@pytest.fixture
def started_session(session: GameSession) -> GameSession:
    """A session started with target 42."""
    result = session.start(42)
    assert result.success
    return session


@pytest.fixture
def manager() -> SessionManager:
    return SessionManager()
