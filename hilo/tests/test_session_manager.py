"""
Tests for SessionManager.
"""

from ..engine_core.rules import GameRules
from ..session import SessionManager


class TestSessionManager:

    def test_create_and_get(self, manager):
        session = manager.create_session()

        assert manager.get_session(session.session_id) is session
        assert session.session_id in manager.list_active_sessions()

    def test_sessions_are_independent(self, manager):
        a = manager.create_session()
        b = manager.create_session()
        a.start(10)
        b.start(20)

        a.submit_guess("10")

        assert a.is_won
        assert not b.is_won
        assert b.guess_count == 0

    def test_random_seed_reproducible(self, manager):
        a = manager.create_session(random_seed=5)
        b = manager.create_session(random_seed=5)
        a.start()
        b.start()

        assert a.target == b.target

    def test_end_session(self, manager):
        session = manager.create_session()

        assert manager.end_session(session.session_id)
        assert manager.get_session(session.session_id) is None
        assert not manager.end_session(session.session_id)

    def test_get_unknown(self, manager):
        assert manager.get_session("nope") is None

    def test_cleanup_stale_sessions(self, manager):
        old = manager.create_session()
        fresh = manager.create_session()
        old.last_active_at -= 7200

        removed = manager.cleanup_stale_sessions(max_age_seconds=3600)

        assert removed == [old.session_id]
        assert manager.list_active_sessions() == [fresh.session_id]
        assert len(manager) == 1

    def test_rules_passed_to_sessions(self):
        manager = SessionManager(rules=GameRules(min_number=1, max_number=5))
        session = manager.create_session(random_seed=1)
        session.start()

        assert 1 <= session.target <= 5
        assert session.rules.max_number == 5
