"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to session calls
2. Manages sessions
3. Maps engine validation errors to API error codes
4. Formats responses for mobile

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .. import __version__
from ..config import Settings
from ..engine_core.action import ActionResult
from ..engine_core.errors import ValidationReason
from ..feedback import outcome_message, error_message
from ..session import SessionManager, GameSession
from .schemas import (
    # Requests
    CreateSessionRequest,
    StartRequest,
    GuessRequest,
    # Responses
    SessionResponse,
    GuessResponse,
    ErrorResponse,
    SessionListResponse,
    HealthResponse,
    # Shared
    GuessEntry,
    # Enums
    ErrorCode,
    SessionStatus,
    GuessOutcome,
)


REASON_TO_ERROR_CODE = {
    ValidationReason.NOT_A_NUMBER: ErrorCode.NOT_A_NUMBER,
    ValidationReason.OUT_OF_RANGE: ErrorCode.OUT_OF_RANGE,
    ValidationReason.INVALID_STATE: ErrorCode.INVALID_STATE,
}

# HTTP status for each error code
ERROR_STATUS = {
    ErrorCode.NOT_A_NUMBER: 400,
    ErrorCode.OUT_OF_RANGE: 400,
    ErrorCode.INVALID_STATE: 409,
    ErrorCode.SESSION_NOT_FOUND: 404,
    ErrorCode.VALIDATION_ERROR: 422,
    ErrorCode.INTERNAL_ERROR: 500,
}


@dataclass
class APIService:
    """
    Main API service for the mobile app.

    Usage:
        service = APIService()

        session = service.create_session(CreateSessionRequest(seed=42))
        result = service.submit_guess(session.session_id, GuessRequest(value="10"))
        service.reset_session(session.session_id)
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    settings: Settings = field(default_factory=Settings)

    def create_session(self, request: CreateSessionRequest) -> SessionResponse | ErrorResponse:
        """
        Create a new session and start its first game.

        A rejected seed discards the new session.
        """
        self.session_manager.cleanup_stale_sessions(self.settings.session_max_age)

        session = self.session_manager.create_session(random_seed=request.random_seed)
        result = session.start(request.seed)
        if not result.success:
            self.session_manager.end_session(session.session_id, reason="rejected_seed")
            return self._error_from_result(session, result)
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """Get session status."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._session_to_response(session)

    def start_game(self, session_id: str, request: StartRequest) -> SessionResponse | ErrorResponse:
        """Start a game in a session that is not started (e.g. after a reset)."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        result = session.start(request.seed)
        if not result.success:
            return self._error_from_result(session, result)
        return self._session_to_response(session)

    def submit_guess(self, session_id: str, request: GuessRequest) -> GuessResponse | ErrorResponse:
        """Validate and record a guess."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        result = session.submit_guess(request.value)
        if not result.success:
            return self._error_from_result(session, result)

        return GuessResponse(
            session_id=session_id,
            outcome=GuessOutcome(result.outcome.value),
            guess=result.guess,
            guess_count=result.guess_count,
            status=SessionStatus(session.status.value),
            message=outcome_message(result.outcome, result.guess_count),
            target=session.target if session.is_won else None,
        )

    def reset_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """Reset a session back to not started."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        session.reset()
        return self._session_to_response(session)

    def end_session(self, session_id: str, reason: str = "user_ended") -> bool:
        """End a session and release it."""
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> SessionListResponse:
        """List live session IDs."""
        sessions = self.session_manager.list_active_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    def health(self) -> HealthResponse:
        return HealthResponse(
            version=__version__,
            env=self.settings.env,
            active_sessions=len(self.session_manager),
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _session_to_response(self, session: GameSession) -> SessionResponse:
        return SessionResponse(
            session_id=session.session_id,
            status=SessionStatus(session.status.value),
            guess_count=session.guess_count,
            guesses=session.guesses,
            history=[GuessEntry(number=n, value=v) for n, v in session.history()],
            last_guess=session.last_guess,
            target=session.target if session.is_won else None,
            min_number=session.rules.min_number,
            max_number=session.rules.max_number,
            created_at=session.created_at,
        )

    def _error_from_result(self, session: GameSession, result: ActionResult) -> ErrorResponse:
        error = result.error
        return ErrorResponse(
            error=error_message(error, session.rules),
            error_code=REASON_TO_ERROR_CODE[error.reason],
            details={
                "reason": error.message,
                "value": error.value,
                "status": session.status.value,
                "guess_count": session.guess_count,
            },
        )

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )
