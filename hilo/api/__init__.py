"""
API Module - Mobile app interface.

Exposes the engine via REST API for mobile consumption.
The mobile app:
1. Creates a session (optionally choosing the secret number)
2. Submits guesses and shows the feedback
3. Resets and starts again to play another round

All state is session-scoped. No persistent user accounts required.
"""

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
    EndSessionResponse,
    HealthResponse,
    # Shared
    GuessEntry,
    ErrorCode,
    SessionStatus,
    GuessOutcome,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "StartRequest",
    "GuessRequest",
    # Responses
    "SessionResponse",
    "GuessResponse",
    "ErrorResponse",
    "SessionListResponse",
    "EndSessionResponse",
    "HealthResponse",
    # Shared
    "GuessEntry",
    "ErrorCode",
    "SessionStatus",
    "GuessOutcome",
    # Service
    "APIService",
    "create_app",
]
