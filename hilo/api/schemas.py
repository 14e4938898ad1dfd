"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between the mobile app and the engine.
All responses include explicit types for OpenAPI schema generation.

Error Codes:
- NOT_A_NUMBER: Guess is not a whole number
- OUT_OF_RANGE: Number is outside the game's range
- INVALID_STATE: Operation not allowed in the session's current status
- SESSION_NOT_FOUND: Session does not exist or has expired
"""

from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field, StrictInt


API_VERSION = "v1"


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"


class GuessOutcome(str, Enum):
    """Result of a valid guess."""
    CORRECT = "correct"
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"


class ErrorCode(str, Enum):
    """Structured error codes."""
    NOT_A_NUMBER = "NOT_A_NUMBER"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_STATE = "INVALID_STATE"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class GuessEntry(BaseModel):
    """One line of the guess history."""
    number: int = Field(description="1 for the first guess of the game")
    value: int

    model_config = {"from_attributes": True}


# =============================================================================
# Request Models
# =============================================================================

class StartRequest(BaseModel):
    """Request to start a game in an existing session."""
    seed: Optional[Union[StrictInt, str]] = Field(
        None,
        description="Secret number to use (1-99). Omit to let the server pick one.",
    )


class CreateSessionRequest(StartRequest):
    """Request to create a session and start its first game."""
    random_seed: Optional[int] = Field(
        None, description="Seed for the session's random source, for reproducible games"
    )


class GuessRequest(BaseModel):
    """A single guess, as typed by the player."""
    value: Union[StrictInt, str] = Field(
        ..., description="The guessed number, as a JSON integer or as typed text"
    )


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict] = Field(None, description="Additional error context")
    api_version: str = Field(API_VERSION, description="API version")


class SessionResponse(BaseModel):
    """Current state of a session."""
    session_id: str
    status: SessionStatus
    guess_count: int = 0
    guesses: list[int] = Field(default_factory=list, description="Most recent first")
    history: list[GuessEntry] = Field(default_factory=list, description="Oldest first")
    last_guess: Optional[int] = None
    target: Optional[int] = Field(None, description="Only revealed once the game is won")
    min_number: int
    max_number: int
    created_at: float
    api_version: str = API_VERSION


class GuessResponse(BaseModel):
    """Result of a valid guess."""
    session_id: str
    outcome: GuessOutcome
    guess: int
    guess_count: int
    status: SessionStatus
    message: str = Field(description="Feedback text for the player")
    target: Optional[int] = Field(None, description="Set when the guess was correct")
    api_version: str = API_VERSION


class SessionListResponse(BaseModel):
    """List of live session IDs."""
    sessions: list[str] = Field(default_factory=list)
    count: int = 0


class EndSessionResponse(BaseModel):
    """Response to ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    version: str
    env: str
    active_sessions: int = 0
