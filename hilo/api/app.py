"""
FastAPI Application - REST API for the mobile app.

Endpoints:
    GET    /api/v1/health                     Health check
    POST   /api/v1/sessions                   Create a session and start a game
    GET    /api/v1/sessions                   List live sessions
    GET    /api/v1/sessions/{id}              Get session status
    DELETE /api/v1/sessions/{id}              End session
    POST   /api/v1/sessions/{id}/start        Start a game (after a reset)
    POST   /api/v1/sessions/{id}/guesses      Submit a guess
    POST   /api/v1/sessions/{id}/reset        Reset to not started ("play again")

Game flow:
    1. POST /sessions (optionally with `seed`) starts a game
    2. POST /guesses until the outcome is `correct`
    3. POST /reset, then POST /start for the next game

All bodies and responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional, Union

from ..config import Settings


def create_app(service=None, settings: Optional[Settings] = None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)
        settings: Optional Settings (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    from fastapi import FastAPI, Request
    from fastapi.exceptions import RequestValidationError
    from fastapi.middleware.cors import CORSMiddleware
    from fastapi.responses import JSONResponse

    from .. import __version__
    from .service import APIService, ERROR_STATUS
    from .schemas import (
        # Request models
        CreateSessionRequest,
        StartRequest,
        GuessRequest,
        # Response models
        SessionResponse,
        GuessResponse,
        ErrorResponse,
        SessionListResponse,
        EndSessionResponse,
        HealthResponse,
        # Enums
        ErrorCode,
    )

    settings = settings or (service.settings if service else Settings.from_env())
    api_service = service or APIService(settings=settings)

    app = FastAPI(
        title="Hilo Guessing Game API",
        description="""
Number guessing game - guess the secret number between 1 and 99.

## Error Codes

| Code | Description |
|------|-------------|
| `NOT_A_NUMBER` | Guess is not a whole number |
| `OUT_OF_RANGE` | Number is not between 1 and 99 |
| `INVALID_STATE` | Operation not allowed right now (e.g. guessing after a win) |
| `SESSION_NOT_FOUND` | Session does not exist |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.service = api_service

    # CORS for mobile app
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=ERROR_STATUS.get(error.error_code, 400),
            content=error.model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return make_error_response(ErrorResponse(
            error="Invalid request body",
            error_code=ErrorCode.VALIDATION_ERROR,
            details={"errors": [
                {"loc": list(e.get("loc", ())), "msg": e.get("msg", "")}
                for e in exc.errors()
            ]},
        ))

    # =========================================================================
    # Health
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health() -> HealthResponse:
        return api_service.health()

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        responses={400: {"model": ErrorResponse, "description": "Invalid seed"}},
        tags=["Sessions"],
        summary="Create a session and start a game",
    )
    async def create_session(
        body: Optional[CreateSessionRequest] = None,
    ) -> Union[SessionResponse, JSONResponse]:
        """
        Create a new session and start its first game.

        Pass `seed` to choose the secret number, or omit it to let the
        server pick one at random.
        """
        response = api_service.create_session(body or CreateSessionRequest())
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List live sessions",
    )
    async def list_sessions() -> SessionListResponse:
        """List all live session IDs."""
        return api_service.list_sessions()

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        """Get the current status and guess history of a session."""
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a session",
    )
    async def end_session(session_id: str) -> EndSessionResponse:
        """End a session and release it."""
        success = api_service.end_session(session_id)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/start",
        response_model=SessionResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid seed"},
            404: {"model": ErrorResponse, "description": "Session not found"},
            409: {"model": ErrorResponse, "description": "Game already started"},
        },
        tags=["Game"],
        summary="Start a game",
    )
    async def start_game(
        session_id: str,
        body: Optional[StartRequest] = None,
    ) -> Union[SessionResponse, JSONResponse]:
        """Start a game in a session that has not started or was reset."""
        response = api_service.start_game(session_id, body or StartRequest())
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/guesses",
        response_model=GuessResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Not a number or out of range"},
            404: {"model": ErrorResponse, "description": "Session not found"},
            409: {"model": ErrorResponse, "description": "No game in progress"},
        },
        tags=["Game"],
        summary="Submit a guess",
    )
    async def submit_guess(
        session_id: str,
        body: GuessRequest,
    ) -> Union[GuessResponse, JSONResponse]:
        """
        Submit a guess.

        Returns `too_low`, `too_high` or `correct` with the updated guess
        count. Invalid input does not count as a guess.
        """
        response = api_service.submit_guess(session_id, body)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/reset",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Reset the session (play again)",
    )
    async def reset_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        """Discard the secret number and guess history."""
        response = api_service.reset_session(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    return app


# For running directly: uvicorn hilo.api.app:app
app = create_app()
