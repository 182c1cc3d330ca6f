"""
FastAPI Application - REST API for the browser client.

Endpoints:
    GET    /api/                         Health check
    POST   /api/games                    Create a game
    GET    /api/games                    List live games
    GET    /api/games/{id}               Get game state
    POST   /api/games/{id}/roll          Roll the dice
    POST   /api/games/{id}/move          Move a token
    GET    /api/games/{id}/valid-moves   Movable tokens for the pending roll
    DELETE /api/games/{id}               End a game

Rejected gameplay requests (rolling twice, moving the wrong token, acting
after game over) are not HTTP errors: they return 200 with the unchanged
state and a new message, the same way the engine reports them.
"""

from typing import Union
import logging

from ..config import ALLOWED_ORIGINS, LUDO_ENV, configure_logging

logger = logging.getLogger(__name__)


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional GameService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Request
        from fastapi.exceptions import RequestValidationError
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
        from fastapi.encoders import jsonable_encoder
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .. import __version__
    from ..session import GameNotFoundError
    from .service import GameService
    from .schemas import (
        CreateGameRequest,
        MoveRequest,
        GameStateModel,
        RollResponse,
        ValidMovesResponse,
        GameListResponse,
        EndGameResponse,
        ErrorResponse,
        HealthResponse,
        ErrorCode,
    )

    configure_logging()

    app = FastAPI(
        title="Ludo Engine API",
        description="Pass-and-play Ludo rules engine.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    game_service = service or GameService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Union[dict, None] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(GameNotFoundError)
    async def game_not_found(request: Request, exc: GameNotFoundError) -> JSONResponse:
        return make_error_response(
            ErrorCode.GAME_NOT_FOUND,
            str(exc),
            status_code=404,
            details={"game_id": exc.game_id},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_failed(request: Request, exc: RequestValidationError) -> JSONResponse:
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Invalid request",
            status_code=422,
            details={"errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(ValueError)
    async def engine_failure(request: Request, exc: ValueError) -> JSONResponse:
        logger.exception("Engine error on %s", request.url.path)
        return make_error_response(ErrorCode.INTERNAL_ERROR, str(exc), status_code=500)

    # =========================================================================
    # Health
    # =========================================================================

    @app.get("/api/", response_model=HealthResponse, tags=["Health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service=f"ludo-engine ({LUDO_ENV})", version=__version__)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/games",
        response_model=GameStateModel,
        tags=["Games"],
        summary="Create a new game",
    )
    async def create_game(request: CreateGameRequest) -> GameStateModel:
        return game_service.create_game(request)

    @app.get(
        "/api/games",
        response_model=GameListResponse,
        tags=["Games"],
        summary="List live games",
    )
    async def list_games() -> GameListResponse:
        games = game_service.list_games()
        return GameListResponse(games=games, count=len(games))

    @app.get(
        "/api/games/{game_id}",
        response_model=GameStateModel,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Get game state",
    )
    async def get_game(game_id: str) -> GameStateModel:
        return game_service.get_game_state(game_id)

    @app.delete(
        "/api/games/{game_id}",
        response_model=EndGameResponse,
        tags=["Games"],
        summary="End a game",
    )
    async def end_game(game_id: str) -> EndGameResponse:
        success = game_service.end_game(game_id)
        return EndGameResponse(success=success, game_id=game_id)

    # =========================================================================
    # Turn Endpoints
    # =========================================================================

    @app.post(
        "/api/games/{game_id}/roll",
        response_model=RollResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Turns"],
        summary="Roll the dice for the current player",
    )
    async def roll(game_id: str) -> RollResponse:
        return game_service.roll(game_id)

    @app.post(
        "/api/games/{game_id}/move",
        response_model=GameStateModel,
        responses={404: {"model": ErrorResponse}},
        tags=["Turns"],
        summary="Move one of the current player's tokens",
    )
    async def move(game_id: str, request: MoveRequest) -> GameStateModel:
        return game_service.move(game_id, request)

    @app.get(
        "/api/games/{game_id}/valid-moves",
        response_model=ValidMovesResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Turns"],
        summary="Tokens movable with the pending roll",
    )
    async def get_valid_moves(game_id: str) -> ValidMovesResponse:
        return game_service.valid_moves(game_id)

    return app
