"""Global exception handlers for FastAPI."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from pairsone.domain.errors import GameError


async def game_error_handler(request: Request, exc: GameError) -> JSONResponse:
    """
    Handle all GameError exceptions and convert to JSON response.

    Returns standardized error format:
    {
        "code": "NOT_FOUND",
        "message": "Game with ID 1c2f3e4d5a6b not found",
        "details": {"game_id": "1c2f3e4d5a6b"}
    }
    """
    if exc.status_code >= 500:
        logging.error(f"{exc.code} on {request.url.path}: {exc.message}")
    error_response = exc.to_response()
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(exclude_none=True),
    )
