"""Errors raised by the game session engine and its store."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Error body returned to HTTP clients."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(None, description="Additional context")


class GameError(Exception):
    """Base exception for all game session errors."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_response(self) -> ErrorDetail:
        return ErrorDetail(
            code=self.code,
            message=self.message,
            details=self.details if self.details else None,
        )


class InvalidParameters(GameError):
    """Raised on bad create/replay/join input. Nothing is written."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            code="INVALID_PARAMETERS",
            message=message,
            status_code=422,
            details=details,
        )


class UnknownTheme(InvalidParameters):
    def __init__(self, theme_name: str):
        super().__init__(
            message=f"Unknown theme: {theme_name}",
            details={"theme": theme_name},
        )


class InsufficientThemeValues(GameError):
    """Raised when the board needs more pairs than the theme provides."""

    def __init__(self, pair_count: int, cards_available: int):
        super().__init__(
            code="INSUFFICIENT_THEME_VALUES",
            message=f"Board needs {pair_count} pairs but the theme has only {cards_available} cards",
            status_code=422,
            details={"pair_count": pair_count, "cards_available": cards_available},
        )


class GameNotFound(GameError):
    def __init__(self, game_id: str):
        super().__init__(
            code="NOT_FOUND",
            message=f"Game with ID {game_id} not found",
            status_code=404,
            details={"game_id": game_id},
        )


class CorruptRecord(GameError):
    """Raised when a stored game cannot be deserialized."""

    def __init__(self, game_id: str, reason: str):
        super().__init__(
            code="CORRUPT_RECORD",
            message=f"Stored game {game_id} could not be decoded",
            status_code=500,
            details={"game_id": game_id, "reason": reason},
        )


class StoreUnavailable(GameError):
    """Raised when a Redis command fails."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            code="STORE_UNAVAILABLE",
            message=f"Game store failed during {operation}",
            status_code=503,
            details={"operation": operation, "reason": reason},
        )
