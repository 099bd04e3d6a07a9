"""
Engine Exceptions Module.

Centralized exception definitions with:
- Error codes for client handling
- HTTP status code mapping
- Structured error responses
"""

from datetime import datetime, timezone
from enum import StrEnum
from typing import Any, Dict, Optional

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = structlog.get_logger(__name__)


# ============================================================================
# ERROR CODES
# ============================================================================


class ErrorCode(StrEnum):
    """Engine error codes."""

    INTERNAL_ERROR = "E1000"

    # Load-time errors (2xxx)
    BASE_LANGUAGE_UNAVAILABLE = "E2000"
    LANGUAGE_UNAVAILABLE = "E2001"

    # Runtime errors (3xxx)
    LANGUAGE_NOT_LOADED = "E3000"
    ENGINE_NOT_READY = "E3001"


# ============================================================================
# ERROR RESPONSE MODEL
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """Standard error response body."""

    error: ErrorDetail
    timestamp: Optional[str] = None


# ============================================================================
# BASE EXCEPTION
# ============================================================================


class LingosheetError(Exception):
    """Base exception for the translation engine."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            error=ErrorDetail(
                code=self.code.value,
                message=self.message,
                details=self.details,
            ),
            timestamp=datetime.now(timezone.utc).isoformat(),
        )


# ============================================================================
# SPECIFIC EXCEPTIONS
# ============================================================================


class BaseLanguageUnavailable(LingosheetError):
    """The base language bundle could not be loaded. Initialization halts."""

    def __init__(self, code: str, reason: str = ""):
        self.language = code
        self.reason = reason
        super().__init__(
            message=f"Error: Could not load base language file '{code}.json'.",
            code=ErrorCode.BASE_LANGUAGE_UNAVAILABLE,
            status_code=503,
            details={"language": code, "reason": reason},
        )


class LanguageUnavailable(LingosheetError):
    """A non-base bundle failed to load; that language is unselectable."""

    def __init__(self, code: str, reason: str = ""):
        self.language = code
        self.reason = reason
        super().__init__(
            message=f"Could not load {code}.json",
            code=ErrorCode.LANGUAGE_UNAVAILABLE,
            status_code=502,
            details={"language": code, "reason": reason},
        )


class LanguageNotLoaded(LingosheetError):
    """Requested language has no entry in the resource store."""

    def __init__(self, code: str):
        self.language = code
        super().__init__(
            message=f"Translations for '{code}' not found.",
            code=ErrorCode.LANGUAGE_NOT_LOADED,
            status_code=404,
            details={"language": code},
        )


class EngineNotReady(LingosheetError):
    """A trigger fired before initialization completed (or after it failed)."""

    def __init__(self):
        super().__init__(
            message="Translations are not loaded; the engine is not initialized.",
            code=ErrorCode.ENGINE_NOT_READY,
            status_code=503,
        )


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


async def lingosheet_exception_handler(
    request: Request,
    exc: LingosheetError,
) -> JSONResponse:
    """Handle LingosheetError exceptions."""
    logger.warning(
        "lingosheet_error",
        error_code=exc.code.value,
        message=exc.message,
        status_code=exc.status_code,
        path=request.url.path,
        details=exc.details,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(),
    )


def register_exception_handlers(app) -> None:
    """Register exception handlers with FastAPI app."""
    app.add_exception_handler(LingosheetError, lingosheet_exception_handler)
