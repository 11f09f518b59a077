# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error reaches the client as {"error": "<message>"} with a fitting
# status code. Internal details stay in the logs.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TrystException(Exception):
    """
    Base exception for the Tryst API.

    All custom exceptions inherit from this class. The message is what the
    client sees; code is for logs and tests.
    """

    def __init__(
        self,
        message: str,
        code: str = "TRYST_ERROR",
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.message}


# =============================================================================
# Client Input Exceptions (400)
# =============================================================================

class InvalidRequestError(TrystException):
    """Raised when the request body is malformed or incomplete."""

    def __init__(self, message: str = "Invalid request body", code: str = "INVALID_REQUEST"):
        super().__init__(message=message, code=code, status_code=400)


class MissingFieldsError(InvalidRequestError):
    """Raised when registration is missing name, entryNo or password."""

    def __init__(self):
        super().__init__(message="All fields required", code="MISSING_FIELDS")


class DuplicateEntryNoError(InvalidRequestError):
    """
    Raised when registering an entry number that already exists.

    Kept at 400 rather than 409 for compatibility with existing clients.
    """

    def __init__(self):
        super().__init__(message="Entry No already exists", code="DUPLICATE_ENTRY_NO")


# =============================================================================
# Auth Exceptions (401)
# =============================================================================

class InvalidCredentialsError(TrystException):
    """Raised for an unknown entry number or a wrong password alike."""

    def __init__(self):
        super().__init__(
            message="Invalid Credentials",
            code="INVALID_CREDENTIALS",
            status_code=401,
        )


class UnauthorizedError(TrystException):
    """Raised for a bad, expired or missing session token alike."""

    def __init__(self):
        super().__init__(
            message="Unauthorized or Session Expired",
            code="UNAUTHORIZED",
            status_code=401,
        )


# =============================================================================
# Infrastructure Exceptions (500)
# =============================================================================

class ServerError(TrystException):
    """Raised when the store fails or is not available."""

    def __init__(self):
        super().__init__(message="Server error", code="SERVER_ERROR", status_code=500)


# =============================================================================
# Exception Handlers
# =============================================================================

async def tryst_exception_handler(
    request: Request,
    exc: TrystException
) -> JSONResponse:
    """Convert TrystException to JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle request body validation errors.

    Malformed JSON and wrongly-typed fields are client input errors, so they
    get a 400 like every other input error instead of FastAPI's default 422.
    """
    logger.debug(f"Rejected request body on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content=InvalidRequestError().to_dict()
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content=ServerError().to_dict()
    )
