# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error reaches the client as {"error": "<message>"}; driver and
# query details stay in the server log.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class PersonApiException(Exception):
    """
    Base exception for the Person API.

    All custom exceptions inherit from this class and carry the
    HTTP status they translate to.
    """

    def __init__(
        self,
        message: str,
        code: str = "PERSON_API_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.message}


# =============================================================================
# Request Exceptions
# =============================================================================

class InvalidRequestError(PersonApiException):
    """Raised when a request body cannot be decoded into the expected shape."""

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__(
            message="Invalid request",
            code="INVALID_REQUEST",
            status_code=400,
            details=details,
        )


class InvalidUserIdError(PersonApiException):
    """Raised when the {id} path segment is not an integer."""

    def __init__(self, raw_id: Any = None):
        super().__init__(
            message="Invalid user ID",
            code="INVALID_USER_ID",
            status_code=400,
            details={"id": raw_id},
        )


# =============================================================================
# Auth Exceptions
# =============================================================================

class AuthenticationError(PersonApiException):
    """Raised when no credential matches the supplied username/password."""

    def __init__(self, username: str):
        super().__init__(
            message="Invalid username or password",
            code="AUTHENTICATION_FAILED",
            status_code=401,
            details={"username": username},
        )


# =============================================================================
# Person Exceptions
# =============================================================================

class PersonNotFoundError(PersonApiException):
    """Raised when an update or delete targets an id with no row."""

    def __init__(self, person_id: int):
        super().__init__(
            message="User not found",
            code="USER_NOT_FOUND",
            status_code=404,
            details={"id": person_id},
        )


# =============================================================================
# Storage Exceptions
# =============================================================================

class StorageError(PersonApiException):
    """
    Raised when a database statement fails.

    `message` is the generic text shown to the client; `error` is the
    driver detail, which is only logged.
    """

    def __init__(self, message: str, error: str = ""):
        super().__init__(
            message=message,
            code="STORAGE_ERROR",
            status_code=500,
            details={"error": error},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def person_api_exception_handler(
    request: Request,
    exc: PersonApiException
) -> JSONResponse:
    """
    Convert PersonApiException to JSON response.

    Server errors are logged with their details; client errors at debug.
    """
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed [{exc.code}]: {exc.details}")
    else:
        logger.debug(f"{request.method} {request.url.path} rejected [{exc.code}]")

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle FastAPI/Pydantic request validation errors.

    A bad path parameter means the user id could not be parsed; anything
    else (missing body, bad JSON, wrong field types) is an invalid request.
    Path errors win so PUT reports the id before looking at the body.
    """
    errors = exc.errors()
    path_errors = [e for e in errors if e.get("loc", ())[:1] == ("path",)]

    if path_errors:
        error: PersonApiException = InvalidUserIdError(path_errors[0].get("input"))
    else:
        error = InvalidRequestError(details={"errors": [e.get("msg") for e in errors]})

    return await person_api_exception_handler(request, error)
