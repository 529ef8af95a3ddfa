"""Interface layer errors and the JSON error envelope.

Every failure leaves the API as ``{"ok": false, "message": "..."}`` with the
matching HTTP status.
"""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from inkwell.domain.error import (
    DomainError,
    InvalidCredentialsError,
    NotFoundError,
    UserAlreadyExistsError,
)


class ErrorResponse(BaseModel):
    """Failure envelope."""

    ok: bool = False
    message: str


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP status and message clients see.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException ready to raise
    """
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found.",
        )
    if isinstance(error, InvalidCredentialsError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password.",
        )
    if isinstance(error, UserAlreadyExistsError):
        # Clients of the blog frontend expect a 500 here
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="User already exists.",
        )
    # ValidationError and any other domain rule violation
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def validation_message(error: ValueError) -> str:
    """Client-facing text for a rejected value, without pydantic's report.

    Args:
        error: ValueError raised while building a value object

    Returns:
        The validator messages joined by "; "
    """
    if isinstance(error, PydanticValidationError):
        messages = [
            str(detail["msg"]).removeprefix("Value error, ")
            for detail in error.errors()
        ]
        return "; ".join(messages) or "Invalid request."
    return str(error)


def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render an HTTPException as the failure envelope."""
    response = _envelope(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as a 422 envelope."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))

    return _envelope(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "; ".join(problems) or "Invalid request.",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log and hide unexpected errors."""
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error.")


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
