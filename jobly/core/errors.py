"""
Typed application errors.

Each error carries the HTTP status it maps to. The model layer raises them
and the handler registered in main.py formats the response.
"""

import logging
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class JoblyError(Exception):
    """Base error with a message and an HTTP status code."""

    status = 500

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class NotFoundError(JoblyError):
    """404 NOT FOUND error."""

    status = 404

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


class BadRequestError(JoblyError):
    """400 BAD REQUEST error."""

    status = 400

    def __init__(self, message: str = "Bad Request"):
        super().__init__(message)


async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    """Render a JoblyError as {"error": {"message", "status"}}."""
    if exc.status >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status}: {exc.message}")

    return JSONResponse(
        status_code=exc.status,
        content={"error": {"message": exc.message, "status": exc.status}},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report request validation failures as 400 BadRequestError.

    Covers bodies, query strings and path parameters alike.
    """
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))

    return await jobly_error_handler(request, BadRequestError("; ".join(messages) or "Bad Request"))
