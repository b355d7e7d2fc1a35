"""
Error types and their HTTP translation.

Every error raised by services or dependencies is converted here into a JSON
body of the form {"error": "<message>"}; none of them are fatal to the process.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class JobTreeError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(JobTreeError):
    """A required field is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(JobTreeError):
    """A unique field (user name, email) is already taken."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(JobTreeError):
    """Bad credentials, or a bearer token that resolves to no user."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(JobTreeError):
    """Record does not exist or belongs to someone else. Callers cannot tell which."""

    status_code = status.HTTP_404_NOT_FOUND


async def jobtree_error_handler(request: Request, exc: JobTreeError) -> JSONResponse:
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        if loc:
            fields.append(".".join(loc))
    missing = any(err.get("type") == "missing" for err in exc.errors())
    message = "Missing required field" if missing else "Invalid request body"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message, "fields": fields},
    )


async def storage_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": "Storage unavailable"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(JobTreeError, jobtree_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PyMongoError, storage_error_handler)
