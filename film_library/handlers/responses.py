"""Translation of domain errors into JSON responses.

Single failures render as ``{"error": "<message>"}``, validation failures as
``{"errors": ["<message>", ...]}``.
"""
import logging
from typing import Dict, List, Type

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from film_library.errors import (
    AlreadyExistsError,
    AuthenticationError,
    AuthorizationError,
    ConstraintError,
    FilmLibraryError,
    InvalidCredentialsError,
    InvalidValueError,
    NotFoundError,
)
from film_library.validation import ValidationError

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: Dict[Type[FilmLibraryError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AlreadyExistsError: status.HTTP_409_CONFLICT,
    ConstraintError: status.HTTP_400_BAD_REQUEST,
    InvalidValueError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
}


def json_error(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code, headers=headers)


def json_errors(status_code: int, messages: List[str]) -> JSONResponse:
    return JSONResponse(content={"errors": messages}, status_code=status_code)


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return json_errors(status.HTTP_400_BAD_REQUEST, exc.messages)


async def handle_domain_error(request: Request, exc: FilmLibraryError) -> JSONResponse:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            status_code = STATUS_BY_ERROR[error_type]
            break
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return json_error(status_code, exc.message, headers)


async def handle_unknown_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}: {exc}")
    return json_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "unknown error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(FilmLibraryError, handle_domain_error)
    app.add_exception_handler(Exception, handle_unknown_error)
