"""Mapping of domain errors onto HTTP responses.

Every error response uses the fail envelope
``{"status": "fail", "message": <display message>}``.
"""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from forum.domain.error import (
    AuthorizationError,
    BusinessRuleViolationError,
    DomainError,
    NotFoundError,
    ValidationError,
)

MALFORMED_PAYLOAD_MESSAGE = (
    "tidak dapat memproses permintaan karena format payload tidak sesuai"
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a client-facing domain error into an HTTPException.

    Args:
        error: The domain error raised by a use case

    Returns:
        HTTPException carrying the error's display message

    Raises:
        DomainError: The original error, if it is not client-facing
            (a repository method left unimplemented, for instance)
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            logfire.warn(
                "Request rejected",
                error_type=type(error).__name__,
                status_code=status_code,
                detail=str(error),
            )
            return HTTPException(status_code=status_code, detail=str(error))
    raise error


def unauthenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Missing authentication",
        headers={"WWW-Authenticate": "Bearer"},
    )


def fail_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "fail", "message": message},
        headers=headers,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return fail_response(exc.status_code, str(exc.detail), exc.headers)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reject bodies FastAPI cannot parse (malformed JSON) as a bad payload."""
    logfire.warn(
        "Malformed request rejected",
        path=request.url.path,
        error_types=[error.get("type") for error in exc.errors()],
    )
    return fail_response(status.HTTP_400_BAD_REQUEST, MALFORMED_PAYLOAD_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Render every HTTP error in the fail envelope."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
