"""Translation of domain errors into HTTP errors.

Error bodies are ``{"detail": {"code": ..., "message": ...}}`` where
``code`` is the stable ``DomainError.code``.
"""

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from promptu.domain.error import (
    ConflictError,
    DomainError,
    InvalidArgumentError,
    NotFoundError,
    SelfVoteForbiddenError,
    UnauthorizedError,
)

# Checked in order, so subclasses come before their bases
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (SelfVoteForbiddenError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def error_detail(code: str, message: str) -> dict[str, str]:
    return {"code": code, "message": message}


def http_error(error: DomainError) -> HTTPException:
    """Build the HTTPException for a domain error."""
    status_code = next(
        (code for cls, code in _STATUS_BY_ERROR if isinstance(error, cls)),
        status.HTTP_400_BAD_REQUEST,
    )
    return HTTPException(
        status_code=status_code, detail=error_detail(error.code, str(error))
    )


def unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=error_detail(UnauthorizedError.code, message),
    )


def internal_error(message: str) -> HTTPException:
    """500 response that does not leak storage details."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_detail("internal", message),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed query parameters or bodies become 400 ``invalid_argument``."""
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": error_detail(InvalidArgumentError.code, message)},
    )
