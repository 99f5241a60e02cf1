"""Structured JSON error responses."""
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from flywheel.api.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    error: str,
    details: Optional[str] = None,
    got: Optional[int] = None,
) -> JSONResponse:
    """Build an ``{error, details?, got?}`` body with the given status."""
    body = ErrorResponse(error=error, details=details, got=got)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return error_response(400, "invalid request", details=str(exc.errors()))


def register_exception_handlers(app: FastAPI) -> None:
    """Replace FastAPI's 422 body with the 400 error shape."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
