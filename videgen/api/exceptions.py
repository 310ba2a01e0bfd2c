"""
API Exceptions and Error Handlers.
"""
import logging
from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from videgen.exceptions import (
    GenerationError,
    PipelineError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standard error response format."""
    error: str
    detail: Optional[str] = None
    code: str
    status_code: int


# Pipeline error kind -> (HTTP status, error code)
PIPELINE_ERROR_STATUS = {
    ValidationError: (status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"),
    GenerationError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "GENERATION_ERROR"),
    StorageError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "STORAGE_ERROR"),
}


def _status_for(exc: PipelineError):
    for error_type, mapping in PIPELINE_ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return mapping
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"


def _error_response(
    request: Request,
    message: str,
    code: str,
    status_code: int,
    detail: Optional[str] = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=message,
        detail=detail if request.app.state.config.debug else None,
        code=code,
        status_code=status_code,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def pipeline_error_handler(request: Request, exc: PipelineError) -> JSONResponse:
    """Handle ValidationError / GenerationError / StorageError."""
    status_code, code = _status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.detail})")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return _error_response(request, exc.message, code, status_code, exc.detail)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or mistyped request bodies are client errors, not 422s."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detail = f"{location}: {first.get('msg')}" if location else first.get("msg")
    logger.info(f"{request.method} {request.url.path} rejected: {detail}")
    return _error_response(
        request,
        "Invalid request body",
        "VALIDATION_ERROR",
        status.HTTP_400_BAD_REQUEST,
        detail,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"{request.method} {request.url.path} raised an unexpected error")
    return _error_response(
        request,
        "Internal server error",
        "INTERNAL_ERROR",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc),
    )
