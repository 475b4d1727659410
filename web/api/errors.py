"""API error responses - application errors mapped to HTTP status codes."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from app.errors import NotFoundError, PulseError, UpstreamUnavailableError, ValidationError

INTERNAL_ERROR = "An unexpected error occurred"


def error_body(message: str, **extra) -> dict:
    return {"error": message, **extra}


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(exc.message, reason=exc.reason),
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=error_body(exc.message))


async def handle_upstream_unavailable(request: Request, exc: UpstreamUnavailableError) -> JSONResponse:
    # Cause already logged by the service; only the public message goes out.
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_body(exc.message))


async def handle_pulse_error(request: Request, exc: PulseError) -> JSONResponse:
    logger.error("Unmapped application error on {}: {}", request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_body(INTERNAL_ERROR))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error("Unhandled exception on {}", request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_body(INTERNAL_ERROR))


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers; subclasses are matched before PulseError."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(UpstreamUnavailableError, handle_upstream_unavailable)
    app.add_exception_handler(PulseError, handle_pulse_error)
    app.add_exception_handler(Exception, handle_unexpected)
