"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from eventsapp.api import auth, events, registrations, users
from eventsapp.api.responses import EnvelopeJSONResponse
from eventsapp.config import get_settings
from eventsapp.exceptions import AppError
from eventsapp.logging_config import setup_logging

settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting Events App API ({settings.environment})")
    yield


app = FastAPI(
    title="Events App API",
    description="Event management with role-based access for admins, organizers and attendees",
    version="0.1.0",
    lifespan=lifespan,
    default_response_class=EnvelopeJSONResponse,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path and execution time of every request."""
    started = time.perf_counter()
    try:
        return await call_next(request)
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} - Execution time: {elapsed_ms:.0f}ms")


def error_response(
    request: Request,
    status_code: int,
    message: str | list[str],
    headers: dict[str, str] | None = None,
    exc_info: BaseException | None = None,
) -> JSONResponse:
    """Build the normalized error envelope and log it."""
    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"[Error {status_code}] {request.method} {request.url.path} -> {message}",
        exc_info=exc_info,
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "statusCode": status_code,
            "message": message,
            "path": request.url.path,
            "timestamp": datetime.now(UTC).isoformat(),
        },
        headers=headers,
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return error_response(request, exc.status_code, exc.message, exc.headers)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(request, exc.status_code, str(exc.detail), exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report body/path validation failures as 400 with one message per field."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return error_response(request, 400, messages)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    return error_response(request, 500, "Internal server error", exc_info=exc)


# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(events.router)
app.include_router(registrations.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
