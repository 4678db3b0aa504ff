"""FastAPI application entry point for DevEvent."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from devevent import __version__
from devevent.api import api_router, images
from devevent.config import get_settings
from devevent.database import connection_cache
from devevent.exceptions import EventsException
from devevent.logging_config import configure_logging
from devevent.models.errors import ErrorCode, ErrorResponse
from devevent.web import router as pages_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown events."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)
    logger.info("app_starting", version=__version__, environment=settings.environment)
    # The database is connected lazily by the first request
    yield
    await connection_cache.aclose()
    logger.info("app_stopped")


def error_response(
    status_code: int,
    message: str,
    error: str,
    details: object | None = None,
) -> JSONResponse:
    if not get_settings().is_development:
        details = None
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message, error=error, details=details).model_dump(exclude_none=True),
    )


async def events_exception_handler(request: Request, exc: EventsException) -> JSONResponse:
    """Handle all EventsException subclasses with proper error response."""
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        "request_failed",
        path=request.url.path,
        error_code=exc.error_code.value,
        message=exc.message,
        details=exc.details,
    )
    return error_response(exc.status_code, exc.message, exc.error_code.value, exc.details)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]
    logger.warning("request_invalid", path=request.url.path, errors=details)
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            message="Invalid request data",
            error=ErrorCode.VALIDATION_ERROR.value,
            details=details,
        ).model_dump(),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_crashed", path=request.url.path)
    return error_response(
        500,
        "An unexpected error occurred",
        ErrorCode.INTERNAL_SERVER_ERROR.value,
        str(exc),
    )


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="DevEvent API",
        description="Developer events catalog with image upload and a featured events page",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(EventsException, events_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router)
    app.include_router(images.router)
    app.include_router(pages_router)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "database": connection_cache.state.value}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("devevent.main:app", host="0.0.0.0", port=8000, reload=True)
