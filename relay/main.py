# relay/main.py
"""FastAPI application entry point for the License Lookup Relay.

This module initializes the FastAPI application with:
- A shared outbound HTTP client (created and closed in the lifespan)
- Request ID and request logging middleware
- CORS middleware configuration
- Global exception handlers for consistent error responses
- Lookup, health and catch-all route registration

Usage:
    uvicorn relay.main:app --reload
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lookup.config import get_upstream_config
from lookup.logging import configure_logging
from lookup.logging import get_logger
from relay.config import API_VERSION
from relay.config import RELAY_CORS_ORIGINS
from relay.config import RELAY_DEBUG
from relay.config import RELAY_LOG_JSON
from relay.exceptions import APIError
from relay.middleware import RequestIDMiddleware
from relay.middleware import RequestLoggingMiddleware
from relay.middleware import get_request_id
from relay.routes import california_router
from relay.routes import colorado_router
from relay.routes import fallback_router
from relay.routes import health_router
from relay.routes import illinois_router

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the shared upstream client on startup and close it on shutdown."""
    # Also reached under a bare `uvicorn relay.main:app` and reload workers
    configure_logging(debug=RELAY_DEBUG, json_logs=RELAY_LOG_JSON)
    config = get_upstream_config()
    async with httpx.AsyncClient(timeout=config.timeout) as client:
        app.state.http_client = client
        log.info("relay_started", version=API_VERSION, upstream_timeout=config.timeout)
        yield
    log.info("relay_stopped")


app = FastAPI(
    title="License Lookup Relay",
    description=(
        "Relays professional license searches to the Illinois, Colorado and "
        "California licensing registries and returns their results as JSON."
    ),
    version=API_VERSION,
    lifespan=lifespan,
)


# =============================================================================
# Exception Handlers
# =============================================================================


def _build_error_response(
    status_code: int,
    code: str,
    message: str,
    details: dict | None = None,
    request_id: str | None = None,
) -> JSONResponse:
    """Build an error response: ``{"error": message, "code": ..., ...}``.

    Args:
        status_code: HTTP status code.
        code: Error code (e.g., 'VALIDATION_ERROR').
        message: Human-readable error message.
        details: Optional additional error context.
        request_id: Request ID to echo; defaults to the current context's.

    Returns:
        JSONResponse with X-Request-ID header when a request ID is known.
    """
    request_id = request_id or get_request_id()

    content: dict[str, object] = {
        "error": message,
        "code": code,
    }
    if details:
        content["details"] = details
    if request_id:
        content["request_id"] = request_id

    response = JSONResponse(status_code=status_code, content=content)

    if request_id:
        response.headers["X-Request-ID"] = request_id

    return response


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle custom APIError exceptions with consistent format."""
    if exc.status_code >= 500:
        log.warning(
            "api_error",
            path=request.url.path,
            code=exc.code,
            status_code=exc.status_code,
            error_message=exc.message,
        )
    return _build_error_response(exc.status_code, exc.code, exc.message, exc.details)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTPException raised by FastAPI internals (e.g. bad JSON body)."""
    message = str(exc.detail) if exc.detail else "An error occurred"
    return _build_error_response(exc.status_code, f"HTTP_{exc.status_code}", message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 with per-field errors."""
    errors = exc.errors()

    if len(errors) == 1:
        err = errors[0]
        field = ".".join(str(loc) for loc in err.get("loc", []))
        message = f"Validation error in {field}: {err.get('msg', 'invalid value')}"
    else:
        message = f"{len(errors)} validation errors"

    details = {
        "errors": [
            {
                "field": ".".join(str(loc) for loc in err.get("loc", [])),
                "reason": err.get("msg"),
                "type": err.get("type"),
            }
            for err in errors
        ]
    }

    return _build_error_response(400, "VALIDATION_ERROR", message, details)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and return a generic 500 error."""
    # Runs outside RequestIDMiddleware, whose context is already reset here
    request_id = getattr(request.state, "request_id", None)
    log.exception(
        "unhandled_exception",
        request_id=request_id,
        path=request.url.path,
    )

    return _build_error_response(
        500,
        "INTERNAL_ERROR",
        "An unexpected error occurred",
        request_id=request_id,
    )


# =============================================================================
# Middleware Configuration
# =============================================================================

if RELAY_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=RELAY_CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

# Middleware runs in reverse order of registration: request ID first
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(RequestIDMiddleware)


# =============================================================================
# Route Registration
# =============================================================================

app.include_router(health_router)
app.include_router(illinois_router)
app.include_router(colorado_router)
app.include_router(california_router)
# Catch-all must stay last
app.include_router(fallback_router)
