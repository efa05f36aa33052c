"""FastAPI application for askdoc."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from .... import __version__
from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain.exceptions import (
    DEFAULT_PUBLIC_MESSAGE,
    AskDocError,
    MalformedRequestError,
    ServerError,
    ValidationError,
)
from ...common.exception_handler import (
    format_exception_json,
    get_http_status_code,
    log_exception,
)
from .routers import ask, health

logger = logging.getLogger(__name__)

SERVER_ERROR = "Server error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(level=settings.log_level, json_format=settings.log_json)
    logger.info("askdoc API starting up...")
    logger.info("Debug mode: %s", "ENABLED" if settings.debug else "DISABLED")
    yield
    logger.info("askdoc API shutting down...")


app = FastAPI(
    title="askdoc API",
    description="Answers questions about a pasted block of text using retrieval-augmented generation.",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(ask.router)


@app.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    return RedirectResponse(url="/docs")


# =============================================================================
# Global Exception Handlers
# =============================================================================


def _error_body(exc: Exception, **fields: str) -> dict:
    body: dict = dict(fields)
    if settings.debug:
        body["debug"] = format_exception_json(exc, include_trace=True)
    return body


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client errors with the same shape as missing fields."""
    error = MalformedRequestError(
        "Invalid request body.",
        context={"problems": [problem["msg"] for problem in exc.errors()]},
    )
    log_exception(
        error,
        level=logging.WARNING,
        extra_context={"path": str(request.url.path), "method": request.method},
    )
    return JSONResponse(status_code=400, content=_error_body(error, error=error.message))


@app.exception_handler(AskDocError)
async def askdoc_error_handler(request: Request, exc: AskDocError) -> JSONResponse:
    """Render validation failures verbatim and pipeline failures generically."""
    extra = {"path": str(request.url.path), "method": request.method}

    if isinstance(exc, ValidationError):
        log_exception(exc, level=logging.WARNING, extra_context=extra)
        return JSONResponse(status_code=400, content=_error_body(exc, error=exc.message))

    log_exception(exc, extra_context=extra)
    details = exc.public_message if isinstance(exc, ServerError) else DEFAULT_PUBLIC_MESSAGE
    return JSONResponse(
        status_code=get_http_status_code(exc),
        content=_error_body(exc, error=SERVER_ERROR, details=details),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions with the generic server error body."""
    log_exception(exc, extra_context={"path": str(request.url.path), "method": request.method})
    return JSONResponse(
        status_code=500,
        content=_error_body(exc, error=SERVER_ERROR, details=DEFAULT_PUBLIC_MESSAGE),
    )


# Export for uvicorn
__all__ = ["app"]
