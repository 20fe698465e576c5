"""
Playlist Infographic Generator API
FastAPI application that turns YouTube playlist videos into infographics

This is the main entry point that wires together all routes and services.
"""

import os
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from .config import (
    API_TITLE,
    API_DESCRIPTION,
    API_VERSION,
    CORS_ORIGINS,
    SYSTEM_KEY_ENV_VARS,
    get_fallback_llm_key,
)
from .routes import (
    auth_router,
    playlists_router,
    infographics_router,
)
from .core import (
    setup_logging,
    get_logger,
    set_request_id,
    clear_context,
    parse_bool_env,
    validate_environment,
    AuthenticationError,
    ConflictError,
    MissingKeysError,
    NotFoundError,
    PipelineError,
)
from .models import error_envelope
from .services.credentials import FREE_PLAN_KEYS_MESSAGE, KEY_WIRE_NAMES

# Initialize logging
log_level = os.getenv("LOG_LEVEL", "INFO")
log_file = os.getenv("LOG_FILE")
use_json_logs = parse_bool_env(os.getenv("JSON_LOGS"))

setup_logging(
    level=log_level,
    log_file=Path(log_file) if log_file else None,
    use_json=use_json_logs,
)

logger = get_logger(__name__, service="api")
logger.info("Starting Playlist Infographic API", extra={
    "log_level": log_level,
    "json_logs": use_json_logs
})

validate_environment()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    from .services.infrastructure.orchestration import get_orchestrator

    orchestrator = get_orchestrator()
    orchestrator.recover_on_startup()
    try:
        yield
    finally:
        orchestrator.shutdown()


# Create FastAPI app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_request_correlation(request: Request, call_next):
    """Add correlation ID and attach security headers."""
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    set_request_id(request_id)
    path = request.url.path

    logger.info(f"{request.method} {path}", extra={
        "method": request.method,
        "path": path,
        "client": request.client.host if request.client else "unknown",
    })

    try:
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("X-Frame-Options", "DENY")

        logger.info(f"Response: {response.status_code}", extra={
            "status_code": response.status_code,
            "method": request.method,
            "path": path,
        })

        return response
    finally:
        clear_context()


# Error envelopes

@app.exception_handler(RequestValidationError)
async def validation_error_handler(_request: Request, exc: RequestValidationError):
    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content=error_envelope("Invalid request", details=details))


@app.exception_handler(MissingKeysError)
async def missing_keys_handler(_request: Request, exc: MissingKeysError):
    return JSONResponse(
        status_code=403,
        content=error_envelope(
            str(exc),
            message=exc.hint or FREE_PLAN_KEYS_MESSAGE,
            missingKeys=exc.missing_keys,
        ),
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(_request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content=error_envelope(str(exc)))


@app.exception_handler(AuthenticationError)
async def authentication_error_handler(_request: Request, exc: AuthenticationError):
    return JSONResponse(status_code=401, content=error_envelope(str(exc) or "Authentication required"))


@app.exception_handler(ConflictError)
async def conflict_handler(_request: Request, exc: ConflictError):
    return JSONResponse(status_code=409, content=error_envelope(str(exc)))


@app.exception_handler(PipelineError)
async def pipeline_error_handler(_request: Request, exc: PipelineError):
    logger.warning("Upstream service error", extra={"error": str(exc)})
    return JSONResponse(status_code=502, content=error_envelope(str(exc)))


@app.exception_handler(HTTPException)
async def http_exception_handler(_request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled error",
        extra={"path": request.url.path, "error": str(exc)},
        exc_info=True,
    )
    return JSONResponse(status_code=500, content=error_envelope("Internal server error"))


# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router)
app.include_router(playlists_router)
app.include_router(infographics_router)


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "message": API_TITLE,
        "version": API_VERSION
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Reports which system credentials (used for PAID users) are configured
    and whether the secondary LLM provider is available. Never exposes the
    values themselves.
    """
    system_keys = {
        KEY_WIRE_NAMES[name]: bool(os.getenv(env_var, "").strip())
        for name, env_var in SYSTEM_KEY_ENV_VARS.items()
    }
    return {
        "status": "healthy",
        "checks": {
            "system_keys": system_keys,
            "llm_fallback": {"openai": get_fallback_llm_key() is not None},
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_excludes=["data/*", "logs/*", "*.pyc", "__pycache__/*"]
    )
