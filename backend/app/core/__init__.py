"""
Core Module - Cross-cutting concerns and shared infrastructure

Organization:
    - logging.py: Structured logging configuration and utilities
    - exceptions.py: Application exception hierarchy
    - auth.py: Password hashing and bearer tokens
    - runtime.py: Environment guards

Usage:
    from app.core import get_logger, NotFoundError
"""

# Logging
from .logging import (
    setup_logging,
    get_logger,
    set_request_id,
    set_job_id,
    set_video_id,
    clear_context,
    redact,
    LogTimer,
)

# Exceptions
from .exceptions import (
    InfographicAppError,
    NotFoundError,
    ConflictError,
    AuthenticationError,
    MissingKeysError,
    PipelineError,
    TranscriptUnavailableError,
    ImageGenerationError,
    PlaylistExtractionError,
    InfrastructureError,
    JobExecutionError,
)

# Auth
from .auth import (
    hash_password,
    verify_password,
    issue_auth_token,
    verify_auth_token,
    extract_bearer_token,
)

# Runtime guards
from .runtime import parse_bool_env, validate_environment

__all__ = [
    "setup_logging",
    "get_logger",
    "set_request_id",
    "set_job_id",
    "set_video_id",
    "clear_context",
    "redact",
    "LogTimer",
    "InfographicAppError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "MissingKeysError",
    "PipelineError",
    "TranscriptUnavailableError",
    "ImageGenerationError",
    "PlaylistExtractionError",
    "InfrastructureError",
    "JobExecutionError",
    "hash_password",
    "verify_password",
    "issue_auth_token",
    "verify_auth_token",
    "extract_bearer_token",
    "parse_bool_env",
    "validate_environment",
]
