"""
Core Exceptions
Standardized base exceptions for the application.
"""

from typing import Dict, Optional


class InfographicAppError(Exception):
    """Base exception for all application errors."""
    pass


class NotFoundError(InfographicAppError):
    """A requested record does not exist."""

    def __init__(self, resource: str, identifier: Optional[str] = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class AuthenticationError(InfographicAppError):
    """Missing, malformed or expired credentials on an incoming request."""
    pass


class MissingKeysError(InfographicAppError):
    """Some API key a request needs is unset for the user's plan.

    `missing_keys` maps every required key name to whether it is missing.
    `hint` is the user-facing explanation returned alongside the error.
    """

    def __init__(
        self,
        missing_keys: Dict[str, bool],
        message: str = "API keys required",
        hint: Optional[str] = None,
    ):
        self.missing_keys = missing_keys
        self.hint = hint
        super().__init__(message)

    @property
    def missing(self) -> list[str]:
        return [name for name, is_missing in self.missing_keys.items() if is_missing]


class PipelineError(InfographicAppError):
    """Base exception for processing pipeline (upstream service) errors."""
    pass


class TranscriptUnavailableError(PipelineError):
    """The transcript service failed, timed out, or returned no text."""
    pass


class ImageGenerationError(PipelineError):
    """The image service failed, timed out, or returned no output URL."""
    pass


class PlaylistExtractionError(PipelineError):
    """The playlist scraper failed or returned no videos."""
    pass


class InfrastructureError(InfographicAppError):
    """Base exception for infrastructure errors (LLM, Storage, etc)."""
    pass


class JobExecutionError(InfrastructureError):
    """A job cannot run: its record or its credentials are gone."""
    pass


class ConflictError(InfographicAppError):
    """A record with the same unique key already exists."""
    pass
