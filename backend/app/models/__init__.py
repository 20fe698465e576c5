"""
Pydantic models for API request/response schemas
"""

from .common import CamelModel, envelope, error_envelope
from .status import JobStatus, InfographicStatus, Plan, StepLabel
from .playlist import ExtractPlaylistRequest, VideoOut, PlaylistOut
from .infographic import (
    InfographicOptions,
    GenerateInfographicRequest,
    GenerationAccepted,
    PlaylistSummary,
    JobOut,
    InfographicOut,
)
from .auth import (
    SignupRequest,
    LoginRequest,
    UpdateApiKeysRequest,
    UpdateProfileRequest,
    HasApiKeys,
    UserOut,
    AuthResponse,
)

__all__ = [
    "CamelModel",
    "envelope",
    "error_envelope",
    "JobStatus",
    "InfographicStatus",
    "Plan",
    "StepLabel",
    "ExtractPlaylistRequest",
    "VideoOut",
    "PlaylistOut",
    "InfographicOptions",
    "GenerateInfographicRequest",
    "GenerationAccepted",
    "PlaylistSummary",
    "JobOut",
    "InfographicOut",
    "SignupRequest",
    "LoginRequest",
    "UpdateApiKeysRequest",
    "UpdateProfileRequest",
    "HasApiKeys",
    "UserOut",
    "AuthResponse",
]
