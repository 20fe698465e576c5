"""
Status constants and enumerations.

Centralized lifecycle definitions for jobs, infographics and user plans.
"""

from enum import Enum


class JobStatus(str, Enum):
    """Lifecycle of a processing job. There is no job-level failure state."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"

    def is_terminal(self) -> bool:
        """Check if this status is a terminal state (no further progress)."""
        return self is JobStatus.COMPLETED


class InfographicStatus(str, Enum):
    """Lifecycle of one generation attempt for a single video."""

    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class Plan(str, Enum):
    """Credential tier of a user."""

    FREE = "FREE"
    PAID = "PAID"

    def uses_system_keys(self) -> bool:
        return self is Plan.PAID


# Step labels exposed on a job while it runs (advisory, for polling clients)
class StepLabel:
    STARTING = "starting"
    TRANSCRIPT = "Getting transcript..."
    ANALYSIS = "Analyzing content..."
    DESIGN_PROMPT = "Generating design prompt..."
    IMAGE = "Generating image..."
    SAVING = "Saving..."
    VIDEO_DONE = "Completed!"
    VIDEO_FAILED = "Failed"
    JOB_DONE = "completed"


__all__ = [
    "JobStatus",
    "InfographicStatus",
    "Plan",
    "StepLabel",
]
