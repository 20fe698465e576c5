"""Job orchestration - jobs, per-video generation and job-scoped credentials."""

from .credential_store import JobCredentialStore
from .generator import InfographicGenerator
from .orchestrator import JobOrchestrator, get_orchestrator, progress_percent

__all__ = [
    "JobCredentialStore",
    "InfographicGenerator",
    "JobOrchestrator",
    "get_orchestrator",
    "progress_percent",
]
