"""
Job-scoped credential store.

Holds the API keys a job was submitted with, keyed by job id, for exactly
the lifetime of the job. Entries live in process memory only; they are never
written to the durable store and never logged.

The orchestrator owns one store and removes a job's entry on every exit
path. `sweep` clears entries whose job is no longer running (e.g. after a
crash of the task that owned them).
"""

from typing import Dict, Iterable, List, Optional

from app.core import get_logger
from app.services.credentials import ApiCredentials

logger = get_logger(__name__, component="credential_store")


class JobCredentialStore:
    def __init__(self):
        self._entries: Dict[str, ApiCredentials] = {}

    def put(self, job_id: str, credentials: ApiCredentials) -> None:
        if job_id in self._entries:
            raise ValueError(f"Credentials already stored for job {job_id}")
        self._entries[job_id] = credentials

    def get(self, job_id: str) -> Optional[ApiCredentials]:
        return self._entries.get(job_id)

    def purge(self, job_id: str) -> bool:
        """Remove a job's credentials. Returns whether an entry existed."""
        return self._entries.pop(job_id, None) is not None

    def purge_all(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        return count

    def sweep(self, live_job_ids: Iterable[str]) -> int:
        """Drop every entry whose job is not in `live_job_ids`."""
        live = set(live_job_ids)
        stale = [job_id for job_id in self._entries if job_id not in live]
        for job_id in stale:
            del self._entries[job_id]
        if stale:
            logger.warning("Swept orphaned job credentials", extra={"count": len(stale)})
        return len(stale)

    def job_ids(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, job_id: object) -> bool:
        return job_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
