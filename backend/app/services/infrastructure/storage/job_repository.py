"""
Job repository - data access for processing jobs.

Jobs are created at submission and mutated only by the orchestrator.
They are never deleted; finished jobs serve as history.
"""

from typing import Any, Dict, Iterable, List, Optional

from app.core import NotFoundError
from app.models.status import JobStatus

from .json_store import JsonRecordStore
from .records import JobRecord

_UPDATABLE_FIELDS = {"status", "progress", "current_video_id", "current_step"}


class JobRepository:
    def __init__(self, store: JsonRecordStore[JobRecord]):
        self._store = store

    def create(
        self,
        playlist_id: str,
        video_ids: List[str],
        options: Optional[Dict[str, Any]] = None,
    ) -> JobRecord:
        """Create a PENDING job with progress 0."""
        if not video_ids:
            raise ValueError("A job needs at least one video id")
        job = JobRecord(playlist_id=playlist_id, video_ids=list(video_ids), options=options)
        return self._store.save(job)

    def get(self, job_id: str) -> Optional[JobRecord]:
        return self._store.get(job_id)

    def update(self, job_id: str, **changes: Any) -> JobRecord:
        """
        Update job fields.

        Args:
            job_id: Unique job identifier
            **changes: Any of status, progress, current_video_id, current_step

        Raises:
            NotFoundError: If the job does not exist
        """
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update job fields: {sorted(unknown)}")

        with self._store.lock:
            job = self._store.get(job_id)
            if job is None:
                raise NotFoundError("Job", job_id)
            for key, value in changes.items():
                setattr(job, key, value)
            job.status = JobStatus(job.status)
            return self._store.save(job)

    def list_for_playlists(self, playlist_ids: Iterable[str]) -> List[JobRecord]:
        """All jobs whose playlist is in the given set, newest first."""
        wanted = set(playlist_ids)
        jobs = self._store.list(lambda j: j.playlist_id in wanted)
        return sorted(jobs, key=lambda j: j.created_at, reverse=True)

    def list_active(self) -> List[JobRecord]:
        """Jobs not yet COMPLETED (pending or mid-flight)."""
        return self._store.list(lambda j: not j.status.is_terminal())
