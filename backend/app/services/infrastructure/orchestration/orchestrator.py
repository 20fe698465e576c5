"""
Job Orchestrator - batch infographic generation.

Job state machine: PENDING -> PROCESSING -> COMPLETED

`submit` creates the job, stores its credentials in the job-scoped
credential store and schedules `execute` in the background; it never waits
for processing. `execute` walks the job's videos strictly in order, one at a
time. A failing video is marked FAILED and the loop moves on, so a job
always ends COMPLETED with progress 100 once every video was attempted.
"""

import asyncio
from typing import Any, Dict, List, Optional, Set

from fastapi import BackgroundTasks

from app.core import get_logger, JobExecutionError, set_job_id, set_video_id
from app.models.infographic import InfographicOptions
from app.models.status import InfographicStatus, JobStatus, StepLabel
from app.services.credentials import ApiCredentials
from app.services.infrastructure.storage import DataStore, JobRecord, get_datastore

from .credential_store import JobCredentialStore
from .generator import InfographicGenerator

logger = get_logger(__name__, component="orchestrator")


def progress_percent(attempted: int, total: int) -> int:
    """round(100 * attempted / total), halves rounded up."""
    if total <= 0:
        return 100
    return (200 * attempted + total) // (2 * total)


class JobOrchestrator:
    def __init__(
        self,
        store: DataStore,
        generator: Optional[InfographicGenerator] = None,
        credential_store: Optional[JobCredentialStore] = None,
    ):
        self.store = store
        self.generator = generator or InfographicGenerator(store)
        self.credentials = credential_store if credential_store is not None else JobCredentialStore()
        self._tasks: Set[asyncio.Task] = set()

    def submit(
        self,
        playlist_id: str,
        video_ids: List[str],
        credentials: ApiCredentials,
        options: Optional[InfographicOptions] = None,
        background_tasks: Optional[BackgroundTasks] = None,
    ) -> JobRecord:
        """
        Create a PENDING job and schedule its execution.

        Args:
            playlist_id: Owning playlist
            video_ids: Videos to process, in order (non-empty)
            credentials: Keys for this job only; purged when it finishes
            options: Customization options applied to every video
            background_tasks: FastAPI background tasks of the current request;
                without it the job runs as an event-loop task

        Returns:
            The job record, still PENDING
        """
        if not video_ids:
            raise ValueError("At least one video id is required")

        options_payload: Optional[Dict[str, Any]] = options.model_dump() if options else None
        job = self.store.jobs.create(playlist_id, video_ids, options_payload)
        self.credentials.put(job.id, credentials)

        if background_tasks is not None:
            background_tasks.add_task(self.run, job.id)
        else:
            task = asyncio.get_running_loop().create_task(self.run(job.id))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

        logger.info(
            "Job submitted",
            extra={"job_id": job.id, "playlist_id": playlist_id, "total_videos": len(video_ids)},
        )
        return job

    async def run(self, job_id: str) -> None:
        """Background entry point: execute and log fatal errors."""
        try:
            await self.execute(job_id)
        except Exception:
            logger.error("Job execution aborted", extra={"job_id": job_id}, exc_info=True)

    async def execute(self, job_id: str) -> JobRecord:
        """
        Process every video of a job.

        Raises:
            JobExecutionError: The job record or its credentials are missing.
                The job is abandoned as it is.
        """
        set_job_id(job_id)
        try:
            job = self.store.jobs.get(job_id)
            if job is None:
                self.credentials.purge(job_id)
                raise JobExecutionError(f"Job not found: {job_id}")

            credentials = self.credentials.get(job_id)
            if credentials is None:
                raise JobExecutionError(f"API keys not found for job {job_id}")

            try:
                await self._process_videos(job, credentials)
            finally:
                self.credentials.purge(job_id)

            completed = self.store.jobs.update(
                job_id,
                status=JobStatus.COMPLETED,
                progress=100,
                current_video_id=None,
                current_step=StepLabel.JOB_DONE,
            )
            logger.info("Job completed", extra={"job_id": job_id, "total_videos": len(job.video_ids)})
            return completed
        finally:
            set_video_id(None)
            set_job_id(None)

    async def _process_videos(self, job: JobRecord, credentials: ApiCredentials) -> None:
        options = InfographicOptions(**job.options) if job.options else None
        total = len(job.video_ids)

        self.store.jobs.update(job.id, status=JobStatus.PROCESSING)

        for attempted, video_id in enumerate(job.video_ids, start=1):
            set_video_id(video_id)
            self.store.jobs.update(job.id, current_video_id=video_id, current_step=StepLabel.STARTING)
            try:
                await self.generator.generate(video_id, credentials, options, job_id=job.id)
            except Exception as e:
                logger.error(
                    f"Error processing video {video_id}",
                    extra={"job_id": job.id, "video_id": video_id, "error": str(e)},
                    exc_info=True,
                )
                self.store.infographics.upsert_status(video_id, InfographicStatus.FAILED)

            self.store.jobs.update(job.id, progress=progress_percent(attempted, total))

    def recover_on_startup(self) -> List[JobRecord]:
        """Report jobs a previous process left unfinished and sweep credentials.

        Unfinished jobs are left as they are; they are not resumed.
        """
        stale_jobs = self.store.jobs.list_active()
        for job in stale_jobs:
            logger.warning(
                "Job left unfinished by a previous process",
                extra={"job_id": job.id, "status": job.status.value, "progress": job.progress},
            )
        self.credentials.sweep(self.running_job_ids())
        return stale_jobs

    def running_job_ids(self) -> List[str]:
        """Jobs with credentials whose execution has not finished in this process."""
        return [job_id for job_id in self.credentials.job_ids() if self._is_live(job_id)]

    def _is_live(self, job_id: str) -> bool:
        job = self.store.jobs.get(job_id)
        return job is not None and not job.status.is_terminal()

    def shutdown(self) -> int:
        purged = self.credentials.purge_all()
        if purged:
            logger.warning("Purged credentials of unfinished jobs on shutdown", extra={"count": purged})
        return purged


_orchestrator_instance: Optional[JobOrchestrator] = None


def get_orchestrator() -> JobOrchestrator:
    """Get the shared JobOrchestrator instance (singleton pattern)."""
    global _orchestrator_instance
    if _orchestrator_instance is None:
        _orchestrator_instance = JobOrchestrator(get_datastore())
    return _orchestrator_instance
