"""
GenerationUseCase - credential resolution and job submission.

Keeps HTTP routes thin: validates that the playlist and videos exist,
resolves the user's credentials for infographic generation (rejecting the
request before any job exists when keys are missing), and submits the job.
"""

from dataclasses import dataclass
from typing import List, Optional

from fastapi import BackgroundTasks

from app.core import get_logger, NotFoundError
from app.models.infographic import GenerationAccepted, InfographicOptions, JobOut, InfographicOut
from app.services.credentials import Capability, CredentialResolver
from app.services.infrastructure.orchestration import JobOrchestrator
from app.services.infrastructure.storage import DataStore, UserRecord

from .base import UseCase

logger = get_logger(__name__, service="generation_use_case")


@dataclass
class GenerationCommand:
    user: UserRecord
    playlist_id: str
    video_ids: List[str]
    options: Optional[InfographicOptions] = None
    background_tasks: Optional[BackgroundTasks] = None


class GenerationUseCase(UseCase[GenerationCommand, GenerationAccepted]):
    """Start infographic generation for selected videos of a playlist."""

    def __init__(
        self,
        store: DataStore,
        orchestrator: JobOrchestrator,
        resolver: Optional[CredentialResolver] = None,
    ):
        self.store = store
        self.orchestrator = orchestrator
        self.resolver = resolver or CredentialResolver()

    def _validate_targets(self, playlist_id: str, video_ids: List[str]) -> None:
        self.store.playlists.get_or_raise(playlist_id)
        for video_id in video_ids:
            video = self.store.videos.get(video_id)
            if video is None or video.playlist_id != playlist_id:
                raise NotFoundError("Video", video_id)

    async def execute(self, request: GenerationCommand) -> GenerationAccepted:
        credentials = self.resolver.resolve(request.user, Capability.INFOGRAPHIC_GENERATION)
        self._validate_targets(request.playlist_id, request.video_ids)

        job = self.orchestrator.submit(
            request.playlist_id,
            request.video_ids,
            credentials,
            options=request.options,
            background_tasks=request.background_tasks,
        )
        return GenerationAccepted(
            job_id=job.id,
            status=job.status,
            total_videos=len(job.video_ids),
            progress=job.progress,
        )


class InfographicQueries:
    """Read side for jobs and infographics"""

    def __init__(self, store: DataStore):
        self.store = store

    def get_job(self, job_id: str) -> JobOut:
        job = self.store.jobs.get(job_id)
        if job is None:
            raise NotFoundError("Job", job_id)
        return JobOut.from_record(job)

    def list_user_jobs(self, user_id: str) -> List[JobOut]:
        """Jobs of every playlist the user owns, newest first, with playlist summary."""
        playlists = {p.id: p for p in self.store.playlists.list_for_user(user_id)}
        if not playlists:
            return []
        return [
            JobOut.from_record(job, playlists.get(job.playlist_id))
            for job in self.store.jobs.list_for_playlists(playlists)
        ]

    def get_infographic(self, video_id: str) -> InfographicOut:
        infographic = self.store.infographics.get_by_video(video_id)
        if infographic is None:
            raise NotFoundError("Infographic", video_id)
        return InfographicOut.from_record(infographic, self.store.videos.get(video_id))

    def list_playlist_infographics(self, playlist_id: str) -> List[InfographicOut]:
        videos = {v.id: v for v in self.store.videos.list_for_playlist(playlist_id)}
        return [
            InfographicOut.from_record(infographic, videos.get(infographic.video_id))
            for infographic in self.store.infographics.list_for_playlist(videos)
        ]
