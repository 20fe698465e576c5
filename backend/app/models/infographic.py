"""
API schemas for infographic generation endpoints

Request/Response models for generation jobs and infographic records.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from .common import CamelModel
from .playlist import VideoOut
from .status import InfographicStatus, JobStatus


class InfographicOptions(CamelModel):
    """Customization options applied to every video of a job"""
    language: Literal["ar", "en"] = "ar"
    orientation: Literal["landscape", "portrait", "square"] = "landscape"
    detail_level: Literal["concise", "standard", "detailed"] = "standard"
    custom_description: Optional[str] = None  # appended verbatim to the design prompt request


class GenerateInfographicRequest(CamelModel):
    """Request to generate infographics for selected playlist videos"""
    playlist_id: str = Field(min_length=1)
    video_ids: List[str] = Field(min_length=1)
    options: Optional[InfographicOptions] = None

    @field_validator("video_ids")
    @classmethod
    def _non_empty_ids(cls, value: List[str]) -> List[str]:
        if any(not video_id.strip() for video_id in value):
            raise ValueError("video ids must be non-empty strings")
        return value


class GenerationAccepted(CamelModel):
    """Response after a job is accepted (HTTP 202)"""
    job_id: str
    status: JobStatus
    total_videos: int
    progress: int


class PlaylistSummary(CamelModel):
    id: str
    title: str
    url: str
    video_count: int


class JobOut(CamelModel):
    """Job status as seen by a polling client"""
    id: str
    playlist_id: str
    video_ids: List[str]
    status: JobStatus
    progress: int
    current_video_id: Optional[str] = None
    current_step: Optional[str] = None
    options: Optional[InfographicOptions] = None
    created_at: datetime
    updated_at: datetime
    playlist: Optional[PlaylistSummary] = None

    @classmethod
    def from_record(cls, job, playlist=None) -> "JobOut":
        return cls(
            id=job.id,
            playlist_id=job.playlist_id,
            video_ids=list(job.video_ids),
            status=job.status,
            progress=job.progress,
            current_video_id=job.current_video_id,
            current_step=job.current_step,
            options=InfographicOptions(**job.options) if job.options else None,
            created_at=job.created_at,
            updated_at=job.updated_at,
            playlist=PlaylistSummary(
                id=playlist.id,
                title=playlist.title,
                url=playlist.url,
                video_count=playlist.video_count,
            ) if playlist else None,
        )


class InfographicOut(CamelModel):
    id: str
    video_id: str
    image_url: str
    analysis_report: Optional[str] = None
    design_prompt: Optional[str] = None
    status: InfographicStatus
    created_at: datetime
    updated_at: datetime
    video: Optional[VideoOut] = None

    @classmethod
    def from_record(cls, infographic, video=None) -> "InfographicOut":
        return cls(
            id=infographic.id,
            video_id=infographic.video_id,
            image_url=infographic.image_url,
            analysis_report=infographic.analysis_report,
            design_prompt=infographic.design_prompt,
            status=infographic.status,
            created_at=infographic.created_at,
            updated_at=infographic.updated_at,
            video=VideoOut.from_record(video) if video else None,
        )
