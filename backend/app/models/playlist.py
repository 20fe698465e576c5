"""
API schemas for playlist endpoints
"""

from datetime import datetime
from typing import List, Optional

from pydantic import field_validator

from .common import CamelModel


class ExtractPlaylistRequest(CamelModel):
    """Request to scrape a YouTube playlist"""
    url: str

    @field_validator("url")
    @classmethod
    def _playlist_url(cls, value: str) -> str:
        value = value.strip()
        if "youtube.com/playlist" not in value and "list=" not in value:
            raise ValueError("Invalid YouTube playlist URL")
        return value


class VideoOut(CamelModel):
    id: str
    source_video_id: str
    playlist_id: str
    title: str
    thumbnail: Optional[str] = None
    duration: Optional[str] = None
    url: str
    has_transcript: bool = False
    infographic: Optional[dict] = None  # serialized InfographicOut, when requested with its playlist

    @classmethod
    def from_record(cls, video, infographic=None) -> "VideoOut":
        return cls(
            id=video.id,
            source_video_id=video.source_video_id,
            playlist_id=video.playlist_id,
            title=video.title,
            thumbnail=video.thumbnail,
            duration=video.duration,
            url=video.url,
            has_transcript=bool(video.transcript),
            infographic=infographic,
        )


class PlaylistOut(CamelModel):
    id: str
    url: str
    title: str
    video_count: int
    created_at: datetime
    updated_at: datetime
    videos: Optional[List[VideoOut]] = None

    @classmethod
    def from_record(cls, playlist, videos: Optional[List[VideoOut]] = None) -> "PlaylistOut":
        return cls(
            id=playlist.id,
            url=playlist.url,
            title=playlist.title,
            video_count=playlist.video_count,
            created_at=playlist.created_at,
            updated_at=playlist.updated_at,
            videos=videos,
        )
