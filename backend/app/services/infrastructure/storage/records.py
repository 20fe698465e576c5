"""
Durable record types.

Every record is a dataclass with `to_dict`/`from_dict` and ISO timestamps,
stored one JSON file per record by `JsonRecordStore`.
"""

import uuid
from dataclasses import asdict, dataclass, field, fields
from datetime import datetime, UTC
from enum import Enum
from typing import Any, Dict, List, Optional

from app.models.status import InfographicStatus, JobStatus, Plan


def utc_now() -> str:
    return datetime.now(UTC).isoformat()


def new_id() -> str:
    return uuid.uuid4().hex


class Record:
    """Serialization shared by all record dataclasses."""

    id: str
    created_at: str
    updated_at: str

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, Enum):
                data[key] = value.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def touch(self) -> None:
        self.updated_at = utc_now()


@dataclass
class PlaylistRecord(Record):
    url: str
    title: str = "Untitled Playlist"
    video_count: int = 0
    owner_id: Optional[str] = None
    id: str = field(default_factory=new_id)
    created_at: str = field(default_factory=utc_now)
    updated_at: str = field(default_factory=utc_now)


@dataclass
class VideoRecord(Record):
    source_video_id: str
    playlist_id: str
    url: str
    title: str = "Untitled Video"
    thumbnail: Optional[str] = None
    duration: Optional[str] = None
    position: int = 0
    transcript: Optional[str] = None
    id: str = field(default_factory=new_id)
    created_at: str = field(default_factory=utc_now)
    updated_at: str = field(default_factory=utc_now)


@dataclass
class InfographicRecord(Record):
    video_id: str
    status: InfographicStatus = InfographicStatus.PROCESSING
    image_url: str = ""
    analysis_report: Optional[str] = None
    design_prompt: Optional[str] = None
    id: str = field(default_factory=new_id)
    created_at: str = field(default_factory=utc_now)
    updated_at: str = field(default_factory=utc_now)

    def __post_init__(self):
        self.status = InfographicStatus(self.status)


@dataclass
class JobRecord(Record):
    playlist_id: str
    video_ids: List[str]
    status: JobStatus = JobStatus.PENDING
    progress: int = 0
    current_video_id: Optional[str] = None
    current_step: Optional[str] = None
    options: Optional[Dict[str, Any]] = None
    id: str = field(default_factory=new_id)
    created_at: str = field(default_factory=utc_now)
    updated_at: str = field(default_factory=utc_now)

    def __post_init__(self):
        self.status = JobStatus(self.status)
        self.video_ids = list(self.video_ids)


@dataclass
class UserRecord(Record):
    email: str
    password_hash: str
    name: Optional[str] = None
    plan: Plan = Plan.FREE
    apify_api_token: Optional[str] = None
    gemini_api_key: Optional[str] = None
    atlas_cloud_api_key: Optional[str] = None
    id: str = field(default_factory=new_id)
    created_at: str = field(default_factory=utc_now)
    updated_at: str = field(default_factory=utc_now)

    def __post_init__(self):
        self.plan = Plan(self.plan)

    def __repr__(self) -> str:
        return f"UserRecord(id={self.id!r}, email={self.email!r}, plan={self.plan.value})"
