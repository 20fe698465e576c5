"""Storage layer - data persistence."""

from .records import (
    Record,
    PlaylistRecord,
    VideoRecord,
    InfographicRecord,
    JobRecord,
    UserRecord,
)
from .json_store import JsonRecordStore
from .playlist_repository import PlaylistRepository, VideoRepository
from .infographic_repository import InfographicRepository
from .job_repository import JobRepository
from .user_repository import UserRepository, API_KEY_FIELDS
from .datastore import DataStore, get_datastore

__all__ = [
    "Record",
    "PlaylistRecord",
    "VideoRecord",
    "InfographicRecord",
    "JobRecord",
    "UserRecord",
    "JsonRecordStore",
    "PlaylistRepository",
    "VideoRepository",
    "InfographicRepository",
    "JobRepository",
    "UserRepository",
    "API_KEY_FIELDS",
    "DataStore",
    "get_datastore",
]
