"""
DataStore - the durable store used by the pipeline and the API.
"""

from pathlib import Path
from typing import Optional

from app.config import DATA_DIR

from .infographic_repository import InfographicRepository
from .job_repository import JobRepository
from .json_store import JsonRecordStore
from .playlist_repository import PlaylistRepository, VideoRepository
from .records import InfographicRecord, JobRecord, PlaylistRecord, UserRecord, VideoRecord
from .user_repository import UserRepository


class DataStore:
    """Aggregates the five repositories over one data directory."""

    def __init__(self, root_dir: Optional[Path] = None):
        self.root_dir = Path(root_dir) if root_dir else DATA_DIR
        self.playlists = PlaylistRepository(JsonRecordStore(self.root_dir / "playlists", PlaylistRecord))
        self.videos = VideoRepository(JsonRecordStore(self.root_dir / "videos", VideoRecord))
        self.infographics = InfographicRepository(JsonRecordStore(self.root_dir / "infographics", InfographicRecord))
        self.jobs = JobRepository(JsonRecordStore(self.root_dir / "jobs", JobRecord))
        self.users = UserRepository(JsonRecordStore(self.root_dir / "users", UserRecord))


_datastore_instance: Optional[DataStore] = None


def get_datastore() -> DataStore:
    """Get the shared DataStore instance (singleton pattern)."""
    global _datastore_instance
    if _datastore_instance is None:
        _datastore_instance = DataStore()
    return _datastore_instance
