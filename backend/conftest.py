import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest

# Keep test runs from writing into backend/data
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="infographic-test-data-"))

SYSTEM_ENV_VARS = ("APIFY_API_TOKEN", "GEMINI_API_KEY", "ATLAS_CLOUD_API_KEY", "OPENAI_API_KEY")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """No system credentials unless a test sets them; fixed signing secret."""
    for name in SYSTEM_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AUTH_SECRET", "test-secret")


@pytest.fixture
def store(tmp_path):
    """A DataStore rooted in a fresh temporary directory"""
    from app.services.infrastructure.storage import DataStore

    return DataStore(tmp_path / "data")


@pytest.fixture
def playlist_with_videos(store):
    """A playlist with three videos, returned as (playlist, [videos])"""
    playlist = store.playlists.upsert_by_url(
        url="https://www.youtube.com/playlist?list=PL123",
        title="Test Playlist",
        video_count=3,
    )
    videos = [
        store.videos.upsert_by_source_id(
            source_video_id=f"yt{index}",
            playlist_id=playlist.id,
            url=f"https://www.youtube.com/watch?v=yt{index}",
            title=f"Video {index}",
            position=index,
        )
        for index in range(3)
    ]
    return playlist, videos


@pytest.fixture
def fake_steps():
    """Pipeline step doubles answering scenario-A values"""
    transcripts = MagicMock()
    transcripts.get = AsyncMock(return_value="hello world")
    analyzer = MagicMock()
    analyzer.analyze = AsyncMock(return_value="report")
    prompt_generator = MagicMock()
    prompt_generator.generate = AsyncMock(return_value="prompt")
    image_generator = MagicMock()
    image_generator.generate = AsyncMock(return_value="https://img/1.png")
    return {
        "transcripts": transcripts,
        "analyzer": analyzer,
        "prompt_generator": prompt_generator,
        "image_generator": image_generator,
    }


@pytest.fixture
def credentials():
    from app.services.credentials import ApiCredentials

    return ApiCredentials(
        apify_api_token="apify-test",
        gemini_api_key="gemini-test",
        atlas_cloud_api_key="atlas-test",
    )
