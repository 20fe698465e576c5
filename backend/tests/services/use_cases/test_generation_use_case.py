"""
Tests for app.services.use_cases.generation_use_case
"""

from unittest.mock import MagicMock

import pytest

from app.core import MissingKeysError, NotFoundError
from app.models.infographic import InfographicOptions
from app.models.status import InfographicStatus, JobStatus
from app.services.infrastructure.orchestration import InfographicGenerator, JobOrchestrator
from app.services.use_cases import GenerationCommand, GenerationUseCase, InfographicQueries


@pytest.fixture
def user(store):
    created = store.users.create("a@b.c", "hash")
    return store.users.update_api_keys(
        created.id, apify_api_token="a", gemini_api_key="g", atlas_cloud_api_key="c"
    )


@pytest.fixture
def orchestrator(store, fake_steps):
    return JobOrchestrator(store, generator=InfographicGenerator(store, **fake_steps))


class TestGenerationUseCase:
    @pytest.mark.asyncio
    async def test_submits_job(self, store, user, orchestrator, playlist_with_videos):
        playlist, videos = playlist_with_videos
        background_tasks = MagicMock()

        accepted = await GenerationUseCase(store, orchestrator).execute(GenerationCommand(
            user=user,
            playlist_id=playlist.id,
            video_ids=[videos[0].id, videos[2].id],
            options=InfographicOptions(language="en"),
            background_tasks=background_tasks,
        ))

        assert accepted.status is JobStatus.PENDING
        assert accepted.total_videos == 2
        assert accepted.progress == 0
        job = store.jobs.get(accepted.job_id)
        assert job.video_ids == [videos[0].id, videos[2].id]
        assert orchestrator.credentials.get(job.id).gemini_api_key == "g"
        background_tasks.add_task.assert_called_once()

    @pytest.mark.asyncio
    async def test_missing_keys_reject_before_anything_else(self, store):
        free_user = store.users.create("free@b.c", "hash")
        orchestrator = MagicMock()

        with pytest.raises(MissingKeysError) as exc_info:
            await GenerationUseCase(store, orchestrator).execute(GenerationCommand(
                user=free_user, playlist_id="does-not-exist", video_ids=["v1"],
            ))

        assert exc_info.value.missing_keys["geminiApiKey"] is True
        orchestrator.submit.assert_not_called()
        assert store.jobs.list_active() == []

    @pytest.mark.asyncio
    async def test_unknown_playlist(self, store, user):
        orchestrator = MagicMock()

        with pytest.raises(NotFoundError, match="Playlist not found"):
            await GenerationUseCase(store, orchestrator).execute(GenerationCommand(
                user=user, playlist_id="missing", video_ids=["v1"],
            ))

        orchestrator.submit.assert_not_called()

    @pytest.mark.asyncio
    async def test_video_of_another_playlist(self, store, user, playlist_with_videos):
        playlist, videos = playlist_with_videos
        other = store.playlists.upsert_by_url("https://www.youtube.com/playlist?list=OTHER", "Other", 0)
        orchestrator = MagicMock()

        with pytest.raises(NotFoundError, match="Video not found"):
            await GenerationUseCase(store, orchestrator).execute(GenerationCommand(
                user=user, playlist_id=other.id, video_ids=[videos[0].id],
            ))

        orchestrator.submit.assert_not_called()


class TestInfographicQueries:
    def test_get_job(self, store):
        job = store.jobs.create("p1", ["v1"])

        assert InfographicQueries(store).get_job(job.id).id == job.id

    def test_get_job_missing(self, store):
        with pytest.raises(NotFoundError, match="Job not found"):
            InfographicQueries(store).get_job("missing")

    def test_list_user_jobs_with_playlist_summary(self, store):
        mine = store.playlists.upsert_by_url("https://y/playlist?list=A", "Mine", 2, owner_id="u1")
        theirs = store.playlists.upsert_by_url("https://y/playlist?list=B", "Theirs", 1, owner_id="u2")
        job = store.jobs.create(mine.id, ["v1"])
        store.jobs.create(theirs.id, ["v2"])

        jobs = InfographicQueries(store).list_user_jobs("u1")

        assert [j.id for j in jobs] == [job.id]
        assert jobs[0].playlist.title == "Mine"
        assert jobs[0].playlist.video_count == 2

    def test_list_user_jobs_without_playlists(self, store):
        assert InfographicQueries(store).list_user_jobs("nobody") == []

    def test_get_infographic_includes_video(self, store, playlist_with_videos):
        _, videos = playlist_with_videos
        store.infographics.upsert_status(videos[0].id, InfographicStatus.PROCESSING)

        infographic = InfographicQueries(store).get_infographic(videos[0].id)

        assert infographic.status is InfographicStatus.PROCESSING
        assert infographic.video.title == "Video 0"

    def test_get_infographic_missing(self, store):
        with pytest.raises(NotFoundError, match="Infographic not found"):
            InfographicQueries(store).get_infographic("missing")

    def test_list_playlist_infographics(self, store, playlist_with_videos):
        playlist, videos = playlist_with_videos
        store.infographics.upsert_status(videos[0].id, InfographicStatus.FAILED)
        store.infographics.upsert_status(videos[1].id, InfographicStatus.PROCESSING)
        store.infographics.upsert_status("unrelated", InfographicStatus.PROCESSING)

        listed = InfographicQueries(store).list_playlist_infographics(playlist.id)

        assert [i.video_id for i in listed] == [videos[1].id, videos[0].id]
