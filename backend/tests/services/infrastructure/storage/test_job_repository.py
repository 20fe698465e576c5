"""
Tests for app.services.infrastructure.storage.job_repository
"""

import pytest

from app.core import NotFoundError
from app.models.status import JobStatus


class TestJobRepository:
    def test_create(self, store):
        job = store.jobs.create("p1", ["v1", "v2"], {"language": "en"})

        assert job.status is JobStatus.PENDING
        assert job.progress == 0
        assert job.video_ids == ["v1", "v2"]
        assert job.current_video_id is None
        assert store.jobs.get(job.id).options == {"language": "en"}

    def test_create_requires_videos(self, store):
        with pytest.raises(ValueError):
            store.jobs.create("p1", [])

    def test_update(self, store):
        job = store.jobs.create("p1", ["v1"])

        updated = store.jobs.update(job.id, status=JobStatus.PROCESSING, progress=40, current_step="starting")

        assert updated.status is JobStatus.PROCESSING
        assert updated.progress == 40
        assert store.jobs.get(job.id).current_step == "starting"

    def test_update_accepts_status_strings(self, store):
        job = store.jobs.create("p1", ["v1"])

        assert store.jobs.update(job.id, status="COMPLETED").status is JobStatus.COMPLETED

    def test_update_rejects_other_fields(self, store):
        job = store.jobs.create("p1", ["v1"])

        with pytest.raises(ValueError):
            store.jobs.update(job.id, video_ids=["v9"])

    def test_update_missing_job(self, store):
        with pytest.raises(NotFoundError, match="Job not found"):
            store.jobs.update("missing", progress=1)

    def test_list_for_playlists_newest_first(self, store):
        older = store.jobs.create("p1", ["v1"])
        newer = store.jobs.create("p2", ["v2"])
        store.jobs.create("p3", ["v3"])

        listed = store.jobs.list_for_playlists({"p1", "p2"})

        assert [j.id for j in listed] == [newer.id, older.id]

    def test_list_active(self, store):
        pending = store.jobs.create("p1", ["v1"])
        running = store.jobs.create("p1", ["v2"])
        done = store.jobs.create("p1", ["v3"])
        store.jobs.update(running.id, status=JobStatus.PROCESSING)
        store.jobs.update(done.id, status=JobStatus.COMPLETED)

        assert {j.id for j in store.jobs.list_active()} == {pending.id, running.id}
