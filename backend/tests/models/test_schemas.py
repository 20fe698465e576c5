"""
Tests for the API schemas (camelCase wire format, validation, envelopes)
"""

import pytest
from pydantic import ValidationError

from app.models import (
    ExtractPlaylistRequest,
    GenerateInfographicRequest,
    InfographicOptions,
    JobOut,
    SignupRequest,
    UserOut,
    envelope,
    error_envelope,
)
from app.models.status import InfographicStatus, JobStatus, Plan
from app.services.infrastructure.storage import JobRecord, UserRecord


class TestExtractPlaylistRequest:
    @pytest.mark.parametrize("url", [
        "https://www.youtube.com/playlist?list=PL123",
        "https://www.youtube.com/watch?v=abc&list=PL123",
    ])
    def test_accepts_playlist_urls(self, url):
        assert ExtractPlaylistRequest(url=url).url == url

    def test_rejects_other_urls(self):
        with pytest.raises(ValidationError, match="Invalid YouTube playlist URL"):
            ExtractPlaylistRequest(url="https://www.youtube.com/watch?v=abc")


class TestGenerateInfographicRequest:
    def test_camel_case_input(self):
        request = GenerateInfographicRequest.model_validate({
            "playlistId": "p1",
            "videoIds": ["v1", "v2"],
            "options": {"detailLevel": "detailed", "customDescription": "blue tones"},
        })

        assert request.playlist_id == "p1"
        assert request.video_ids == ["v1", "v2"]
        assert request.options.detail_level == "detailed"
        assert request.options.language == "ar"

    def test_empty_video_ids_rejected(self):
        with pytest.raises(ValidationError):
            GenerateInfographicRequest.model_validate({"playlistId": "p1", "videoIds": []})

    def test_blank_video_id_rejected(self):
        with pytest.raises(ValidationError):
            GenerateInfographicRequest.model_validate({"playlistId": "p1", "videoIds": [" "]})

    def test_unknown_option_value_rejected(self):
        with pytest.raises(ValidationError):
            InfographicOptions(orientation="diagonal")


class TestOptionsDefaults:
    def test_defaults(self):
        options = InfographicOptions()

        assert options.language == "ar"
        assert options.orientation == "landscape"
        assert options.detail_level == "standard"
        assert options.custom_description is None


class TestJobOut:
    def test_serializes_camel_case(self):
        job = JobRecord(
            playlist_id="p1",
            video_ids=["v1"],
            status=JobStatus.PROCESSING,
            progress=50,
            current_video_id="v1",
            current_step="Generating image...",
            options=InfographicOptions(language="en").model_dump(),
        )

        data = JobOut.from_record(job).dump()

        assert data["playlistId"] == "p1"
        assert data["videoIds"] == ["v1"]
        assert data["status"] == "PROCESSING"
        assert data["currentVideoId"] == "v1"
        assert data["currentStep"] == "Generating image..."
        assert data["options"]["language"] == "en"
        assert data["playlist"] is None


class TestUserOut:
    def test_reports_key_presence_only(self):
        user = UserRecord(email="a@b.c", password_hash="x", gemini_api_key="secret")

        data = UserOut.from_record(user).dump()

        assert data["plan"] == "FREE"
        assert data["hasApiKeys"] == {
            "apifyApiToken": False,
            "geminiApiKey": True,
            "atlasCloudApiKey": False,
        }
        assert "secret" not in str(data)


class TestSignupRequest:
    def test_email_is_normalized(self):
        assert SignupRequest(email=" A@B.C ", password="secret1").email == "a@b.c"

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError):
            SignupRequest(email="a@b.c", password="123")


class TestEnvelope:
    def test_model_payload(self):
        body = envelope(InfographicOptions(), message="ok")

        assert body["success"] is True
        assert body["data"]["detailLevel"] == "standard"
        assert body["message"] == "ok"

    def test_list_payload(self):
        body = envelope([InfographicOptions(language="en"), {"raw": 1}])

        assert body["data"][0]["language"] == "en"
        assert body["data"][1] == {"raw": 1}

    def test_error_envelope(self):
        assert error_envelope("Job not found") == {"success": False, "error": "Job not found"}


class TestStatusEnums:
    def test_job_status(self):
        assert JobStatus.COMPLETED.is_terminal()
        assert not JobStatus.PENDING.is_terminal()
        assert not JobStatus.PROCESSING.is_terminal()

    def test_infographic_status_values(self):
        assert [s.value for s in InfographicStatus] == ["PROCESSING", "COMPLETED", "FAILED"]

    def test_plan(self):
        assert Plan.PAID.uses_system_keys()
        assert not Plan.FREE.uses_system_keys()
