"""
Tests for the content analyzer and design prompt generator
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.config import LLMProviderType
from app.models.infographic import InfographicOptions
from app.services.llm import LLMResponse
from app.services.pipeline.content_analysis import ContentAnalyzer, DesignPromptGenerator


@pytest.fixture
def provider():
    fake = MagicMock()
    fake.generate = AsyncMock(return_value=LLMResponse(
        text="generated",
        model="gemini-2.5-flash",
        provider=LLMProviderType.GEMINI,
    ))
    return fake


class TestContentAnalyzer:
    @pytest.mark.parametrize("detail_level,points", [
        ("concise", "2-3"),
        ("standard", "3-5"),
        ("detailed", "5-7"),
    ])
    def test_points_follow_detail_level(self, detail_level, points):
        prompt = ContentAnalyzer().build_prompt(
            "the transcript", InfographicOptions(language="en", detail_level=detail_level)
        )

        assert f"({points} points)" in prompt
        assert "the transcript" in prompt

    def test_defaults_to_arabic(self):
        prompt = ContentAnalyzer().build_prompt("نص")

        assert "النقاط الرئيسية (3-5 نقاط)" in prompt

    def test_transcript_with_braces_is_kept_verbatim(self):
        prompt = ContentAnalyzer().build_prompt("f(x) = {x}", InfographicOptions(language="en"))

        assert "f(x) = {x}" in prompt

    @pytest.mark.asyncio
    async def test_analyze_uses_the_job_key(self, provider):
        factory = MagicMock(return_value=provider)

        report = await ContentAnalyzer(provider_factory=factory).analyze("text", "gemini-key")

        assert report == "generated"
        factory.assert_called_once_with("gemini-key")
        prompt, model_config = provider.generate.await_args.args
        assert "text" in prompt
        assert model_config.temperature == 0.7


class TestDesignPromptGenerator:
    @pytest.mark.parametrize("orientation,description", [
        ("landscape", "16:9"),
        ("portrait", "9:16"),
        ("square", "1:1"),
    ])
    def test_orientation(self, orientation, description):
        prompt = DesignPromptGenerator().build_prompt("report", InfographicOptions(orientation=orientation))

        assert description in prompt

    def test_language_and_custom_description(self):
        prompt = DesignPromptGenerator().build_prompt(
            "report", InfographicOptions(language="en", custom_description="use green")
        )

        assert "should be in English" in prompt
        assert "User's custom instructions: use green" in prompt

    def test_no_custom_description(self):
        prompt = DesignPromptGenerator().build_prompt("report")

        assert "custom instructions" not in prompt
        assert "Arabic" in prompt

    @pytest.mark.asyncio
    async def test_generate(self, provider):
        generator = DesignPromptGenerator(provider_factory=lambda key: provider)

        assert await generator.generate("the report", "gemini-key") == "generated"
        prompt, model_config = provider.generate.await_args.args
        assert "the report" in prompt
        assert model_config.temperature == 0.9
