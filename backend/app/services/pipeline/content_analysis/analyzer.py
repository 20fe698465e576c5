"""
Content Analyzer and Design Prompt Generator

Both steps build a deterministic instruction from their inputs and the job's
customization options, then send it to the LLM provider chain (Gemini with
OpenAI fallback).
"""

from typing import Callable, Optional

from app.config.models import get_model_config
from app.core import get_logger, LogTimer
from app.models.infographic import InfographicOptions
from app.services.llm import FallbackProvider, get_text_provider

from .prompts import (
    ANALYSIS_PROMPTS,
    DESIGN_PROMPT,
    LANGUAGE_NOTES,
    ORIENTATION_DESCRIPTIONS,
    POINTS_BY_DETAIL_LEVEL,
    custom_note,
)

logger = get_logger(__name__, service="content_analysis")

ProviderFactory = Callable[[Optional[str]], FallbackProvider]


class _TextStep:
    """Shared provider handling for the two text steps"""

    step: str

    def __init__(self, provider_factory: ProviderFactory = get_text_provider):
        self._provider_factory = provider_factory

    async def _run(self, prompt: str, gemini_api_key: str) -> str:
        provider = self._provider_factory(gemini_api_key)
        with LogTimer(logger, f"LLM step {self.step}"):
            response = await provider.generate(prompt, get_model_config(self.step))
        logger.info(
            f"LLM step {self.step} answered by {response.provider.value}",
            extra={"model": response.model, "chars": len(response.text)},
        )
        return response.text


class ContentAnalyzer(_TextStep):
    """Turns a transcript into a key-points report"""

    step = "content_analysis"

    def build_prompt(self, transcript: str, options: Optional[InfographicOptions] = None) -> str:
        options = options or InfographicOptions()
        return ANALYSIS_PROMPTS[options.language].format(
            transcript=transcript,
            points_count=POINTS_BY_DETAIL_LEVEL[options.detail_level],
        )

    async def analyze(
        self,
        transcript: str,
        gemini_api_key: str,
        options: Optional[InfographicOptions] = None,
    ) -> str:
        return await self._run(self.build_prompt(transcript, options), gemini_api_key)


class DesignPromptGenerator(_TextStep):
    """Turns an analysis report into an image-generation prompt"""

    step = "design_prompt"

    def build_prompt(self, analysis_report: str, options: Optional[InfographicOptions] = None) -> str:
        options = options or InfographicOptions()
        return DESIGN_PROMPT.format(
            analysis_report=analysis_report,
            orientation=ORIENTATION_DESCRIPTIONS[options.orientation],
            language_note=LANGUAGE_NOTES[options.language],
            custom_note=custom_note(options.custom_description),
        )

    async def generate(
        self,
        analysis_report: str,
        gemini_api_key: str,
        options: Optional[InfographicOptions] = None,
    ) -> str:
        return await self._run(self.build_prompt(analysis_report, options), gemini_api_key)
