"""
Gemini LLM Provider

Implementation of LLMProvider for Google's Gemini AI models.
"""

import asyncio
from typing import Any, Optional

from google import genai
from google.genai import types

from app.core import InfrastructureError

from .base import (
    LLMProvider,
    LLMResponse,
    LLMConfig,
    ProviderType,
    UsageStats,
)


class GeminiProvider(LLMProvider):
    """Google Gemini LLM Provider"""

    provider_type = ProviderType.GEMINI

    def __init__(self, api_key: Optional[str]):
        """Initialize Gemini provider

        Args:
            api_key: Gemini API key resolved for the current job
        """
        self.api_key = api_key
        self.client = genai.Client(api_key=api_key) if api_key else None

    def is_available(self) -> bool:
        return self.client is not None

    def _build_generation_config(self, config: LLMConfig) -> types.GenerateContentConfig:
        kwargs: dict[str, Any] = {"temperature": config.temperature}
        if config.max_tokens:
            kwargs["max_output_tokens"] = config.max_tokens
        if config.system_instruction:
            kwargs["system_instruction"] = config.system_instruction
        return types.GenerateContentConfig(**kwargs)

    def _extract_usage(self, response: Any) -> Optional[UsageStats]:
        """Extract usage stats from Gemini response"""
        usage = getattr(response, "usage_metadata", None)
        if not usage:
            return None
        return UsageStats(
            input_tokens=getattr(usage, "prompt_token_count", 0) or 0,
            output_tokens=getattr(usage, "candidates_token_count", 0) or 0,
        )

    async def generate(self, prompt: str, config: LLMConfig) -> LLMResponse:
        if not self.is_available():
            raise InfrastructureError("Gemini provider is not available. Check API key.")

        response = await asyncio.to_thread(
            self.client.models.generate_content,
            model=config.model,
            contents=prompt,
            config=self._build_generation_config(config),
        )

        text = response.text.strip() if response.text else ""
        if not text:
            raise InfrastructureError(f"Gemini model {config.model} returned an empty response")

        return LLMResponse(
            text=text,
            model=config.model,
            provider=self.provider_type,
            usage=self._extract_usage(response),
            raw_response=response,
        )
