"""
OpenAI LLM Provider

Secondary provider, used when the primary Gemini call fails.
"""

import asyncio
from typing import Any, Optional

from openai import OpenAI

from app.core import InfrastructureError

from .base import (
    LLMProvider,
    LLMResponse,
    LLMConfig,
    ProviderType,
    UsageStats,
)


class OpenAIProvider(LLMProvider):
    """OpenAI chat-completions provider"""

    provider_type = ProviderType.OPENAI

    def __init__(self, api_key: Optional[str]):
        self.api_key = api_key
        self.client = OpenAI(api_key=api_key) if api_key else None

    def is_available(self) -> bool:
        return self.client is not None

    def _extract_usage(self, response: Any) -> Optional[UsageStats]:
        usage = getattr(response, "usage", None)
        if not usage:
            return None
        return UsageStats(
            input_tokens=getattr(usage, "prompt_tokens", 0) or 0,
            output_tokens=getattr(usage, "completion_tokens", 0) or 0,
        )

    async def generate(self, prompt: str, config: LLMConfig) -> LLMResponse:
        if not self.is_available():
            raise InfrastructureError("OpenAI provider is not available. Check OPENAI_API_KEY.")

        messages = []
        if config.system_instruction:
            messages.append({"role": "system", "content": config.system_instruction})
        messages.append({"role": "user", "content": prompt})

        request_kwargs: dict[str, Any] = {
            "model": config.model,
            "messages": messages,
            "temperature": config.temperature,
        }
        if config.max_tokens:
            request_kwargs["max_tokens"] = config.max_tokens

        response = await asyncio.to_thread(self.client.chat.completions.create, **request_kwargs)

        content = response.choices[0].message.content if response.choices else None
        text = content.strip() if content else ""
        if not text:
            raise InfrastructureError(f"OpenAI model {config.model} returned an empty response")

        return LLMResponse(
            text=text,
            model=config.model,
            provider=self.provider_type,
            usage=self._extract_usage(response),
            raw_response=response,
        )
