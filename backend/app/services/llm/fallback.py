"""
Fallback composite provider

Tries the primary provider and, on any failure, the secondary one. Callers
see either generated text or a single error.
"""

from typing import Optional

from app.config import ModelConfig
from app.core import get_logger

from .base import LLMConfig, LLMProvider, LLMResponse

logger = get_logger(__name__, component="llm_fallback")


def build_llm_config(provider: LLMProvider, model_config: ModelConfig) -> LLMConfig:
    return LLMConfig(
        model=model_config.get_model_for_provider(provider.provider_type),
        temperature=model_config.temperature,
        max_tokens=model_config.max_output_tokens,
        system_instruction=model_config.system_instruction,
    )


class FallbackProvider:
    """Primary provider with an optional secondary.

    Error policy:
        - primary fails, no secondary configured: the primary's error propagates
        - primary fails, secondary fails: the secondary's error propagates
    """

    def __init__(self, primary: LLMProvider, secondary: Optional[LLMProvider] = None):
        self.primary = primary
        self.secondary = secondary

    async def generate(self, prompt: str, model_config: ModelConfig) -> LLMResponse:
        try:
            return await self.primary.generate(prompt, build_llm_config(self.primary, model_config))
        except Exception as primary_error:
            if self.secondary is None:
                raise
            logger.warning(
                f"{self.primary.name} failed, retrying with {self.secondary.name}",
                extra={"error": str(primary_error), "error_type": type(primary_error).__name__},
            )

        return await self.secondary.generate(prompt, build_llm_config(self.secondary, model_config))
