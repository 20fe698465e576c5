"""
LLM Service - Abstraction layer for Language Model providers

This module provides a unified interface for the text steps of the pipeline:
- Gemini (primary, per-job key)
- OpenAI (fallback, system key)

Usage:
    from app.services.llm import get_text_provider

    llm = get_text_provider(gemini_api_key)
    response = await llm.generate("Your prompt here", get_model_config("content_analysis"))
    print(response.text)
"""

from .base import (
    LLMProvider,
    LLMResponse,
    LLMConfig,
    ProviderType,
    UsageStats,
)
from .factory import get_text_provider, get_all_providers
from .fallback import FallbackProvider, build_llm_config
from .gemini_provider import GeminiProvider
from .openai_provider import OpenAIProvider

__all__ = [
    # Base classes
    "LLMProvider",
    "LLMResponse",
    "LLMConfig",
    "ProviderType",
    "UsageStats",
    # Providers
    "GeminiProvider",
    "OpenAIProvider",
    "FallbackProvider",
    "build_llm_config",
    # Factory
    "get_text_provider",
    "get_all_providers",
]
