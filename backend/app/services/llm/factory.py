"""
LLM Provider Factory

Builds the provider chain for one pipeline call from the job's credential
and the system fallback credential.
"""

from typing import Dict, Optional

from app.config import get_fallback_llm_key

from .base import ProviderType
from .fallback import FallbackProvider
from .gemini_provider import GeminiProvider
from .openai_provider import OpenAIProvider


def get_text_provider(gemini_api_key: Optional[str]) -> FallbackProvider:
    """Get the Gemini provider backed by OpenAI when OPENAI_API_KEY is set

    Args:
        gemini_api_key: Key resolved for the current job (user or system)

    Returns:
        FallbackProvider; its secondary is None when fallback is not configured
    """
    fallback_key = get_fallback_llm_key()
    secondary = OpenAIProvider(api_key=fallback_key) if fallback_key else None
    return FallbackProvider(GeminiProvider(api_key=gemini_api_key), secondary)


def get_all_providers() -> Dict[str, bool]:
    """Get configuration status of the system-level providers"""
    return {
        ProviderType.OPENAI.value: get_fallback_llm_key() is not None,
    }
