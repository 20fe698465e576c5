"""
Base classes for LLM providers

Defines the abstract interface that all LLM providers must implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from app.config import LLMProviderType as ProviderType


@dataclass
class LLMConfig:
    """Configuration for an LLM request"""
    model: str
    temperature: float = 0.7
    max_tokens: Optional[int] = None
    system_instruction: Optional[str] = None


@dataclass
class UsageStats:
    """Token usage statistics"""
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0

    def __post_init__(self):
        if self.total_tokens == 0:
            self.total_tokens = self.input_tokens + self.output_tokens


@dataclass
class LLMResponse:
    """Unified response from any LLM provider"""
    text: str
    model: str
    provider: ProviderType
    usage: Optional[UsageStats] = None
    raw_response: Any = None  # Original response object from the provider


class LLMProvider(ABC):
    """Abstract base class for LLM providers

    A provider turns one text instruction into generated text. Providers are
    built per call with the credential that applies to the current job.
    """

    provider_type: ProviderType

    @abstractmethod
    async def generate(self, prompt: str, config: LLMConfig) -> LLMResponse:
        """Generate a response from the LLM

        Args:
            prompt: The instruction text
            config: LLM configuration options; `config.model` may be remapped
                by composite providers

        Returns:
            LLMResponse with the generated text and metadata
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider is properly configured"""
        pass

    @property
    def name(self) -> str:
        """Get the provider name"""
        return self.provider_type.value
