"""
Model Configuration for Pipeline Steps

This module defines the language models used by the infographic pipeline.
Each text-generation step has its own model configuration so the primary
and fallback models can be tuned independently.

=== PROVIDER CONFIGURATION ===

    - "gemini" : Primary provider. Uses the per-job Gemini key.
    - "openai" : Fallback provider. Uses the system OPENAI_API_KEY; when the
                 key is absent there is no fallback.

Set GEMINI_MODEL / OPENAI_MODEL to override the default model names.
"""

import os
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional


class LLMProviderType(str, Enum):
    """Supported LLM providers"""
    GEMINI = "gemini"
    OPENAI = "openai"


DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"


@dataclass
class ModelConfig:
    """Configuration for a single pipeline step

    Holds the primary (Gemini) model and the model to use when the request
    is retried against the fallback provider.
    """
    model_name: str
    fallback_model: str
    temperature: float = 0.7
    max_output_tokens: int = 4096
    system_instruction: Optional[str] = None
    description: str = ""

    def get_model_for_provider(self, provider: LLMProviderType) -> str:
        """Get the model name to send to the given provider"""
        if provider == LLMProviderType.OPENAI:
            return self.fallback_model
        return self.model_name


def _primary_model() -> str:
    return os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)


def _fallback_model() -> str:
    return os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL)


@dataclass
class PipelineModels:
    """
    Model configuration for each text step of the infographic pipeline.

    Pipeline Steps:
    1. Content Analysis - Summarize a transcript into a key-points report
    2. Design Prompt - Turn the report into an image-generation prompt
    """

    content_analysis: ModelConfig = field(default_factory=lambda: ModelConfig(
        model_name=_primary_model(),
        fallback_model=_fallback_model(),
        temperature=0.7,
        system_instruction=(
            "You are an expert content analyst who distills video transcripts "
            "into clear, factual key points."
        ),
        description="Key points report from a video transcript",
    ))

    design_prompt: ModelConfig = field(default_factory=lambda: ModelConfig(
        model_name=_primary_model(),
        fallback_model=_fallback_model(),
        temperature=0.9,
        max_output_tokens=2048,
        system_instruction=(
            "You are an infographic designer writing precise prompts "
            "for an image generation model."
        ),
        description="Infographic design prompt for the image model",
    ))


def get_model_config(step: str) -> ModelConfig:
    """
    Get the model configuration for a specific pipeline step.

    Args:
        step: Pipeline step name ('content_analysis' or 'design_prompt')

    Returns:
        ModelConfig for the specified step
    """
    pipeline = PipelineModels()
    if step in list_pipeline_steps():
        return getattr(pipeline, step)
    raise ValueError(f"Unknown pipeline step: {step}")


def list_pipeline_steps() -> list[str]:
    """List all available pipeline step names"""
    return ["content_analysis", "design_prompt"]
