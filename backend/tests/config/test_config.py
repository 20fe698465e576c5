"""
Tests for app.config - model configuration and environment settings
"""

import pytest

from app.config import (
    DEFAULT_GEMINI_MODEL,
    DEFAULT_OPENAI_MODEL,
    LLMProviderType,
    get_fallback_llm_key,
    get_model_config,
    get_system_api_keys,
    get_token_max_age_seconds,
    list_pipeline_steps,
    missing_system_keys,
)


class TestModelConfig:
    def test_steps(self):
        assert list_pipeline_steps() == ["content_analysis", "design_prompt"]

    def test_defaults(self):
        config = get_model_config("content_analysis")

        assert config.get_model_for_provider(LLMProviderType.GEMINI) == DEFAULT_GEMINI_MODEL
        assert config.get_model_for_provider(LLMProviderType.OPENAI) == DEFAULT_OPENAI_MODEL

    def test_env_overrides_are_read_per_call(self, monkeypatch):
        monkeypatch.setenv("GEMINI_MODEL", "gemini-custom")
        monkeypatch.setenv("OPENAI_MODEL", "gpt-custom")

        config = get_model_config("design_prompt")

        assert config.model_name == "gemini-custom"
        assert config.fallback_model == "gpt-custom"

    def test_unknown_step(self):
        with pytest.raises(ValueError, match="Unknown pipeline step"):
            get_model_config("image")


class TestSettings:
    def test_system_keys_unset(self):
        assert get_system_api_keys() == {
            "apify_api_token": "",
            "gemini_api_key": "",
            "atlas_cloud_api_key": "",
        }
        assert len(missing_system_keys()) == 3

    def test_system_keys_set(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", " g-key ")

        assert get_system_api_keys()["gemini_api_key"] == "g-key"
        assert "GEMINI_API_KEY" not in missing_system_keys()

    def test_fallback_key(self, monkeypatch):
        assert get_fallback_llm_key() is None

        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

        assert get_fallback_llm_key() == "sk-test"

    def test_token_max_age(self, monkeypatch):
        assert get_token_max_age_seconds() == 604800

        monkeypatch.setenv("AUTH_TOKEN_MAX_AGE_SECONDS", "5")
        assert get_token_max_age_seconds() == 60

        monkeypatch.setenv("AUTH_TOKEN_MAX_AGE_SECONDS", "not-a-number")
        assert get_token_max_age_seconds() == 604800
