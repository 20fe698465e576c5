"""
Environment-backed settings

Values are read at call time so tests and long-running processes see
the current environment rather than a snapshot taken at import.
"""

import os
from typing import Dict, List, Optional

SYSTEM_KEY_ENV_VARS = {
    "apify_api_token": "APIFY_API_TOKEN",
    "gemini_api_key": "GEMINI_API_KEY",
    "atlas_cloud_api_key": "ATLAS_CLOUD_API_KEY",
}


def get_system_api_keys() -> Dict[str, str]:
    """System-wide keys used for PAID users (empty string when unset)."""
    return {name: os.getenv(env_var, "").strip() for name, env_var in SYSTEM_KEY_ENV_VARS.items()}


def get_fallback_llm_key() -> Optional[str]:
    """Key for the secondary LLM provider, or None when fallback is not configured."""
    key = os.getenv("OPENAI_API_KEY", "").strip()
    return key or None


def get_auth_secret() -> str:
    return os.getenv("AUTH_SECRET", "playlist-infographic-dev-secret").strip()


def get_token_max_age_seconds() -> int:
    raw = os.getenv("AUTH_TOKEN_MAX_AGE_SECONDS", "604800").strip()  # 7 days
    try:
        max_age = int(raw)
    except ValueError:
        return 604800
    return max(60, max_age)


def missing_system_keys() -> List[str]:
    """Names of system environment variables that are not configured."""
    return [env_var for env_var in SYSTEM_KEY_ENV_VARS.values() if not os.getenv(env_var, "").strip()]


__all__ = [
    "SYSTEM_KEY_ENV_VARS",
    "get_system_api_keys",
    "get_fallback_llm_key",
    "get_auth_secret",
    "get_token_max_age_seconds",
    "missing_system_keys",
]
