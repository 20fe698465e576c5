"""
Runtime environment guards.
"""

import os

from app.config import missing_system_keys

from .logging import get_logger

logger = get_logger(__name__, component="runtime")


def parse_bool_env(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def validate_environment() -> list[str]:
    """Warn about missing system credentials; PAID users depend on them."""
    missing = missing_system_keys()
    if missing:
        logger.warning(
            "Missing environment variables: " + ", ".join(missing),
            extra={"missing": missing},
        )
    if not os.getenv("OPENAI_API_KEY"):
        logger.info("OPENAI_API_KEY not set, LLM fallback disabled")
    return missing
