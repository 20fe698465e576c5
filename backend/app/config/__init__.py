"""
Application configuration and settings
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from .paths import APP_DIR, BACKEND_DIR, DATA_DIR, LOG_DIR
from .constants import (
    API_TITLE,
    API_DESCRIPTION,
    API_VERSION,
    CORS_ORIGINS,
    APIFY_PLAYLIST_SCRAPER_URL,
    APIFY_TRANSCRIPT_SCRAPER_URL,
    IMAGE_GENERATION_URL,
    IMAGE_MODEL,
    IMAGE_OUTPUT_FORMAT,
    IMAGE_RESOLUTION,
    PLAYLIST_SCRAPE_TIMEOUT,
    TRANSCRIPT_SCRAPE_TIMEOUT,
    IMAGE_GENERATION_TIMEOUT,
    IMAGE_DOWNLOAD_TIMEOUT,
)

# Model configuration
from .models import (
    LLMProviderType,
    ModelConfig,
    PipelineModels,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_OPENAI_MODEL,
    get_model_config,
    list_pipeline_steps,
)
from .settings import (
    SYSTEM_KEY_ENV_VARS,
    get_system_api_keys,
    get_fallback_llm_key,
    get_auth_secret,
    get_token_max_age_seconds,
    missing_system_keys,
)
