"""
Constants configuration

API settings, CORS configuration, and the fixed parameters of the
external services the pipeline talks to.
"""

import os

# API settings
API_TITLE = "Playlist Infographic API"
API_DESCRIPTION = "Turn YouTube playlist videos into AI-generated infographics"
API_VERSION = "1.0.0"

# CORS origins
_DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:3001",
    "http://localhost:5173",
]
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "").split(",")
    if origin.strip()
] or _DEFAULT_CORS_ORIGINS

# Apify actors (run synchronously, dataset items returned in the response)
APIFY_PLAYLIST_SCRAPER_URL = (
    "https://api.apify.com/v2/acts/"
    "grandmaster~youtube-playlist-scraper---lightning-fast-low-cost/run-sync-get-dataset-items"
)
APIFY_TRANSCRIPT_SCRAPER_URL = (
    "https://api.apify.com/v2/acts/"
    "pintostudio~youtube-transcript-scraper/run-sync-get-dataset-items"
)

# Atlas Cloud image generation
IMAGE_GENERATION_URL = "https://api.atlascloud.ai/api/v1/model/generateImage"
IMAGE_MODEL = "google/nano-banana-pro/edit"
IMAGE_OUTPUT_FORMAT = "png"
IMAGE_RESOLUTION = "1k"

# Timeouts (seconds)
PLAYLIST_SCRAPE_TIMEOUT = 120.0
TRANSCRIPT_SCRAPE_TIMEOUT = 120.0
IMAGE_GENERATION_TIMEOUT = 180.0
IMAGE_DOWNLOAD_TIMEOUT = 60.0

__all__ = [
    "API_TITLE",
    "API_DESCRIPTION",
    "API_VERSION",
    "CORS_ORIGINS",
    "APIFY_PLAYLIST_SCRAPER_URL",
    "APIFY_TRANSCRIPT_SCRAPER_URL",
    "IMAGE_GENERATION_URL",
    "IMAGE_MODEL",
    "IMAGE_OUTPUT_FORMAT",
    "IMAGE_RESOLUTION",
    "PLAYLIST_SCRAPE_TIMEOUT",
    "TRANSCRIPT_SCRAPE_TIMEOUT",
    "IMAGE_GENERATION_TIMEOUT",
    "IMAGE_DOWNLOAD_TIMEOUT",
]
