"""
Pipeline services - per-video infographic generation flow.

Pipeline Stages:
1. Transcript - Fetch (once) and cache the video transcript
2. Content Analysis - Key-points report from the transcript
3. Design Prompt - Image-generation prompt from the report
4. Image Generation - Hosted infographic image from the prompt

Playlist extraction feeds the videos this pipeline works on.
"""

from .transcript import TranscriptFetcher, normalize_video_url
from .content_analysis import ContentAnalyzer, DesignPromptGenerator
from .image_generation import ImageGenerator
from .playlist_extraction import PlaylistExtractor, extract_video_id

__all__ = [
    "TranscriptFetcher",
    "normalize_video_url",
    "ContentAnalyzer",
    "DesignPromptGenerator",
    "ImageGenerator",
    "PlaylistExtractor",
    "extract_video_id",
]
