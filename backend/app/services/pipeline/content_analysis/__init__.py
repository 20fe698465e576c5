"""Content analysis - transcript report and design prompt steps."""

from .analyzer import ContentAnalyzer, DesignPromptGenerator

__all__ = ["ContentAnalyzer", "DesignPromptGenerator"]
