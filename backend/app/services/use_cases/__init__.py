"""
Use Cases package - Business logic layer.

Following Clean Architecture principles:
- Each use case is ONE business operation
- Use cases are independent of HTTP
- Use cases are fully testable

Modules:
- base: Base use case abstract class
- generation_use_case: Start infographic jobs; job/infographic queries
- playlist_use_case: Extract playlists; playlist queries
- account_use_case: Sign-up, login, account settings
"""

from .base import UseCase
from .generation_use_case import GenerationCommand, GenerationUseCase, InfographicQueries
from .playlist_use_case import ExtractPlaylistCommand, ExtractPlaylistUseCase, PlaylistQueries
from .account_use_case import AccountService

__all__ = [
    "UseCase",
    "GenerationCommand",
    "GenerationUseCase",
    "InfographicQueries",
    "ExtractPlaylistCommand",
    "ExtractPlaylistUseCase",
    "PlaylistQueries",
    "AccountService",
]
