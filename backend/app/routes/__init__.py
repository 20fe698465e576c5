"""
Routes module - contains all API route handlers
"""

from .auth import router as auth_router
from .playlists import router as playlists_router
from .infographics import router as infographics_router

__all__ = [
    "auth_router",
    "playlists_router",
    "infographics_router",
]
