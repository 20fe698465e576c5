"""
Playlist routes.
"""

from fastapi import APIRouter, Request

from ..models import ExtractPlaylistRequest, envelope
from ..services.infrastructure.storage import get_datastore
from ..services.use_cases import (
    ExtractPlaylistCommand,
    ExtractPlaylistUseCase,
    InfographicQueries,
    PlaylistQueries,
)
from .common import require_current_user

router = APIRouter(prefix="/api", tags=["playlists"])


@router.post("/playlist/extract")
async def extract_playlist(payload: ExtractPlaylistRequest, request: Request):
    """Scrape a playlist (needs the playlist-extraction credential)."""
    user = require_current_user(request)
    use_case = ExtractPlaylistUseCase(get_datastore())
    playlist = await use_case.execute(ExtractPlaylistCommand(user=user, url=payload.url))
    return envelope(playlist)


@router.get("/playlists")
async def list_playlists(request: Request):
    user = require_current_user(request)
    return envelope(PlaylistQueries(get_datastore()).list_for_user(user.id))


@router.get("/playlist/{playlist_id}")
async def get_playlist(playlist_id: str, request: Request):
    require_current_user(request)
    return envelope(PlaylistQueries(get_datastore()).get_with_videos(playlist_id))


@router.get("/playlist/{playlist_id}/infographics")
async def get_playlist_infographics(playlist_id: str, request: Request):
    require_current_user(request)
    store = get_datastore()
    store.playlists.get_or_raise(playlist_id)
    return envelope(InfographicQueries(store).list_playlist_infographics(playlist_id))
