"""
Playlist use cases - extraction and read access.
"""

from dataclasses import dataclass
from typing import List, Optional

from app.models.infographic import InfographicOut
from app.models.playlist import PlaylistOut, VideoOut
from app.services.credentials import Capability, CredentialResolver
from app.services.infrastructure.storage import DataStore, UserRecord
from app.services.pipeline import PlaylistExtractor

from .base import UseCase


@dataclass
class ExtractPlaylistCommand:
    user: UserRecord
    url: str


class ExtractPlaylistUseCase(UseCase[ExtractPlaylistCommand, PlaylistOut]):
    """Scrape a playlist with the user's resolved Apify token and store it."""

    def __init__(
        self,
        store: DataStore,
        extractor: Optional[PlaylistExtractor] = None,
        resolver: Optional[CredentialResolver] = None,
    ):
        self.store = store
        self.extractor = extractor or PlaylistExtractor(store)
        self.resolver = resolver or CredentialResolver()

    async def execute(self, request: ExtractPlaylistCommand) -> PlaylistOut:
        credentials = self.resolver.resolve(request.user, Capability.PLAYLIST_EXTRACTION)
        playlist, videos = await self.extractor.extract(
            request.url,
            credentials.apify_api_token,
            owner_id=request.user.id,
        )
        return PlaylistOut.from_record(playlist, [VideoOut.from_record(video) for video in videos])


class PlaylistQueries:
    def __init__(self, store: DataStore):
        self.store = store

    def list_for_user(self, user_id: str) -> List[PlaylistOut]:
        return [PlaylistOut.from_record(playlist) for playlist in self.store.playlists.list_for_user(user_id)]

    def get_with_videos(self, playlist_id: str) -> PlaylistOut:
        """Playlist with its videos, each carrying its infographic if any."""
        playlist = self.store.playlists.get_or_raise(playlist_id)
        videos = []
        for video in self.store.videos.list_for_playlist(playlist_id):
            infographic = self.store.infographics.get_by_video(video.id)
            videos.append(VideoOut.from_record(
                video,
                InfographicOut.from_record(infographic).dump() if infographic else None,
            ))
        return PlaylistOut.from_record(playlist, videos)
