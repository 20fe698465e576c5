"""
Playlist and video repositories.

Playlists are unique by source URL, videos by their source (YouTube) id.
Re-extraction updates the existing records instead of duplicating them.
"""

from typing import List, Optional

from app.core import NotFoundError

from .json_store import JsonRecordStore
from .records import PlaylistRecord, VideoRecord


class PlaylistRepository:
    def __init__(self, store: JsonRecordStore[PlaylistRecord]):
        self._store = store

    def upsert_by_url(
        self,
        url: str,
        title: str,
        video_count: int,
        owner_id: Optional[str] = None,
    ) -> PlaylistRecord:
        with self._store.lock:
            playlist = self._store.find_one(lambda p: p.url == url)
            if playlist is None:
                playlist = PlaylistRecord(url=url)
            playlist.title = title
            playlist.video_count = video_count
            if owner_id:
                playlist.owner_id = owner_id
            return self._store.save(playlist)

    def get(self, playlist_id: str) -> Optional[PlaylistRecord]:
        return self._store.get(playlist_id)

    def get_or_raise(self, playlist_id: str) -> PlaylistRecord:
        playlist = self._store.get(playlist_id)
        if playlist is None:
            raise NotFoundError("Playlist", playlist_id)
        return playlist

    def list_for_user(self, user_id: str) -> List[PlaylistRecord]:
        """Playlists owned by a user, newest first."""
        playlists = self._store.list(lambda p: p.owner_id == user_id)
        return sorted(playlists, key=lambda p: p.created_at, reverse=True)

    def list_all(self) -> List[PlaylistRecord]:
        return sorted(self._store.list(), key=lambda p: p.created_at, reverse=True)


class VideoRepository:
    def __init__(self, store: JsonRecordStore[VideoRecord]):
        self._store = store

    def upsert_by_source_id(
        self,
        source_video_id: str,
        playlist_id: str,
        url: str,
        title: str,
        thumbnail: Optional[str] = None,
        duration: Optional[str] = None,
        position: int = 0,
    ) -> VideoRecord:
        """Create or update a video; an existing video moves to `playlist_id`."""
        with self._store.lock:
            video = self.get_by_source_id(source_video_id)
            if video is None:
                video = VideoRecord(source_video_id=source_video_id, playlist_id=playlist_id, url=url)
            video.playlist_id = playlist_id
            video.url = url
            video.title = title
            video.thumbnail = thumbnail
            video.duration = duration
            video.position = position
            return self._store.save(video)

    def get(self, video_id: str) -> Optional[VideoRecord]:
        return self._store.get(video_id)

    def get_by_source_id(self, source_video_id: str) -> Optional[VideoRecord]:
        return self._store.find_one(lambda v: v.source_video_id == source_video_id)

    def list_for_playlist(self, playlist_id: str) -> List[VideoRecord]:
        """Videos of a playlist in playlist order."""
        videos = self._store.list(lambda v: v.playlist_id == playlist_id)
        return sorted(videos, key=lambda v: v.position)

    def set_transcript(self, video_id: str, transcript: str) -> VideoRecord:
        """Store a transcript. An already cached transcript is never overwritten."""
        with self._store.lock:
            video = self._store.get(video_id)
            if video is None:
                raise NotFoundError("Video", video_id)
            if video.transcript:
                return video
            video.transcript = transcript
            return self._store.save(video)
