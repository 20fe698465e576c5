"""
Playlist Extractor

Scrapes a YouTube playlist through Apify and upserts the playlist and its
videos. Re-extracting the same URL updates records instead of duplicating.
"""

import asyncio
import re
from typing import List, Optional, Tuple

import httpx

from app.config import APIFY_PLAYLIST_SCRAPER_URL, PLAYLIST_SCRAPE_TIMEOUT
from app.core import get_logger, LogTimer, PlaylistExtractionError
from app.services.infrastructure.storage import DataStore, PlaylistRecord, VideoRecord

logger = get_logger(__name__, service="playlist_extraction")

_VIDEO_ID_PATTERN = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)")


def extract_video_id(url: str) -> str:
    """YouTube video id from a watch, short or embed link; the link itself otherwise."""
    match = _VIDEO_ID_PATTERN.search(url)
    return match.group(1) if match else url


class PlaylistExtractor:
    def __init__(
        self,
        store: DataStore,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = PLAYLIST_SCRAPE_TIMEOUT,
    ):
        self.store = store
        self._transport = transport
        self._timeout = timeout

    async def scrape(self, playlist_url: str, apify_api_token: str) -> list:
        try:
            async with asyncio.timeout(self._timeout):
                async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                    with LogTimer(logger, "Playlist scrape"):
                        response = await client.post(
                            APIFY_PLAYLIST_SCRAPER_URL,
                            params={"token": apify_api_token},
                            json={"start_urls": [playlist_url]},
                        )
                        response.raise_for_status()
                        items = response.json()
        except (httpx.TimeoutException, TimeoutError) as e:
            raise PlaylistExtractionError("Playlist request timed out") from e
        except httpx.HTTPStatusError as e:
            raise PlaylistExtractionError(f"Playlist service returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise PlaylistExtractionError(f"Playlist request failed: {e}") from e
        except ValueError as e:
            raise PlaylistExtractionError("Playlist service returned invalid JSON") from e

        if not isinstance(items, list):
            raise PlaylistExtractionError("Unexpected playlist response")
        return [item for item in items if isinstance(item, dict) and item.get("video_link")]

    async def extract(
        self,
        playlist_url: str,
        apify_api_token: str,
        owner_id: Optional[str] = None,
    ) -> Tuple[PlaylistRecord, List[VideoRecord]]:
        items = await self.scrape(playlist_url, apify_api_token)
        if not items:
            raise PlaylistExtractionError("No videos found in playlist")

        playlist_info = items[0].get("playlist_info") or {}
        playlist = self.store.playlists.upsert_by_url(
            url=playlist_url,
            title=playlist_info.get("playlist_title") or "Untitled Playlist",
            video_count=len(items),
            owner_id=owner_id,
        )

        videos = []
        for position, item in enumerate(items):
            duration = item.get("duration")
            videos.append(self.store.videos.upsert_by_source_id(
                source_video_id=extract_video_id(item["video_link"]),
                playlist_id=playlist.id,
                url=item["video_link"],
                title=item.get("video_title") or "Untitled Video",
                thumbnail=item.get("thumbnail"),
                duration=str(duration) if duration is not None else None,
                position=position,
            ))

        logger.info(
            "Playlist extracted",
            extra={"playlist_id": playlist.id, "video_count": len(videos)},
        )
        return playlist, videos
