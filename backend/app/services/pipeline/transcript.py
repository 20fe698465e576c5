"""
Transcript Fetcher

Fetches a video transcript from the Apify transcript scraper on first access
and caches it on the video record. Later calls never hit the network.

The scraper answers in several shapes; each is parsed into one of the
transcript payload variants below before any text is extracted:
    - SegmentTranscript: timed segments (`[{"data": [{"text": ...}, ...]}]`)
    - PlainTranscript: a plain string or a `text`/`transcript` field
    - EmptyTranscript: anything else
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse

import httpx

from app.config import APIFY_TRANSCRIPT_SCRAPER_URL, TRANSCRIPT_SCRAPE_TIMEOUT
from app.core import get_logger, LogTimer, NotFoundError, TranscriptUnavailableError
from app.services.infrastructure.storage import VideoRepository

logger = get_logger(__name__, service="transcript")


@dataclass(frozen=True)
class SegmentTranscript:
    segments: Tuple[str, ...]


@dataclass(frozen=True)
class PlainTranscript:
    text: str


@dataclass(frozen=True)
class EmptyTranscript:
    reason: str = "no transcript data"


TranscriptPayload = Union[SegmentTranscript, PlainTranscript, EmptyTranscript]

_TEXT_FIELDS = ("text", "transcript")


def _segment_texts(items: list) -> Tuple[str, ...]:
    texts = []
    for item in items:
        if isinstance(item, str):
            texts.append(item.strip())
        elif isinstance(item, dict) and isinstance(item.get("text"), str):
            texts.append(item["text"].strip())
    return tuple(text for text in texts if text)


def parse_transcript_payload(payload: Any) -> TranscriptPayload:
    """Classify a scraper response. Segment arrays win over text fields."""
    if isinstance(payload, str):
        return PlainTranscript(payload)

    if isinstance(payload, list):
        if not payload:
            return EmptyTranscript("empty response")
        first = payload[0]
        if isinstance(first, dict) and ("data" in first or "transcript" in first):
            # Dataset items; the first one belongs to the requested video
            return parse_transcript_payload(first)
        segments = _segment_texts(payload)
        if segments:
            return SegmentTranscript(segments)
        return parse_transcript_payload(first)

    if isinstance(payload, dict):
        for key in ("data",) + _TEXT_FIELDS:
            value = payload.get(key)
            if isinstance(value, list):
                segments = _segment_texts(value)
                if segments:
                    return SegmentTranscript(segments)
        for key in _TEXT_FIELDS:
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return PlainTranscript(value)
        return EmptyTranscript("no transcript field")

    return EmptyTranscript(f"unexpected response type {type(payload).__name__}")


def transcript_text(payload: TranscriptPayload) -> str:
    """Flatten a payload to text; raises when there is nothing to extract."""
    if isinstance(payload, SegmentTranscript):
        text = " ".join(payload.segments)
    elif isinstance(payload, PlainTranscript):
        text = payload.text.strip()
    elif isinstance(payload, EmptyTranscript):
        raise TranscriptUnavailableError(f"No transcript available: {payload.reason}")
    else:
        raise TypeError(f"Unknown transcript payload: {payload!r}")

    if not text:
        raise TranscriptUnavailableError("No transcript available: empty text")
    return text


def normalize_video_url(url: str) -> str:
    """Drop query parameters the scraper chokes on (playlist, index, timestamps).

    Watch URLs keep only `v`; short and embed URLs lose their query entirely.
    """
    parsed = urlparse(url.strip())
    host = parsed.netloc.lower()
    if "youtube.com" in host and parsed.path == "/watch":
        video_ids = parse_qs(parsed.query).get("v")
        query = urlencode({"v": video_ids[0]}) if video_ids else ""
        return urlunparse((parsed.scheme or "https", parsed.netloc, parsed.path, "", query, ""))
    if "youtu.be" in host or "youtube.com" in host:
        return urlunparse((parsed.scheme or "https", parsed.netloc, parsed.path, "", "", ""))
    return url.strip()


class TranscriptFetcher:
    """Lazily fetched, durably cached transcripts"""

    def __init__(
        self,
        videos: VideoRepository,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = TRANSCRIPT_SCRAPE_TIMEOUT,
    ):
        self.videos = videos
        self._transport = transport
        self._timeout = timeout

    async def get(self, video_id: str, apify_api_token: str) -> str:
        video = self.videos.get(video_id)
        if video is None:
            raise NotFoundError("Video", video_id)

        if video.transcript:
            logger.debug("Transcript cache hit", extra={"video_id": video_id})
            return video.transcript

        transcript = await self.fetch_remote(video.url, apify_api_token)
        stored = self.videos.set_transcript(video_id, transcript)
        return stored.transcript

    async def fetch_remote(self, video_url: str, apify_api_token: str) -> str:
        target_url = normalize_video_url(video_url)
        try:
            # httpx limits each phase; asyncio.timeout bounds the whole call
            async with asyncio.timeout(self._timeout):
                async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                    with LogTimer(logger, "Transcript scrape"):
                        response = await client.post(
                            APIFY_TRANSCRIPT_SCRAPER_URL,
                            params={"token": apify_api_token},
                            json={"videoUrl": target_url},
                        )
                        response.raise_for_status()
                        payload = response.json()
        except (httpx.TimeoutException, TimeoutError) as e:
            raise TranscriptUnavailableError("Transcript request timed out") from e
        except httpx.HTTPStatusError as e:
            raise TranscriptUnavailableError(
                f"Transcript service returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise TranscriptUnavailableError(f"Transcript request failed: {e}") from e
        except ValueError as e:
            raise TranscriptUnavailableError("Transcript service returned invalid JSON") from e

        text = transcript_text(parse_transcript_payload(payload))
        logger.info("Transcript fetched", extra={"url": target_url, "chars": len(text)})
        return text
