"""
Infographic repository - one infographic per video.
"""

from typing import Iterable, List, Optional

from app.core import NotFoundError
from app.models.status import InfographicStatus

from .json_store import JsonRecordStore
from .records import InfographicRecord


class InfographicRepository:
    def __init__(self, store: JsonRecordStore[InfographicRecord]):
        self._store = store

    def get_by_video(self, video_id: str) -> Optional[InfographicRecord]:
        return self._store.find_one(lambda i: i.video_id == video_id)

    def upsert_status(self, video_id: str, status: InfographicStatus) -> InfographicRecord:
        """Set the status, creating the record (with an empty image URL) if absent.

        Only the status changes; image URL, report and prompt keep their values.
        """
        with self._store.lock:
            infographic = self.get_by_video(video_id)
            if infographic is None:
                infographic = InfographicRecord(video_id=video_id, status=status)
            infographic.status = status
            return self._store.save(infographic)

    def complete(
        self,
        video_id: str,
        image_url: str,
        analysis_report: str,
        design_prompt: str,
    ) -> InfographicRecord:
        with self._store.lock:
            infographic = self.get_by_video(video_id)
            if infographic is None:
                raise NotFoundError("Infographic", video_id)
            infographic.image_url = image_url
            infographic.analysis_report = analysis_report
            infographic.design_prompt = design_prompt
            infographic.status = InfographicStatus.COMPLETED
            return self._store.save(infographic)

    def list_for_playlist(self, video_ids: Iterable[str]) -> List[InfographicRecord]:
        """Infographics for the given playlist videos, newest first."""
        wanted = set(video_ids)
        infographics = self._store.list(lambda i: i.video_id in wanted)
        return sorted(infographics, key=lambda i: i.created_at, reverse=True)
