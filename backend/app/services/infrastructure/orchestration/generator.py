"""
Per-video infographic state machine.

NOT_STARTED -> PROCESSING -> COMPLETED | FAILED

A COMPLETED infographic short-circuits (no external calls). Otherwise the
record is upserted to PROCESSING before any external call, the four
pipeline steps run in order, and the record ends COMPLETED or FAILED.
Failures are recorded and re-raised; containment is the caller's job.
"""

from typing import Optional

from app.core import get_logger
from app.models.infographic import InfographicOptions
from app.models.status import InfographicStatus, StepLabel
from app.services.credentials import ApiCredentials
from app.services.infrastructure.storage import DataStore, InfographicRecord
from app.services.pipeline import (
    ContentAnalyzer,
    DesignPromptGenerator,
    ImageGenerator,
    TranscriptFetcher,
)

logger = get_logger(__name__, component="infographic_generator")


class InfographicGenerator:
    def __init__(
        self,
        store: DataStore,
        transcripts: Optional[TranscriptFetcher] = None,
        analyzer: Optional[ContentAnalyzer] = None,
        prompt_generator: Optional[DesignPromptGenerator] = None,
        image_generator: Optional[ImageGenerator] = None,
    ):
        self.store = store
        self.transcripts = transcripts or TranscriptFetcher(store.videos)
        self.analyzer = analyzer or ContentAnalyzer()
        self.prompt_generator = prompt_generator or DesignPromptGenerator()
        self.image_generator = image_generator or ImageGenerator()

    def _set_step(self, job_id: Optional[str], video_id: str, step: str) -> None:
        if job_id:
            self.store.jobs.update(job_id, current_step=step)
        logger.info(f"[{video_id}] {step}")

    async def generate(
        self,
        video_id: str,
        credentials: Optional[ApiCredentials],
        options: Optional[InfographicOptions] = None,
        job_id: Optional[str] = None,
    ) -> InfographicRecord:
        """
        Generate the infographic for one video.

        Args:
            video_id: Internal video id
            credentials: Keys to run with; required unless already COMPLETED
            options: Customization options (defaults apply when None)
            job_id: Job whose step label tracks progress, if any

        Returns:
            The COMPLETED infographic record

        Raises:
            ValueError: No credentials supplied (caller contract violation)
            Exception: Any step failure, after the record is marked FAILED
        """
        existing = self.store.infographics.get_by_video(video_id)
        if existing and existing.status is InfographicStatus.COMPLETED:
            logger.info("Infographic already completed", extra={"video_id": video_id})
            return existing

        if credentials is None:
            raise ValueError("API keys are required for infographic generation")

        self.store.infographics.upsert_status(video_id, InfographicStatus.PROCESSING)

        try:
            self._set_step(job_id, video_id, StepLabel.TRANSCRIPT)
            transcript = await self.transcripts.get(video_id, credentials.apify_api_token)

            self._set_step(job_id, video_id, StepLabel.ANALYSIS)
            analysis_report = await self.analyzer.analyze(transcript, credentials.gemini_api_key, options)

            self._set_step(job_id, video_id, StepLabel.DESIGN_PROMPT)
            design_prompt = await self.prompt_generator.generate(
                analysis_report, credentials.gemini_api_key, options
            )

            self._set_step(job_id, video_id, StepLabel.IMAGE)
            image_url = await self.image_generator.generate(design_prompt, credentials.atlas_cloud_api_key)

            self._set_step(job_id, video_id, StepLabel.SAVING)
            infographic = self.store.infographics.complete(
                video_id,
                image_url=image_url,
                analysis_report=analysis_report,
                design_prompt=design_prompt,
            )

            self._set_step(job_id, video_id, StepLabel.VIDEO_DONE)
            return infographic
        except Exception:
            self.store.infographics.upsert_status(video_id, InfographicStatus.FAILED)
            if job_id:
                self.store.jobs.update(job_id, current_step=StepLabel.VIDEO_FAILED)
            raise
