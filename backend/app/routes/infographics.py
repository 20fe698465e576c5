"""
Infographic generation and job status routes.

Generation returns 202 immediately; clients poll the job for progress.
"""

from fastapi import APIRouter, BackgroundTasks, Request

from ..models import GenerateInfographicRequest, envelope
from ..services.infrastructure.orchestration import get_orchestrator
from ..services.infrastructure.storage import get_datastore
from ..services.use_cases import GenerationCommand, GenerationUseCase, InfographicQueries
from .common import require_current_user

router = APIRouter(prefix="/api/infographic", tags=["infographics"])


@router.post("/generate", status_code=202)
async def generate(payload: GenerateInfographicRequest, request: Request, background_tasks: BackgroundTasks):
    """Start generation for selected videos (needs the infographic-generation credentials)."""
    user = require_current_user(request)
    use_case = GenerationUseCase(get_datastore(), get_orchestrator())
    accepted = await use_case.execute(GenerationCommand(
        user=user,
        playlist_id=payload.playlist_id,
        video_ids=payload.video_ids,
        options=payload.options,
        background_tasks=background_tasks,
    ))
    return envelope(accepted)


@router.get("/job/{job_id}")
async def get_job_status(job_id: str, request: Request):
    require_current_user(request)
    return envelope(InfographicQueries(get_datastore()).get_job(job_id))


# Declared before /{video_id} so "jobs" is not taken for a video id
@router.get("/jobs")
async def list_jobs(request: Request):
    user = require_current_user(request)
    return envelope(InfographicQueries(get_datastore()).list_user_jobs(user.id))


@router.get("/{video_id}")
async def get_infographic(video_id: str, request: Request):
    require_current_user(request)
    return envelope(InfographicQueries(get_datastore()).get_infographic(video_id))
