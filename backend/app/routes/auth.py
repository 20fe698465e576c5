"""
Authentication and account routes.
"""

from fastapi import APIRouter, Request

from ..models import (
    LoginRequest,
    SignupRequest,
    UpdateApiKeysRequest,
    UpdateProfileRequest,
    UserOut,
    envelope,
)
from ..services.infrastructure.storage import get_datastore
from ..services.use_cases import AccountService
from .common import require_current_user

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", status_code=201)
async def signup(payload: SignupRequest):
    """Create a FREE account and return a bearer token."""
    return envelope(AccountService(get_datastore()).signup(payload))


@router.post("/login")
async def login(payload: LoginRequest):
    return envelope(AccountService(get_datastore()).login(payload))


@router.get("/me")
async def me(request: Request):
    """Current user, with which API keys are stored (never the keys themselves)."""
    return envelope(UserOut.from_record(require_current_user(request)))


@router.put("/api-keys")
async def update_api_keys(payload: UpdateApiKeysRequest, request: Request):
    user = require_current_user(request)
    updated = AccountService(get_datastore()).update_api_keys(user, payload)
    return envelope(updated, message="API keys updated successfully")


@router.put("/profile")
async def update_profile(payload: UpdateProfileRequest, request: Request):
    user = require_current_user(request)
    return envelope(AccountService(get_datastore()).update_profile(user, payload.name))
