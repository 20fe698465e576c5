"""
API schemas for authentication and account endpoints
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .common import CamelModel
from .status import Plan


class SignupRequest(CamelModel):
    email: str = Field(min_length=3)
    password: str = Field(min_length=6)
    name: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _email_shape(cls, value: str) -> str:
        value = value.strip().lower()
        if "@" not in value:
            raise ValueError("Invalid email address")
        return value


class LoginRequest(CamelModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class UpdateApiKeysRequest(CamelModel):
    """Blank strings clear a stored key; omitted keys are left unchanged"""
    apify_api_token: Optional[str] = None
    gemini_api_key: Optional[str] = None
    atlas_cloud_api_key: Optional[str] = None


class UpdateProfileRequest(CamelModel):
    name: str = Field(min_length=1)


class HasApiKeys(CamelModel):
    apify_api_token: bool
    gemini_api_key: bool
    atlas_cloud_api_key: bool


class UserOut(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    plan: Plan
    has_api_keys: HasApiKeys
    created_at: datetime

    @classmethod
    def from_record(cls, user) -> "UserOut":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            plan=user.plan,
            has_api_keys=HasApiKeys(
                apify_api_token=bool(user.apify_api_token),
                gemini_api_key=bool(user.gemini_api_key),
                atlas_cloud_api_key=bool(user.atlas_cloud_api_key),
            ),
            created_at=user.created_at,
        )


class AuthResponse(CamelModel):
    user: UserOut
    token: str
