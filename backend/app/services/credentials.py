"""
Credential Resolver

Decides which API keys a request runs with:
    - PAID users run on the system keys from the environment
    - FREE users run on the keys stored on their account

Either way a request is rejected with a structured "missing keys" error when
a key it needs resolves to nothing. Resolution happens once per request,
before any pipeline work starts.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, Tuple

from app.config import get_system_api_keys
from app.core import get_logger, MissingKeysError
from app.services.infrastructure.storage import UserRecord

logger = get_logger(__name__, service="credentials")

FREE_PLAN_KEYS_MESSAGE = "The free plan requires you to add your own API keys in settings"
SYSTEM_KEYS_MESSAGE = "The service is not configured for this request yet, please contact support"

# Wire names used in the missingKeys payload
KEY_WIRE_NAMES = {
    "apify_api_token": "apifyApiToken",
    "gemini_api_key": "geminiApiKey",
    "atlas_cloud_api_key": "atlasCloudApiKey",
}


@dataclass(frozen=True)
class ApiCredentials:
    """Keys a job or request runs with. Never persisted, never logged."""
    apify_api_token: str = ""
    gemini_api_key: str = ""
    atlas_cloud_api_key: str = ""

    def __repr__(self) -> str:
        present = [f.name for f in fields(self) if getattr(self, f.name)]
        return f"ApiCredentials(present={present})"

    __str__ = __repr__


class Capability(str, Enum):
    """Named requirement sets"""
    PLAYLIST_EXTRACTION = "playlist_extraction"
    INFOGRAPHIC_GENERATION = "infographic_generation"

    @property
    def required_keys(self) -> Tuple[str, ...]:
        return CAPABILITY_KEYS[self]


CAPABILITY_KEYS: Dict[Capability, Tuple[str, ...]] = {
    Capability.PLAYLIST_EXTRACTION: ("apify_api_token",),
    Capability.INFOGRAPHIC_GENERATION: ("apify_api_token", "gemini_api_key", "atlas_cloud_api_key"),
}


class CredentialResolver:
    def resolve(self, user: UserRecord, capability: Capability) -> ApiCredentials:
        """
        Resolve the credentials for a user and capability.

        Raises:
            MissingKeysError: a key the capability needs is unset, in the
                system environment for PAID users or on the account for FREE
        """
        if user.plan.uses_system_keys():
            keys = get_system_api_keys()
            hint = SYSTEM_KEYS_MESSAGE
        else:
            keys = {name: getattr(user, name) or "" for name in KEY_WIRE_NAMES}
            hint = FREE_PLAN_KEYS_MESSAGE

        missing = {
            KEY_WIRE_NAMES[name]: not keys.get(name)
            for name in capability.required_keys
        }
        if any(missing.values()):
            error = MissingKeysError(missing, hint=hint)
            logger.warning(
                "Request rejected, API keys missing",
                extra={
                    "user_id": user.id,
                    "plan": user.plan.value,
                    "capability": capability.value,
                    "missing_key_names": error.missing,
                },
            )
            raise error

        return ApiCredentials(**{name: keys.get(name) or "" for name in KEY_WIRE_NAMES})
