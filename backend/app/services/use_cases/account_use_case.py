"""
Account use cases - sign-up, login and account settings.
"""

from app.core import (
    AuthenticationError,
    get_logger,
    hash_password,
    issue_auth_token,
    verify_password,
)
from app.models.auth import (
    AuthResponse,
    LoginRequest,
    SignupRequest,
    UpdateApiKeysRequest,
    UserOut,
)
from app.services.infrastructure.storage import DataStore, UserRecord

logger = get_logger(__name__, service="accounts")


class AccountService:
    def __init__(self, store: DataStore):
        self.store = store

    def signup(self, request: SignupRequest) -> AuthResponse:
        """New accounts start on the FREE plan."""
        user = self.store.users.create(
            email=request.email,
            password_hash=hash_password(request.password),
            name=request.name,
        )
        logger.info("User signed up", extra={"user_id": user.id})
        return AuthResponse(user=UserOut.from_record(user), token=issue_auth_token(user.id))

    def login(self, request: LoginRequest) -> AuthResponse:
        user = self.store.users.get_by_email(request.email)
        if user is None or not verify_password(request.password, user.password_hash):
            raise AuthenticationError("Invalid email or password")
        return AuthResponse(user=UserOut.from_record(user), token=issue_auth_token(user.id))

    def update_api_keys(self, user: UserRecord, request: UpdateApiKeysRequest) -> UserOut:
        updated = self.store.users.update_api_keys(
            user.id,
            apify_api_token=request.apify_api_token,
            gemini_api_key=request.gemini_api_key,
            atlas_cloud_api_key=request.atlas_cloud_api_key,
        )
        logger.info("User API keys updated", extra={"user_id": user.id})
        return UserOut.from_record(updated)

    def update_profile(self, user: UserRecord, name: str) -> UserOut:
        return UserOut.from_record(self.store.users.update_profile(user.id, name))
