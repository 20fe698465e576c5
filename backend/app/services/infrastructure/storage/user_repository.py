"""
User repository - accounts, plans and self-supplied API keys.
"""

from typing import Optional

from app.core import ConflictError, NotFoundError
from app.models.status import Plan

from .json_store import JsonRecordStore
from .records import UserRecord

API_KEY_FIELDS = ("apify_api_token", "gemini_api_key", "atlas_cloud_api_key")


class UserRepository:
    def __init__(self, store: JsonRecordStore[UserRecord]):
        self._store = store

    def create(
        self,
        email: str,
        password_hash: str,
        name: Optional[str] = None,
        plan: Plan = Plan.FREE,
    ) -> UserRecord:
        email = email.strip().lower()
        with self._store.lock:
            if self.get_by_email(email):
                raise ConflictError("User already exists")
            return self._store.save(UserRecord(email=email, password_hash=password_hash, name=name, plan=plan))

    def get(self, user_id: str) -> Optional[UserRecord]:
        return self._store.get(user_id)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        email = email.strip().lower()
        return self._store.find_one(lambda u: u.email == email)

    def _require(self, user_id: str) -> UserRecord:
        user = self._store.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def update_api_keys(self, user_id: str, **keys: Optional[str]) -> UserRecord:
        """Set stored keys. `None` leaves a key unchanged, a blank string clears it."""
        unknown = set(keys) - set(API_KEY_FIELDS)
        if unknown:
            raise ValueError(f"Unknown API key fields: {sorted(unknown)}")
        with self._store.lock:
            user = self._require(user_id)
            for name, value in keys.items():
                if value is None:
                    continue
                setattr(user, name, value.strip() or None)
            return self._store.save(user)

    def update_profile(self, user_id: str, name: str) -> UserRecord:
        with self._store.lock:
            user = self._require(user_id)
            user.name = name.strip()
            return self._store.save(user)
