"""
Request helpers shared by the route modules.
"""

from fastapi import Request

from ..core import AuthenticationError, extract_bearer_token, verify_auth_token
from ..services.infrastructure.storage import UserRecord, get_datastore


def require_current_user(request: Request) -> UserRecord:
    """Resolve the bearer token to a user, or raise AuthenticationError (401)."""
    token = extract_bearer_token(request)
    if not token:
        raise AuthenticationError("Authentication required")
    user_id = verify_auth_token(token)
    if not user_id:
        raise AuthenticationError("Invalid or expired token")
    user = get_datastore().users.get(user_id)
    if user is None:
        raise AuthenticationError("User not found")
    return user
