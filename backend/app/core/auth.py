"""
Authentication helpers.

This module provides:
- Password hashing and verification (PBKDF2)
- Stateless signed bearer tokens bound to a user id
- Bearer token extraction from a request
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import time

from fastapi import Request

from app.config import get_auth_secret, get_token_max_age_seconds

AUTH_BEARER_PREFIX = "Bearer "
PASSWORD_HASH_ITERATIONS = 200_000


def hash_password(password: str, *, salt: str | None = None) -> str:
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), PASSWORD_HASH_ITERATIONS)
    return f"{salt}${digest.hex()}"


def verify_password(password: str, stored_hash: str) -> bool:
    if not stored_hash or "$" not in stored_hash:
        return False
    salt, _ = stored_hash.split("$", 1)
    return hmac.compare_digest(hash_password(password, salt=salt), stored_hash)


def _sign(payload: str) -> str:
    mac = hmac.new(get_auth_secret().encode("utf-8"), payload.encode("utf-8"), hashlib.sha256).digest()
    return base64.urlsafe_b64encode(mac).decode("ascii").rstrip("=")


def issue_auth_token(user_id: str, *, issued_at: int | None = None) -> str:
    """Token format: `<user_id>.<issued_at>.<signature>`"""
    issued_at = int(time.time()) if issued_at is None else issued_at
    payload = f"{user_id}.{issued_at}"
    return f"{payload}.{_sign(payload)}"


def verify_auth_token(token: str) -> str | None:
    """Return the user id the token was issued for, or None if invalid/expired."""
    try:
        user_id, issued_raw, signature = token.rsplit(".", 2)
        issued_at = int(issued_raw)
    except ValueError:
        return None
    if not user_id:
        return None
    if not hmac.compare_digest(signature, _sign(f"{user_id}.{issued_raw}")):
        return None
    if time.time() - issued_at > get_token_max_age_seconds():
        return None
    return user_id


def extract_bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization")
    if not header or not header.startswith(AUTH_BEARER_PREFIX):
        return None
    return header[len(AUTH_BEARER_PREFIX):].strip() or None
