"""
JWT Authentication utilities for Django Ninja.

Tokens carry the id of an ``AuthSession`` row, so signing out (revoking the
row) invalidates a token before its ``exp``.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import HttpRequest
from ninja.security import HttpBearer

from apps.auth.models import AuthSession
from apps.users.models import User


class AuthBearer(HttpBearer):
    """JWT Bearer token authentication backed by an active session."""

    def authenticate(self, request: HttpRequest, token: str) -> User | None:
        session = resolve_session(token)
        if not session:
            return None

        request.auth_user = session.user
        request.auth_session = session
        return session.user


def resolve_session(token: str) -> AuthSession | None:
    """Return the active session a token refers to, or None."""
    payload = verify_token(token)
    if not payload:
        return None

    session_id = payload.get("sessionId")
    user_id = payload.get("userId")
    if not session_id or not user_id:
        return None

    try:
        return (
            AuthSession.objects.active()
            .select_related("user")
            .filter(id=session_id, user_id=user_id)
            .first()
        )
    except (ValidationError, ValueError):
        # Malformed UUID in the payload
        return None


def session_from_request(request: HttpRequest) -> AuthSession | None:
    """Resolve the bearer session without requiring one (for getSession-style endpoints)."""
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return resolve_session(token.strip())


def get_session(request: HttpRequest) -> AuthSession | None:
    """Get the session attached by AuthBearer, if any."""
    return getattr(request, "auth_session", None)


def open_session(user: User) -> tuple[AuthSession, str]:
    """Create a session row for user and a JWT referencing it."""
    expires_at = datetime.now(timezone.utc) + timedelta(hours=settings.JWT_EXPIRE_HOURS)
    session = AuthSession.objects.create(user=user, expires_at=expires_at)
    return session, create_token(session)


def create_token(session: AuthSession) -> str:
    """Create JWT token for a session."""
    payload = {
        "userId": str(session.user_id),
        "sessionId": str(session.id),
        "email": session.user.email,
        "exp": session.expires_at,
        "iat": datetime.now(timezone.utc),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> dict[str, Any] | None:
    """Verify JWT token and return payload."""
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except jwt.InvalidTokenError:
        return None
