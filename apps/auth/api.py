"""
Auth API endpoints: sign in, sign out and session lookup.
"""

import logging
from datetime import datetime, timezone

from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from apps.users.models import User
from apps.users.schemas import UserProfileOut
from utils.auth import AuthBearer, get_session, open_session, session_from_request
from .schemas import LoginIn, AuthOut, SessionOut, MessageOut

logger = logging.getLogger(__name__)

router = Router()


@router.post("/login", response=AuthOut)
def login(request: HttpRequest, data: LoginIn):
    """Login with email and password."""
    email = data.email.lower().strip()

    user = User.objects.filter(email=email, is_active=True).first()
    if not user or not user.check_password(data.password):
        logger.info(f"[Auth] Failed login for {email}")
        raise HttpError(401, "Invalid email or password")

    session, token = open_session(user)
    user.last_login = datetime.now(timezone.utc)
    user.save(update_fields=["last_login"])

    logger.info(f"[Auth] Session {session.id} opened for {email}")
    return AuthOut(user=UserProfileOut.from_orm(user), token=token, expiresAt=session.expires_at)


@router.post("/logout", response=MessageOut, auth=AuthBearer())
def logout(request: HttpRequest):
    """Revoke the current session."""
    session = get_session(request)
    session.revoke()
    logger.info(f"[Auth] Session {session.id} revoked")
    return MessageOut(message="Logged out")


@router.get("/session", response=SessionOut | None)
def current_session(request: HttpRequest):
    """Return the active session for the bearer token, or null."""
    session = session_from_request(request)
    if not session:
        return None
    return SessionOut(
        id=session.id,
        user=UserProfileOut.from_orm(session.user),
        expiresAt=session.expires_at,
    )
