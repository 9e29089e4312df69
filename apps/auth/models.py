"""
Auth session model - one row per successful sign-in.
"""

import uuid
from datetime import datetime, timezone

from django.db import models
from apps.users.models import User


class AuthSessionQuerySet(models.QuerySet):
    def active(self):
        """Sessions that are neither revoked nor expired."""
        return self.filter(
            revoked_at__isnull=True,
            expires_at__gt=datetime.now(timezone.utc),
            user__is_active=True,
        )


class AuthSession(models.Model):
    """Proof of authenticated identity, referenced by the JWT ``sessionId`` claim."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="sessions", db_column="userId")
    expires_at = models.DateTimeField(db_column="expiresAt")
    revoked_at = models.DateTimeField(null=True, blank=True, db_column="revokedAt")
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")

    objects = AuthSessionQuerySet.as_manager()

    class Meta:
        db_table = "auth_sessions"

    def __str__(self) -> str:
        return f"Session for {self.user.email}"

    @property
    def is_active(self) -> bool:
        return self.revoked_at is None and self.expires_at > datetime.now(timezone.utc)

    def revoke(self) -> None:
        self.revoked_at = datetime.now(timezone.utc)
        self.save(update_fields=["revoked_at"])
