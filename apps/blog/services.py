"""
Post write operations for the admin area, and the detail-page read flow.

Callers pass the authenticated session explicitly. Preconditions (session,
slug shape) are checked before anything touches the database.
"""

import logging
import re
from typing import Any

from django.db import DatabaseError
from django.utils import timezone

from apps.auth.models import AuthSession
from .counter import ViewCounter
from .errors import InvalidSlug, PostNotFound, PostWriteError, SessionRequired
from .models import Post
from .reading_time import estimate
from .repository import PostRepository
from .schemas import PostDraftIn

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r"\s")

# Fixed routes under /api/blog/ that a post slug would be shadowed by
RESERVED_SLUGS = frozenset({"featured", "tags"})


def require_session(session: AuthSession | None) -> AuthSession:
    if session is None or not session.is_active:
        raise SessionRequired()
    return session


def validate_slug(slug: str) -> str:
    if not slug or WHITESPACE.search(slug):
        raise InvalidSlug()
    if slug in RESERVED_SLUGS:
        raise InvalidSlug(f"Slug '{slug}' is reserved. Choose another.")
    return slug


def normalize_tags(tags: list[str]) -> list[str]:
    return [t.strip() for t in tags if t and t.strip()]


def build_fields(draft: PostDraftIn, session: AuthSession) -> dict[str, Any]:
    """Persisted column values for a draft. Derived fields ignore client input."""
    fields = {
        "slug": draft.slug,
        "title": draft.title,
        "excerpt": draft.excerpt,
        "content": draft.content,
        "tags": normalize_tags(draft.tags),
        "cover_image": draft.coverImage,
        "video_url": draft.videoUrl,
        "reading_time": estimate(draft.content),
        "author_id": session.user_id,
    }
    if draft.date is not None:
        fields["date"] = draft.date
    return fields


def create_post(
    draft: PostDraftIn,
    session: AuthSession | None,
    repository: PostRepository | None = None,
) -> Post:
    """Insert a new post authored by the session's user."""
    session = require_session(session)
    validate_slug(draft.slug)
    repository = repository or PostRepository()

    fields = build_fields(draft, session)
    fields.setdefault("date", timezone.localdate())

    logger.info(f"[Blog] Inserting post {draft.slug!r}")
    try:
        return repository.insert(fields)
    except DatabaseError as e:
        logger.error(f"[Blog] Insert failed for {draft.slug!r}: {e}")
        raise PostWriteError(str(e)) from e


def update_post(
    slug: str,
    draft: PostDraftIn,
    session: AuthSession | None,
    repository: PostRepository | None = None,
) -> Post:
    """Replace the editable fields of the post at slug."""
    session = require_session(session)
    validate_slug(draft.slug)
    repository = repository or PostRepository()

    fields = build_fields(draft, session)
    fields["updated_at"] = timezone.now()

    logger.info(f"[Blog] Updating post {slug!r}")
    try:
        post = repository.update(slug, fields)
    except DatabaseError as e:
        logger.error(f"[Blog] Update failed for {slug!r}: {e}")
        raise PostWriteError(str(e)) from e

    if post is None:
        raise PostNotFound()
    return post


def delete_post(
    slug: str,
    session: AuthSession | None,
    repository: PostRepository | None = None,
) -> None:
    """Delete the post at slug."""
    require_session(session)
    repository = repository or PostRepository()

    logger.info(f"[Blog] Deleting post {slug!r}")
    try:
        deleted = repository.delete(slug)
    except DatabaseError as e:
        logger.error(f"[Blog] Delete failed for {slug!r}: {e}")
        raise PostWriteError(str(e)) from e

    if not deleted:
        raise PostNotFound()


def view_post(
    slug: str,
    repository: PostRepository | None = None,
    counter: ViewCounter | None = None,
) -> Post | None:
    """Count a view, then load the post. None means not found."""
    repository = repository or PostRepository()
    counter = counter or ViewCounter(repository)
    counter.bump(slug)
    return repository.fetch_by_slug(slug)
