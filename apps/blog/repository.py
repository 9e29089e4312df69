"""
Data access for the ``posts`` table.

Reads used by public pages degrade to empty results on database errors;
writes let the error propagate so the admin caller can report it.
"""

import logging
from typing import Any

from django.db import DatabaseError, transaction
from django.db.models import F

from .models import Post

logger = logging.getLogger(__name__)


class PostRepository:
    """Thin wrapper over the Post ORM queries the blog needs."""

    def fetch_all(self) -> list[Post]:
        """All posts, newest first. Returns [] on read failure."""
        try:
            return list(Post.objects.order_by("-created_at"))
        except DatabaseError as e:
            logger.error(f"[Blog] Error fetching posts: {e}")
            return []

    def fetch_by_slug(self, slug: str) -> Post | None:
        """A single post, or None when missing or unreadable."""
        try:
            return Post.objects.filter(slug=slug).first()
        except DatabaseError as e:
            logger.error(f"[Blog] Error fetching post by slug {slug!r}: {e}")
            return None

    def read_views(self, slug: str) -> int | None:
        return Post.objects.filter(slug=slug).values_list("views", flat=True).first()

    def write_views(self, slug: str, views: int) -> int:
        return Post.objects.filter(slug=slug).update(views=views)

    def increment_views(self, slug: str) -> int:
        return Post.objects.filter(slug=slug).update(views=F("views") + 1)

    def insert(self, fields: dict[str, Any]) -> Post:
        with transaction.atomic():
            return Post.objects.create(**fields)

    def update(self, slug: str, fields: dict[str, Any]) -> Post | None:
        """Replace fields on the post at slug. Returns None if no row matched."""
        with transaction.atomic():
            updated = Post.objects.filter(slug=slug).update(**fields)
        if not updated:
            return None
        return Post.objects.get(slug=fields.get("slug", slug))

    def delete(self, slug: str) -> bool:
        with transaction.atomic():
            deleted, _ = Post.objects.filter(slug=slug).delete()
        return deleted > 0
