"""
View counting for post detail pages.

The default mode reads the current count and writes count + 1 with no
concurrency guard: two readers that load the same post at the same time can
both read N and both write N + 1, losing one view. Set
``BLOG_ATOMIC_VIEW_COUNT`` to increment at the storage layer instead.
"""

import logging

from django.conf import settings
from django.db import DatabaseError

from .repository import PostRepository

logger = logging.getLogger(__name__)


class ViewCounter:
    """Increments ``views`` once per detail page load."""

    def __init__(self, repository: PostRepository | None = None, atomic: bool | None = None):
        self.repository = repository or PostRepository()
        if atomic is None:
            atomic = getattr(settings, "BLOG_ATOMIC_VIEW_COUNT", False)
        self.atomic = atomic

    def bump(self, slug: str) -> None:
        """Count one view of slug. Never raises on storage errors."""
        if self.atomic:
            try:
                self.repository.increment_views(slug)
            except DatabaseError as e:
                logger.warning(f"[ViewCounter] Atomic increment failed for {slug!r}: {e}")
            return

        current = self.current_views(slug)
        try:
            self.repository.write_views(slug, current + 1)
        except DatabaseError as e:
            logger.warning(f"[ViewCounter] Writing views failed for {slug!r}: {e}")

    def current_views(self, slug: str) -> int:
        """Stored view count, or 0 when it cannot be read."""
        try:
            views = self.repository.read_views(slug)
        except DatabaseError as e:
            logger.warning(f"[ViewCounter] Reading views failed for {slug!r}: {e}")
            return 0
        return views or 0
