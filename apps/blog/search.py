"""
In-memory search, tag filtering and "load more" pagination over posts.

Everything here works on an already-fetched list of posts, so nothing in this
module touches the database or can fail on I/O. Posts only need ``title``,
``excerpt``, ``tags``, ``views`` and ``reading_time`` attributes.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable

from django.conf import settings

DEFAULT_PAGE_SIZE = 6


def _tags(post: Any) -> list[str]:
    tags = getattr(post, "tag_list", None)
    if tags is None:
        tags = post.tags or []
    return tags


def matches_query(post: Any, query: str) -> bool:
    """Case-insensitive substring match on title, excerpt or any tag."""
    if not query:
        return True
    needle = query.lower()
    return (
        needle in (post.title or "").lower()
        or needle in (post.excerpt or "").lower()
        or any(needle in tag.lower() for tag in _tags(post))
    )


def matches_tag(post: Any, tag: str) -> bool:
    """Exact membership of tag in the post's tags."""
    if not tag:
        return True
    return tag in _tags(post)


def apply_filters(posts: Iterable[Any], query: str = "", active_tag: str = "") -> list[Any]:
    """Posts matching both query and tag, in their original order."""
    return [p for p in posts if matches_query(p, query) and matches_tag(p, active_tag)]


def distinct_tags(posts: Iterable[Any]) -> list[str]:
    """Every tag used by any post, in order of first appearance."""
    seen: dict[str, None] = {}
    for post in posts:
        for tag in _tags(post):
            seen.setdefault(tag, None)
    return list(seen)


@dataclass(frozen=True)
class CollectionStats:
    total_posts: int
    total_views: int
    avg_reading_time: int


def collection_stats(posts: Iterable[Any]) -> CollectionStats:
    """Post count, summed views and ceiling of the mean reading time."""
    posts = list(posts)
    total_views = sum(p.views or 0 for p in posts)
    if not posts:
        return CollectionStats(total_posts=0, total_views=total_views, avg_reading_time=0)
    avg = math.ceil(sum(p.reading_time or 0 for p in posts) / len(posts))
    return CollectionStats(total_posts=len(posts), total_views=total_views, avg_reading_time=avg)


class PostBrowser:
    """
    Search state for the blog index page.

    Holds the full post list plus the current query, tag filter and how many
    matching posts are visible. Changing the query or tag resets the visible
    count to one page; ``load_more`` reveals one more page.
    """

    def __init__(self, posts: Iterable[Any], page_size: int | None = None):
        self.all_posts = list(posts)
        self.page_size = page_size or getattr(settings, "BLOG_PAGE_SIZE", DEFAULT_PAGE_SIZE)
        self.query = ""
        self.active_tag = ""
        self.visible_count = self.page_size
        self.matching = list(self.all_posts)

    def search(self, query: str = "", tag: str = "") -> list[Any]:
        """Apply query and tag, resetting pagination."""
        self.query = query or ""
        self.active_tag = tag or ""
        self.matching = apply_filters(self.all_posts, self.query, self.active_tag)
        self.visible_count = self.page_size
        return self.matching

    def set_query(self, query: str) -> list[Any]:
        return self.search(query, self.active_tag)

    def set_tag(self, tag: str) -> list[Any]:
        return self.search(self.query, tag)

    def clear_filters(self) -> list[Any]:
        return self.search("", "")

    def load_more(self) -> None:
        self.visible_count += self.page_size

    def reveal_pages(self, pages: int) -> None:
        """Show the first pages of results, as if load_more ran pages - 1 times."""
        needed = max(1, math.ceil(len(self.matching) / self.page_size))
        self.visible_count = self.page_size * min(max(pages, 1), needed)

    @property
    def visible(self) -> list[Any]:
        return self.matching[: self.visible_count]

    @property
    def has_more(self) -> bool:
        return self.visible_count < len(self.matching)

    @property
    def is_empty(self) -> bool:
        return not self.matching

    @property
    def tags(self) -> list[str]:
        return distinct_tags(self.all_posts)

    @property
    def stats(self) -> CollectionStats:
        return collection_stats(self.all_posts)
