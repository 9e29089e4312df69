"""
Public blog API endpoints: index with search, featured posts, tags, post detail.
"""

from django.conf import settings
from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from .repository import PostRepository
from .schemas import PostOut, PostDetailOut, BlogPageOut, BlogStatsOut
from .search import PostBrowser, distinct_tags
from .services import view_post

router = Router()


@router.get("/", response=BlogPageOut)
def browse_posts(request: HttpRequest, q: str = "", tag: str = "", pages: int = 1):
    """
    Blog index. ``q`` searches title, excerpt and tags; ``tag`` filters by exact
    tag; ``pages`` is how many pages of results are revealed (1 + load-more clicks).
    """
    browser = PostBrowser(PostRepository().fetch_all())
    browser.search(q, tag)
    browser.reveal_pages(pages)

    stats = browser.stats
    return BlogPageOut(
        posts=[PostOut.from_orm(p) for p in browser.visible],
        query=browser.query,
        tag=browser.active_tag,
        matching=len(browser.matching),
        visibleCount=min(browser.visible_count, len(browser.matching)),
        hasMore=browser.has_more,
        isEmpty=browser.is_empty,
        tags=browser.tags[: settings.BLOG_TAG_BAR_LIMIT],
        stats=BlogStatsOut(
            totalPosts=stats.total_posts,
            totalViews=stats.total_views,
            avgReadingTime=stats.avg_reading_time,
        ),
    )


# IMPORTANT: fixed paths MUST be before /{slug}
@router.get("/featured", response=list[PostOut])
def featured_posts(request: HttpRequest):
    """Newest posts for the home page."""
    return PostRepository().fetch_all()[: settings.BLOG_FEATURED_COUNT]


@router.get("/tags", response=list[str])
def list_tags(request: HttpRequest):
    """Every tag in use, in order of first appearance."""
    return distinct_tags(PostRepository().fetch_all())


@router.get("/{slug}", response=PostDetailOut)
def get_post(request: HttpRequest, slug: str):
    """Get a post by slug, counting the view."""
    post = view_post(slug)
    if post is None:
        raise HttpError(404, "Post not found")
    return post
