"""
Admin API endpoints: dashboard stats and post CRUD for signed-in authors.
"""

from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from utils.auth import AuthBearer, get_session
from apps.blog import services
from apps.blog.repository import PostRepository
from apps.blog.schemas import PostOut, PostDetailOut, PostDraftIn
from apps.blog.search import collection_stats
from .schemas import AdminStatsOut, MessageOut

router = Router(auth=AuthBearer())


@router.get("/stats", response=AdminStatsOut)
def get_stats(request: HttpRequest):
    """Get admin dashboard stats."""
    stats = collection_stats(PostRepository().fetch_all())
    return AdminStatsOut(
        totalPosts=stats.total_posts,
        totalViews=stats.total_views,
        avgReadingTime=stats.avg_reading_time,
    )


@router.get("/posts", response=list[PostOut])
def list_posts(request: HttpRequest):
    """List all posts, newest first."""
    return PostRepository().fetch_all()


@router.get("/posts/{slug}", response=PostDetailOut)
def get_post(request: HttpRequest, slug: str):
    """Load a post for editing. Does not count a view."""
    post = PostRepository().fetch_by_slug(slug)
    if post is None:
        raise HttpError(404, "Post not found")
    return post


@router.post("/posts", response=PostDetailOut)
def create_post(request: HttpRequest, data: PostDraftIn):
    """Create a new post."""
    return services.create_post(data, session=get_session(request))


@router.put("/posts/{slug}", response=PostDetailOut)
def update_post(request: HttpRequest, slug: str, data: PostDraftIn):
    """Update a post."""
    return services.update_post(slug, data, session=get_session(request))


@router.delete("/posts/{slug}", response=MessageOut)
def delete_post(request: HttpRequest, slug: str):
    """Delete a post."""
    services.delete_post(slug, session=get_session(request))
    return MessageOut(message="Post deleted")
