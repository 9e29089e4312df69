"""
Post model - the single published entity of the blog.
"""

import uuid
from urllib.parse import parse_qs, urlparse

from django.db import models
from apps.users.models import User

YOUTUBE_EMBED_URL = "https://www.youtube.com/embed/{video_id}"


class Post(models.Model):
    """Blog post model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    slug = models.CharField(max_length=255, unique=True)
    title = models.CharField(max_length=255)
    excerpt = models.TextField(blank=True, default="")
    # Rendered verbatim; only trusted authors write here.
    content = models.TextField(blank=True, default="")
    tags = models.JSONField(default=list, blank=True)
    cover_image = models.URLField(max_length=500, null=True, blank=True)
    video_url = models.URLField(max_length=500, null=True, blank=True, db_column="videoUrl")
    reading_time = models.PositiveIntegerField(default=1)
    views = models.PositiveIntegerField(default=0)
    date = models.DateField()
    author = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True, related_name="posts")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "posts"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.title

    @property
    def tag_list(self) -> list[str]:
        """Tags as a list, tolerating legacy comma-separated rows."""
        if isinstance(self.tags, str):
            return [t.strip() for t in self.tags.split(",") if t.strip()]
        return list(self.tags or [])

    @property
    def video_embed_url(self) -> str | None:
        """YouTube embed URL for video_url, or None for image posts."""
        if not self.video_url:
            return None
        video_id = parse_qs(urlparse(self.video_url).query).get("v", [""])[0]
        return YOUTUBE_EMBED_URL.format(video_id=video_id)
