"""
Blog schemas for API.
"""

import datetime as dt
from uuid import UUID

from ninja import Schema
from pydantic import Field, ConfigDict, field_validator, model_validator
from pydantic_core import PydanticCustomError


def split_tags(value):
    """Accept tags as a list or a comma-separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        return value.split(",")
    return value


class PostOut(Schema):
    """Post list output - camelCase for frontend."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    slug: str
    title: str
    excerpt: str = ""
    tags: list[str] = []
    coverImage: str | None = Field(validation_alias="cover_image", default=None)
    videoUrl: str | None = Field(validation_alias="video_url", default=None)
    readingTime: int = Field(validation_alias="reading_time", default=1)
    views: int = 0
    date: dt.date
    authorId: UUID | None = Field(validation_alias="author_id", default=None)
    createdAt: dt.datetime = Field(validation_alias="created_at")
    updatedAt: dt.datetime = Field(validation_alias="updated_at")

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, value):
        return [t.strip() for t in split_tags(value) if t and t.strip()]


class PostDetailOut(PostOut):
    """Post detail output with content."""

    content: str = ""
    videoEmbedUrl: str | None = Field(validation_alias="video_embed_url", default=None)


class BlogStatsOut(Schema):
    totalPosts: int
    totalViews: int
    avgReadingTime: int


class BlogPageOut(Schema):
    """One render of the blog index: visible posts plus filter state."""

    posts: list[PostOut]
    query: str
    tag: str
    matching: int
    visibleCount: int
    hasMore: bool
    isEmpty: bool
    tags: list[str]
    stats: BlogStatsOut


class PostDraftIn(Schema):
    """
    Post create/update input.

    ``readingTime`` and ``authorId`` are accepted but ignored: both are
    derived server-side. Any other unknown field is rejected.
    """

    model_config = ConfigDict(extra="forbid")

    slug: str
    title: str
    excerpt: str = ""
    content: str = ""
    tags: list[str] = []
    coverImage: str | None = None
    videoUrl: str | None = None
    date: dt.date | None = None
    readingTime: int | None = None
    authorId: str | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def parse_tags(cls, value):
        return split_tags(value)

    @field_validator("coverImage", "videoUrl")
    @classmethod
    def blank_to_none(cls, value):
        if value is not None and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def single_media(self):
        if self.coverImage and self.videoUrl:
            raise PydanticCustomError("media_conflict", "A post has either a cover image or a video, not both")
        return self
