"""
Admin schemas for API.
"""

from ninja import Schema


class AdminStatsOut(Schema):
    """Admin dashboard stats."""

    totalPosts: int
    totalViews: int
    avgReadingTime: int


class MessageOut(Schema):
    message: str
