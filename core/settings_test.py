"""
Test settings: in-memory SQLite instead of PostgreSQL.
"""

from .settings import *  # noqa: F401,F403

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

BLOG_ATOMIC_VIEW_COUNT = False
