"""
Pytest configuration and fixtures.
"""

import itertools
import json
from datetime import date, datetime, timedelta, timezone

import pytest
from django.test import Client

from apps.blog.models import Post
from apps.users.models import User
from utils.auth import open_session


class APIClient:
    """Wrapper around Django test client for API testing."""

    def __init__(self):
        self.client = Client()

    def _make_request(self, method, path, data=None, headers=None):
        """Make HTTP request."""
        kwargs = {"content_type": "application/json"}

        if headers:
            kwargs.update(headers)

        if data is not None:
            kwargs["data"] = json.dumps(data, default=str)

        # Prepend /api if not present
        if not path.startswith("/api"):
            path = f"/api{path}"

        response = getattr(self.client, method.lower())(path, **kwargs)
        return APIResponse(response)

    def get(self, path, headers=None, **kwargs):
        return self._make_request("GET", path, headers=headers)

    def post(self, path, json=None, headers=None, **kwargs):
        return self._make_request("POST", path, data=json, headers=headers)

    def put(self, path, json=None, headers=None, **kwargs):
        return self._make_request("PUT", path, data=json, headers=headers)

    def delete(self, path, headers=None, **kwargs):
        return self._make_request("DELETE", path, headers=headers)


class APIResponse:
    """Wrapper around Django response for easier testing."""

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code

    def json(self):
        return json.loads(self._response.content)


@pytest.fixture
def api_client():
    """API test client."""
    return APIClient()


@pytest.fixture
def author(db):
    """Create an author account for testing."""
    return User.objects.create_user(
        email="author@test.com",
        password="Author@123456",
        name="Richky L.",
    )


@pytest.fixture
def other_author(db):
    return User.objects.create_user(
        email="editor@test.com",
        password="Editor@123456",
        name="Editor",
    )


@pytest.fixture
def session(author):
    """An active session for the author."""
    auth_session, _ = open_session(author)
    return auth_session


@pytest.fixture
def auth_headers(author):
    """Get auth headers for the author."""
    _, token = open_session(author)
    return {"HTTP_AUTHORIZATION": f"Bearer {token}"}


@pytest.fixture
def make_post(author):
    """
    Factory for posts stored in the database.

    Each post gets a created_at one minute after the previous one, so
    newest-first ordering is deterministic.
    """
    clock = itertools.count()
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _make_post(slug, **fields):
        fields.setdefault("title", slug.replace("-", " ").title())
        fields.setdefault("date", date(2024, 1, 15))
        fields.setdefault("author", author)
        post = Post.objects.create(slug=slug, **fields)
        created_at = base + timedelta(minutes=next(clock))
        Post.objects.filter(pk=post.pk).update(created_at=created_at)
        post.created_at = created_at
        return post

    return _make_post


@pytest.fixture
def draft_payload():
    """A valid create/update request body."""
    return {
        "slug": "tax-strategies-101",
        "title": "Tax strategies 101",
        "excerpt": "Basics of planning ahead",
        "content": "word " * 450,
        "tags": ["Tax", " Planning ", ""],
        "coverImage": "https://cdn.example.com/tax.png",
        "date": "2024-03-01",
    }
