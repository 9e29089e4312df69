"""
Tests for view counting on post detail loads.
"""

import threading
from unittest.mock import MagicMock

import pytest
from django.db import DatabaseError

from apps.blog.counter import ViewCounter
from apps.blog.models import Post


class InMemoryViews:
    """Stand-in repository holding view counts in a dict."""

    def __init__(self, views=None, barrier=None):
        self.views = dict(views or {})
        self.barrier = barrier
        self.lock = threading.Lock()

    def read_views(self, slug):
        with self.lock:
            value = self.views.get(slug)
        if self.barrier is not None:
            # Hold every reader until all have read, as concurrent page loads can.
            self.barrier.wait(timeout=5)
        return value

    def write_views(self, slug, views):
        with self.lock:
            if slug in self.views:
                self.views[slug] = views
                return 1
            return 0

    def increment_views(self, slug):
        with self.lock:
            self.views[slug] += 1
            return 1


def test_bump_reads_then_writes_plus_one():
    repo = InMemoryViews({"post-a": 10})
    ViewCounter(repo, atomic=False).bump("post-a")
    assert repo.views["post-a"] == 11


def test_read_failure_counts_from_zero():
    repo = MagicMock()
    repo.read_views.side_effect = DatabaseError("connection reset")

    ViewCounter(repo, atomic=False).bump("post-a")

    repo.write_views.assert_called_once_with("post-a", 1)


def test_missing_value_counts_from_zero():
    repo = MagicMock()
    repo.read_views.return_value = None

    ViewCounter(repo, atomic=False).bump("post-a")

    repo.write_views.assert_called_once_with("post-a", 1)


def test_write_failure_is_swallowed():
    repo = MagicMock()
    repo.read_views.return_value = 3
    repo.write_views.side_effect = DatabaseError("read-only replica")

    ViewCounter(repo, atomic=False).bump("post-a")  # does not raise


def test_concurrent_bumps_lose_an_update():
    """
    Two page loads racing on the same post both read 10 and both write 11.
    Read-then-write counting is last-writer-wins; this is the documented
    behavior of the non-atomic mode.
    """
    repo = InMemoryViews({"post-a": 10}, barrier=threading.Barrier(2))
    counter = ViewCounter(repo, atomic=False)

    threads = [threading.Thread(target=counter.bump, args=("post-a",)) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert repo.views["post-a"] == 11


def test_atomic_mode_counts_every_bump():
    repo = InMemoryViews({"post-a": 10})
    counter = ViewCounter(repo, atomic=True)

    counter.bump("post-a")
    counter.bump("post-a")

    assert repo.views["post-a"] == 12


def test_atomic_mode_swallows_errors():
    repo = MagicMock()
    repo.increment_views.side_effect = DatabaseError("boom")

    ViewCounter(repo, atomic=True).bump("post-a")

    repo.read_views.assert_not_called()


def test_mode_defaults_from_settings(settings):
    settings.BLOG_ATOMIC_VIEW_COUNT = True
    assert ViewCounter(MagicMock()).atomic is True
    settings.BLOG_ATOMIC_VIEW_COUNT = False
    assert ViewCounter(MagicMock()).atomic is False


@pytest.mark.django_db
class TestViewCounterDatabase:
    def test_bump_persists(self, make_post):
        make_post("post-a", views=10)
        ViewCounter(atomic=False).bump("post-a")
        assert Post.objects.get(slug="post-a").views == 11

    def test_atomic_bump_persists(self, make_post):
        make_post("post-a", views=10)
        ViewCounter(atomic=True).bump("post-a")
        assert Post.objects.get(slug="post-a").views == 11

    def test_unknown_slug_is_a_no_op(self, make_post):
        make_post("post-a", views=10)
        ViewCounter(atomic=False).bump("missing")
        assert Post.objects.get(slug="post-a").views == 10
