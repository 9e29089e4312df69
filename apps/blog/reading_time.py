"""
Reading time estimation from raw post content.
"""

import math

from django.conf import settings

DEFAULT_WORDS_PER_MINUTE = 200


def count_words(text: str | None) -> int:
    """Count whitespace-separated words."""
    if not text:
        return 0
    return len(text.split())


def estimate(content: str | None, words_per_minute: int | None = None) -> int:
    """Estimate minutes to read content, never less than 1."""
    wpm = words_per_minute or getattr(settings, "BLOG_WORDS_PER_MINUTE", DEFAULT_WORDS_PER_MINUTE)
    return max(1, math.ceil(count_words(content) / wpm))
