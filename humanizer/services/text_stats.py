"""Word count and reading time for response stats."""

import math

from humanizer.config import settings


def count_words(text: str) -> int:
    return len(text.split())


def reading_time(text: str, words_per_minute: int = settings.reading_words_per_minute) -> int:
    """Minutes to read `text`, never less than 1."""
    return max(1, math.ceil(count_words(text) / words_per_minute))
