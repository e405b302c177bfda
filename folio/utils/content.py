import math

WORDS_PER_MINUTE = 200

SLUG_PATTERN = r"^[a-z0-9]+(-[a-z0-9]+)*$"


def count_words(content: str) -> int:
    """Number of whitespace-delimited tokens in `content`."""
    return len(content.split())


def calculate_reading_time(content: str) -> str:
    """
    Reading time label for `content` at 200 words per minute,
    e.g. "3 min read". Never less than one minute.
    """
    minutes = math.ceil(count_words(content or "") / WORDS_PER_MINUTE)
    return f"{max(minutes, 1)} min read"
