"""Slug generation and plain-text helpers for content files."""

import math
import re
import unicodedata
from pathlib import Path

# Average adult silent-reading speed.
WORDS_PER_MINUTE = 200

_INDEX_STEMS = {"index", "readme"}


def slugify(text: str) -> str:
    """Lowercase, ASCII-only, hyphen-separated form of *text*."""
    slug = unicodedata.normalize("NFKD", text)
    slug = slug.encode("ascii", "ignore").decode("ascii")

    # Replace runs of non-alphanumeric chars with a single hyphen
    slug = re.sub(r"[^a-z0-9]+", "-", slug.lower())
    return slug.strip("-")


def generate_slug(path: Path, title: str = "") -> str:
    """Derive a post slug from its content file path, falling back to the title.

    ``posts/my-post.md`` and ``posts/my-post/index.mdx`` both give ``my-post``.
    """
    base = path.stem
    if base.lower() in _INDEX_STEMS and path.parent.name:
        base = path.parent.name

    slug = slugify(base)
    if not slug and title:
        slug = slugify(title)
    return slug or "post"


def reading_time(text: str) -> int:
    """Whole minutes needed to read *text*; never less than one."""
    words = len(text.split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def truncate(text: str, length: int = 160) -> str:
    """Shorten *text* on a word boundary, appending an ellipsis when cut."""
    text = " ".join(text.split())
    if len(text) <= length:
        return text
    cut = text[:length].rsplit(" ", 1)[0].rstrip(",.;:")
    return f"{cut}…"
