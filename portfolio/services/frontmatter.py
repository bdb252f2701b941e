"""Frontmatter parsing: turns a content file into a :class:`Document`."""

import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import ValidationError

from portfolio.models.document import Document
from portfolio.services.normalizer import generate_slug, slugify

logger = logging.getLogger(__name__)

CONTENT_SUFFIXES = {".md": "md", ".mdx": "mdx"}

# Frontmatter block fenced by "---" lines at the very start of the file
_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


class FrontmatterError(ValueError):
    """A content file whose frontmatter cannot be turned into a Document."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def split_frontmatter(text: str) -> Tuple[Dict[str, Any], str]:
    """Split *text* into its YAML frontmatter mapping and the remaining body.

    Text without a frontmatter block yields an empty mapping and the text
    unchanged.

    Raises:
        yaml.YAMLError: if the frontmatter is not valid YAML.
        TypeError: if the frontmatter is not a mapping.
    """
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return {}, text

    meta = yaml.safe_load(match.group(1))
    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise TypeError("frontmatter must be a mapping")
    return meta, text[match.end():].lstrip("\n")


def parse_document(path: Path, default_author: str = "") -> Document:
    """Read *path* and build an immutable :class:`Document`.

    The slug comes from the ``slug`` frontmatter key when present (reduced to
    a single URL segment by :func:`slugify`), otherwise from the file path
    (see :func:`generate_slug`).

    Raises:
        FrontmatterError: on unreadable, malformed or incomplete frontmatter.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FrontmatterError(path, f"cannot read file ({exc})") from exc

    try:
        meta, body = split_frontmatter(text)
    except (yaml.YAMLError, TypeError) as exc:
        raise FrontmatterError(path, f"invalid frontmatter ({exc})") from exc

    title = str(meta.get("title") or "")
    slug: Optional[str] = None
    if meta.get("slug"):
        slug = slugify(str(meta["slug"]))
        if not slug:
            raise FrontmatterError(path, f"slug {meta['slug']!r} has no usable characters")
    fields = dict(meta)
    if "title" in meta:
        fields["title"] = title
    fields.update(
        {
            "slug": slug or generate_slug(path, title),
            "author": str(meta.get("author") or default_author),
            "subtitle": str(meta.get("subtitle") or ""),
            "body": body,
            "source_path": path,
            "format": CONTENT_SUFFIXES.get(path.suffix.lower(), "md"),
        }
    )
    try:
        document = Document.model_validate(fields)
    except ValidationError as exc:
        raise FrontmatterError(path, _describe(exc)) from exc

    logger.debug("Parsed %s", path, extra={"slug": document.slug, "published": document.published})
    return document


def _describe(exc: ValidationError) -> str:
    """One-line summary of the offending frontmatter keys."""
    problems = []
    for error in exc.errors():
        key = ".".join(str(part) for part in error["loc"]) or "frontmatter"
        problems.append(f"{key}: {error['msg']}")
    return "; ".join(problems)
