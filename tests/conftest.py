"""Shared fixtures: in-memory documents and a throwaway content directory."""

from datetime import date
from pathlib import Path

import pytest

from portfolio.config import load_site_metadata
from portfolio.models.document import Document
from portfolio.services.content_store import ContentStore

SITE_YAML = """\
title: Test Author
author: Test Author
description: Notes from a test site.
site_url: https://example.com/
twitter_username: "@tester"
social_media:
  linkedin: https://linkedin.com/in/tester/
  twitter: https://twitter.com/tester
  instagram: https://instagram.com/tester/
  github: https://github.com/tester
  email: tester@example.com
hero_heading: ["Hi,", "I'm Test,", "web developer."]
roles: Front End / Back End
about:
  - First about paragraph.
  - Second about paragraph.
contact:
  - Get in touch.
"""


def _post(title: str, day: str, published: bool = True, extra: str = "", body: str = "Some text.") -> str:
    return (
        "---\n"
        f"title: {title}\n"
        f"date: {day}\n"
        f"published: {'true' if published else 'false'}\n"
        f"{extra}"
        "---\n\n"
        f"{body}\n"
    )


@pytest.fixture
def make_document():
    """Factory for :class:`Document` instances with sensible defaults."""

    def _make(title: str = "Post", day: str = "2023-01-01", published: bool = True, **kwargs) -> Document:
        fields = {
            "title": title,
            "date": date.fromisoformat(day),
            "published": published,
            "slug": kwargs.pop("slug", title.lower().replace(" ", "-")),
        }
        fields.update(kwargs)
        return Document(**fields)

    return _make


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Content directory with site.yaml, three published posts and one draft."""
    root = tmp_path / "content"
    posts = root / "posts"
    (posts / "bundle").mkdir(parents=True)
    (root / "site.yaml").write_text(SITE_YAML, encoding="utf-8")

    (posts / "alpha.md").write_text(
        _post("Alpha", "2023-01-01", extra="subtitle: The first one\n"), encoding="utf-8"
    )
    (posts / "bravo.md").write_text(_post("Bravo", "2023-06-01"), encoding="utf-8")
    (posts / "charlie.md").write_text(_post("Charlie", "2023-03-01", published=False), encoding="utf-8")
    (posts / "bundle" / "index.mdx").write_text(
        _post(
            "Bundled",
            "2023-02-01",
            body="import Chart from './chart'\n\nA post with an image.\n\n![pic](./pic.png)",
        ),
        encoding="utf-8",
    )
    (posts / "bundle" / "pic.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    return root


@pytest.fixture
def site(content_dir: Path):
    return load_site_metadata(content_dir)


@pytest.fixture
def store(content_dir: Path, site) -> ContentStore:
    return ContentStore.from_directory(content_dir, default_author=site.author)
