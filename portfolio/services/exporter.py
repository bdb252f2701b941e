"""Static export: writes every page of the site to a directory or a ZIP archive."""

import io
import json
import logging
import shutil
import zipfile
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from portfolio.models.site import SiteMetadata
from portfolio.services.composer import (
    HOME_POST_LIMIT,
    compose_blog_page,
    compose_home_page,
    compose_post_page,
)
from portfolio.services.content_store import POSTS_DIRNAME, ContentStore
from portfolio.services.frontmatter import CONTENT_SUFFIXES
from portfolio.services.post_list import assemble
from portfolio.services.templates import STATIC_DIR, render_page

logger = logging.getLogger(__name__)

# (relative output path, file contents)
SiteFile = Tuple[str, bytes]


class UnsafeOutputDirError(ValueError):
    """The output directory cannot be wiped without destroying sources."""

    def __init__(self, output_dir: Path, reason: str) -> None:
        super().__init__(f"refusing to clean {output_dir}: {reason}")
        self.output_dir = output_dir
        self.reason = reason


def check_output_dir(output_dir: Path, content_dir: Optional[Path] = None) -> None:
    """Raise :class:`UnsafeOutputDirError` if wiping *output_dir* would delete
    the working directory or the content sources."""
    target = output_dir.resolve()
    cwd = Path.cwd().resolve()
    if cwd.is_relative_to(target):
        raise UnsafeOutputDirError(output_dir, "it contains the current working directory")
    if content_dir is not None:
        content = content_dir.resolve()
        if content.is_relative_to(target):
            raise UnsafeOutputDirError(output_dir, f"it contains the content directory {content_dir}")


def _post_assets(store: ContentStore, slug: str) -> Iterator[Tuple[str, Path]]:
    """Files living next to a ``<slug>/index.md`` post, to be copied alongside its page."""
    document = store.get(slug)
    source = document.source_path
    if source is None or source.stem.lower() != "index" or source.parent.name == POSTS_DIRNAME:
        return
    for path in sorted(source.parent.rglob("*")):
        if path.is_file() and path.suffix.lower() not in CONTENT_SUFFIXES:
            yield f"blog/{slug}/{path.relative_to(source.parent).as_posix()}", path


def _index(store: ContentStore, site: SiteMetadata) -> Dict:
    posts = assemble(store)
    return {
        "site_url": site.site_url,
        "title": site.title,
        "posts_found": len(posts),
        "posts": [
            {"slug": p.slug, "title": p.title, "date": p.date.isoformat(), "url": p.link}
            for p in posts
        ],
    }


def iter_site_files(
    store: ContentStore,
    site: SiteMetadata,
    home_post_limit: int = HOME_POST_LIMIT,
    include_drafts: bool = True,
) -> Iterator[SiteFile]:
    """Yield every generated file of the site.

    The home page is composed without a viewport width, so it carries the
    full breakpoint table for the client to pick from.
    """
    home = compose_home_page(store, site, post_limit=home_post_limit)
    yield "index.html", render_page(home).encode("utf-8")
    yield "blog/index.html", render_page(compose_blog_page(store, site)).encode("utf-8")

    for document in store:
        if not document.published and not include_drafts:
            continue
        page = compose_post_page(store, site, document.slug, include_drafts=include_drafts)
        yield f"blog/{document.slug}/index.html", render_page(page).encode("utf-8")
        for name, path in _post_assets(store, document.slug):
            yield name, path.read_bytes()

    for path in sorted(STATIC_DIR.iterdir()):
        if path.is_file():
            yield f"static/{path.name}", path.read_bytes()

    yield "index.json", json.dumps(_index(store, site), ensure_ascii=False, indent=2).encode("utf-8")


def build_site(
    store: ContentStore,
    site: SiteMetadata,
    output_dir: Path,
    home_post_limit: int = HOME_POST_LIMIT,
    include_drafts: bool = True,
    clean: bool = True,
    content_dir: Optional[Path] = None,
) -> List[Path]:
    """Write the static site into *output_dir* and return the written paths.

    Raises:
        UnsafeOutputDirError: if *clean* is set and *output_dir* is, or
            contains, the working directory or *content_dir*.
    """
    if clean and output_dir.exists():
        check_output_dir(output_dir, content_dir)
        shutil.rmtree(output_dir)

    written: List[Path] = []
    for name, data in iter_site_files(store, site, home_post_limit, include_drafts):
        target = output_dir / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        written.append(target)

    logger.info("Site built", extra={"output_dir": str(output_dir), "files": len(written)})
    return written


def build_archive(
    store: ContentStore,
    site: SiteMetadata,
    home_post_limit: int = HOME_POST_LIMIT,
    include_drafts: bool = True,
) -> io.BytesIO:
    """Return the static site as an in-memory ZIP archive, rewound for reading."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in iter_site_files(store, site, home_post_limit, include_drafts):
            zf.writestr(name, data)

    buffer.seek(0)
    return buffer
