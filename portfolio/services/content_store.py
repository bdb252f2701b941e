"""Read-only store of the blog posts found in a content directory."""

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from portfolio.models.document import Document
from portfolio.services.frontmatter import CONTENT_SUFFIXES, parse_document

logger = logging.getLogger(__name__)

POSTS_DIRNAME = "posts"


class DuplicateSlugError(ValueError):
    """Two content files resolve to the same slug."""


class PostNotFoundError(KeyError):
    """No document is stored under the requested slug."""


class ContentStore:
    """Immutable snapshot of every document in a content directory.

    Documents keep the order they were given in; :meth:`from_directory`
    loads them sorted by source path so that listings are deterministic.
    """

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        self._documents: List[Document] = []
        self._by_slug: Dict[str, Document] = {}
        for document in documents:
            existing = self._by_slug.get(document.slug)
            if existing is not None:
                raise DuplicateSlugError(
                    f"Slug '{document.slug}' is used by both "
                    f"{existing.source_path or existing.title!s} and "
                    f"{document.source_path or document.title!s}."
                )
            self._by_slug[document.slug] = document
            self._documents.append(document)

    @classmethod
    def from_directory(cls, content_dir: Path, default_author: str = "") -> "ContentStore":
        """Load every ``.md``/``.mdx`` file under ``<content_dir>/posts``.

        Raises:
            FrontmatterError: if any file has invalid frontmatter.
            DuplicateSlugError: if two files share a slug.
        """
        posts_dir = content_dir / POSTS_DIRNAME
        if not posts_dir.is_dir():
            logger.warning("Posts directory %s does not exist; no posts loaded", posts_dir)
            return cls()

        paths = sorted(
            p for p in posts_dir.rglob("*") if p.is_file() and p.suffix.lower() in CONTENT_SUFFIXES
        )
        store = cls(parse_document(path, default_author=default_author) for path in paths)
        logger.info(
            "Content loaded",
            extra={"content_dir": str(content_dir), "documents": len(store)},
        )
        return store

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    @property
    def documents(self) -> List[Document]:
        return list(self._documents)

    def get(self, slug: str) -> Document:
        try:
            return self._by_slug[slug]
        except KeyError:
            raise PostNotFoundError(slug) from None

    def query(self, predicate: Optional[Callable[[Document], bool]] = None) -> List[Document]:
        """Documents matching *predicate* (all when omitted), in store order."""
        if predicate is None:
            return self.documents
        return [d for d in self._documents if predicate(d)]
