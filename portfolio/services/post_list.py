"""Published-post listing: filter, newest-first ordering and truncation."""

from typing import Iterable, List, Optional

from portfolio.models.document import Document, PostSummary


def is_published(document: Document) -> bool:
    return document.published is True


def assemble(documents: Iterable[Document], limit: Optional[int] = None) -> List[PostSummary]:
    """Return summaries of the published *documents*, newest first.

    Documents sharing a date keep their input order (the sort is stable).
    When *limit* is given at most that many summaries are returned.

    Raises:
        ValueError: if *limit* is negative.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    published = [d for d in documents if is_published(d)]
    published.sort(key=lambda d: d.date, reverse=True)
    if limit is not None:
        published = published[:limit]
    return [PostSummary.from_document(d) for d in published]
