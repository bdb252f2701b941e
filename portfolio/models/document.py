from datetime import date, datetime
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

# One URL path segment, as produced by slugify()
SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class Document(BaseModel):
    """One authored content file (a blog post), read-only once loaded."""

    model_config = {"frozen": True}

    title: str
    subtitle: str = ""
    author: str = ""
    date: date
    published: bool = False
    body: str = ""  # Markdown/MDX source, without frontmatter
    slug: str = Field(pattern=SLUG_PATTERN)
    source_path: Optional[Path] = None
    format: Literal["md", "mdx"] = "md"

    @field_validator("date", mode="before")
    @classmethod
    def strip_time(cls, value):
        # YAML turns "2023-01-01 10:00" into a datetime; only the day is kept
        if isinstance(value, datetime):
            return value.date()
        return value


class PostSummary(BaseModel):
    """Listing projection of a :class:`Document`."""

    model_config = {"frozen": True}

    title: str
    subtitle: str
    author: str
    date: date
    slug: str

    @property
    def link(self) -> str:
        return f"/blog/{self.slug}"

    @classmethod
    def from_document(cls, document: Document) -> "PostSummary":
        return cls(
            title=document.title,
            subtitle=document.subtitle,
            author=document.author,
            date=document.date,
            slug=document.slug,
        )
