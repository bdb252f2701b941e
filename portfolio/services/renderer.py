"""Markdown/MDX body → sanitised HTML."""

import re
from typing import List

import markdown
from bs4 import BeautifulSoup

from portfolio.models.document import Document
from portfolio.services.sanitizer import sanitize_fragment

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "toc", "sane_lists"]

# Top-level ESM statements an MDX file may carry before/among its prose
_MDX_ESM_RE = re.compile(r"^(import|export)\s")
_FENCE_RE = re.compile(r"^\s*(```|~~~)")


def strip_mdx_statements(body: str) -> str:
    """Drop MDX ``import``/``export`` lines that sit outside code fences."""
    kept: List[str] = []
    in_fence = False
    for line in body.splitlines():
        if _FENCE_RE.match(line):
            in_fence = not in_fence
        elif not in_fence and _MDX_ESM_RE.match(line):
            continue
        kept.append(line)
    return "\n".join(kept)


def render_markdown(source: str) -> str:
    """Render Markdown *source* to sanitised HTML."""
    html = markdown.markdown(source, extensions=MARKDOWN_EXTENSIONS, output_format="html")
    return sanitize_fragment(html)


def render_document(document: Document) -> str:
    body = document.body
    if document.format == "mdx":
        body = strip_mdx_statements(body)
    return render_markdown(body)


def plain_text(html: str) -> str:
    """Visible text of an HTML fragment, whitespace collapsed."""
    if not html:
        return ""
    text = BeautifulSoup(html, "lxml").get_text(separator=" ", strip=True)
    return " ".join(text.split())
