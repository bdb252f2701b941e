"""Jinja2 rendering of composed page models."""

from datetime import date
from pathlib import Path
from typing import Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from portfolio.models.page import BlogIndexPage, HomePage, PostPage

PACKAGE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

Page = Union[HomePage, BlogIndexPage, PostPage]

_TEMPLATE_FOR = {
    HomePage: "home.html",
    BlogIndexPage: "blog.html",
    PostPage: "post.html",
}


def _format_date(value: date) -> str:
    return value.strftime("%B %d, %Y")


jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
jinja_env.filters["long_date"] = _format_date


def render_page(page: Page) -> str:
    """Render a composed page model to a complete HTML document."""
    template = jinja_env.get_template(_TEMPLATE_FOR[type(page)])
    return template.render(page=page)
