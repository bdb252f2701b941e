"""Composed page trees, ready for the HTML templates or the JSON API."""

import json
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from portfolio.models.document import PostSummary
from portfolio.models.viewport import BreakpointClass, ViewportConfig


class PageHead(BaseModel):
    title: str
    site_title: str
    description: str
    url: str
    image: str
    language: str = "en-US"
    twitter_username: str = ""
    og_type: str = "website"

    @property
    def full_title(self) -> str:
        return f"{self.title} | {self.site_title}"


class NavItem(BaseModel):
    label: str
    href: str


class SocialLink(BaseModel):
    label: str
    href: str
    text: str
    new_tab: bool = True


class HeroSection(BaseModel):
    heading_lines: List[str]
    roles: str
    breakpoint: Optional[BreakpointClass] = None
    viewport: Optional[ViewportConfig] = None
    viewport_table: Dict[str, Optional[ViewportConfig]] = Field(default_factory=dict)
    """Every breakpoint's config; filled only when the client width is unknown."""
    max_widths: Dict[str, Optional[int]] = Field(default_factory=dict)
    """Inclusive upper width of each breakpoint in *viewport_table*."""

    def viewport_table_json(self) -> str:
        """Ordered ``[{breakpoint, max_width, viewport}]`` list; the first entry
        whose ``max_width`` is null or not below the width applies."""
        return json.dumps(
            [
                {
                    "breakpoint": name,
                    "max_width": self.max_widths.get(name),
                    "viewport": config.model_dump() if config else None,
                }
                for name, config in self.viewport_table.items()
            ]
        )


class AboutSection(BaseModel):
    anchor: str = "about"
    heading: str = "About me"
    paragraphs: List[str]


class BlogSection(BaseModel):
    anchor: str = "blog"
    heading: str = "Blog"
    posts: List[PostSummary]
    see_all_href: str = "/blog"


class ContactSection(BaseModel):
    anchor: str = "contact"
    heading: str = "Contact"
    paragraphs: List[str]
    notice: str
    social_heading: str = "Social Media"
    links: List[SocialLink]


class HomePage(BaseModel):
    head: PageHead
    nav: List[NavItem]
    smooth_scroll: bool = True
    hero: HeroSection
    about: AboutSection
    blog: BlogSection
    contact: ContactSection


class BlogIndexPage(BaseModel):
    head: PageHead
    nav: List[NavItem]
    smooth_scroll: bool = False
    heading: str = "Blog"
    posts: List[PostSummary]


class PostPage(BaseModel):
    head: PageHead
    nav: List[NavItem]
    smooth_scroll: bool = False
    post: PostSummary
    published: bool
    body_html: str
    reading_time: int
