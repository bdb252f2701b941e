"""Page composition: gathers posts, site copy and viewport selection into page models."""

import logging
from typing import List, Optional
from urllib.parse import urljoin

from portfolio.models.document import PostSummary
from portfolio.models.page import (
    AboutSection,
    BlogIndexPage,
    BlogSection,
    ContactSection,
    HeroSection,
    HomePage,
    NavItem,
    PageHead,
    PostPage,
    SocialLink,
)
from portfolio.models.site import SiteMetadata
from portfolio.services.breakpoints import resolve, upper_bounds
from portfolio.services.content_store import ContentStore, PostNotFoundError
from portfolio.services.normalizer import reading_time, slugify, truncate
from portfolio.services.post_list import assemble
from portfolio.services.renderer import plain_text, render_document
from portfolio.services.viewport import select_viewport_config, viewport_table

logger = logging.getLogger(__name__)

HOME_POST_LIMIT = 4


def build_nav(site: SiteMetadata) -> List[NavItem]:
    """Menu entries: Home and Blog are pages, the rest are home-page anchors."""
    items = []
    for label in site.menus:
        key = slugify(label)
        if key == "home":
            href = "/"
        elif key == "blog":
            href = "/blog"
        else:
            href = f"/#{key}"
        items.append(NavItem(label=label, href=href))
    return items


def build_social_links(site: SiteMetadata) -> List[SocialLink]:
    social = site.social_media
    links: List[SocialLink] = []
    if social.twitter:
        links.append(SocialLink(label="Twitter", href=social.twitter, text=social.twitter))
    if social.linkedin:
        links.append(
            SocialLink(
                label="Linkedin", href=f"{social.linkedin}?locale=en_US", text=social.linkedin
            )
        )
    if social.github:
        links.append(SocialLink(label="Github", href=social.github, text=social.github))
    if social.instagram:
        links.append(SocialLink(label="Instagram", href=social.instagram, text=social.instagram))
    if social.email:
        links.append(
            SocialLink(
                label="E-mail", href=f"mailto:{social.email}", text=social.email, new_tab=False
            )
        )
    return links


def _head(site: SiteMetadata, title: str, path: str, description: str = "", og_type: str = "website") -> PageHead:
    return PageHead(
        title=title,
        site_title=site.title,
        description=description or site.description,
        url=urljoin(site.site_url, path.lstrip("/")),
        image=urljoin(site.site_url, site.image.lstrip("/")),
        language=site.language,
        twitter_username=site.twitter_username,
        og_type=og_type,
    )


def compose_hero(site: SiteMetadata, viewport_width: Optional[int] = None) -> HeroSection:
    """Hero section; the decorative viewport is chosen only when the width is known."""
    hero = HeroSection(heading_lines=site.hero_heading, roles=site.roles)
    if viewport_width is None:
        hero.viewport_table = viewport_table(site.asset_url)
        hero.max_widths = upper_bounds()
        return hero

    breakpoint = resolve(viewport_width)
    hero.breakpoint = breakpoint
    hero.viewport = select_viewport_config(breakpoint, site.asset_url)
    logger.debug(
        "Viewport selected",
        extra={"width": viewport_width, "breakpoint": breakpoint, "rendered": hero.viewport is not None},
    )
    return hero


def compose_home_page(
    store: ContentStore,
    site: SiteMetadata,
    viewport_width: Optional[int] = None,
    post_limit: int = HOME_POST_LIMIT,
) -> HomePage:
    """Hero, about, latest posts and contact sections, in that order."""
    return HomePage(
        head=_head(site, "Home", "/"),
        nav=build_nav(site),
        hero=compose_hero(site, viewport_width),
        about=AboutSection(paragraphs=site.about),
        blog=BlogSection(posts=assemble(store, limit=post_limit)),
        contact=ContactSection(
            paragraphs=site.contact,
            notice=site.contact_notice,
            links=build_social_links(site),
        ),
    )


def compose_blog_page(store: ContentStore, site: SiteMetadata) -> BlogIndexPage:
    return BlogIndexPage(
        head=_head(site, "Blog", "/blog"),
        nav=build_nav(site),
        posts=assemble(store),
    )


def compose_post_page(
    store: ContentStore, site: SiteMetadata, slug: str, include_drafts: bool = True
) -> PostPage:
    """Full page for one post.

    Raises:
        PostNotFoundError: if no post has *slug*, or it is a draft and
            *include_drafts* is off.
    """
    document = store.get(slug)
    if not document.published and not include_drafts:
        raise PostNotFoundError(slug)

    body_html = render_document(document)
    text = plain_text(body_html)
    return PostPage(
        head=_head(
            site,
            document.title,
            PostSummary.from_document(document).link,
            description=document.subtitle or truncate(text),
            og_type="article",
        ),
        nav=build_nav(site),
        post=PostSummary.from_document(document),
        published=document.published,
        body_html=body_html,
        reading_time=reading_time(text),
    )
