"""HTML pages: home, blog index and one page per post."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from fastapi.responses import HTMLResponse

from portfolio.config import Settings
from portfolio.dependencies import get_settings, get_site, get_store
from portfolio.models.site import SiteMetadata
from portfolio.services.breakpoints import parse_width
from portfolio.services.composer import compose_blog_page, compose_home_page, compose_post_page
from portfolio.services.content_store import ContentStore, PostNotFoundError
from portfolio.services.templates import render_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"])

# Client hint carrying the layout viewport width
WIDTH_HINT = "Sec-CH-Viewport-Width"


@router.get("/", response_class=HTMLResponse, summary="Home page")
async def home(
    width: Optional[int] = Query(default=None, ge=0, description="Viewport width in CSS pixels."),
    sec_ch_viewport_width: Optional[str] = Header(default=None),
    store: ContentStore = Depends(get_store),
    site: SiteMetadata = Depends(get_site),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    """Render the home page.

    The viewport width comes from ``?width=`` or, failing that, the
    ``Sec-CH-Viewport-Width`` client hint.  Without either, the page carries
    every breakpoint's viewport config and the client picks one.
    """
    viewport_width = width if width is not None else parse_width(sec_ch_viewport_width)
    page = compose_home_page(
        store, site, viewport_width=viewport_width, post_limit=settings.home_post_limit
    )
    return HTMLResponse(
        render_page(page),
        headers={"Accept-CH": WIDTH_HINT, "Vary": WIDTH_HINT},
    )


@router.get("/blog", response_class=HTMLResponse, summary="Blog index")
async def blog(
    store: ContentStore = Depends(get_store),
    site: SiteMetadata = Depends(get_site),
) -> HTMLResponse:
    return HTMLResponse(render_page(compose_blog_page(store, site)))


@router.get("/blog/{slug}", response_class=HTMLResponse, summary="Blog post")
async def post(
    slug: str,
    store: ContentStore = Depends(get_store),
    site: SiteMetadata = Depends(get_site),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    try:
        page = compose_post_page(store, site, slug, include_drafts=settings.include_drafts)
    except PostNotFoundError:
        logger.warning("Post not found: %s", slug)
        raise HTTPException(status_code=404, detail=f"No post with slug '{slug}'.")
    return HTMLResponse(render_page(page))
