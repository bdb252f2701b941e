import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from portfolio.config import Settings
from portfolio.dependencies import get_settings, get_site, get_store
from portfolio.models.response import BreakpointResponse, PostDetailResponse, PostListResponse
from portfolio.models.site import SiteMetadata
from portfolio.services.breakpoints import resolve
from portfolio.services.composer import compose_post_page
from portfolio.services.content_store import ContentStore, PostNotFoundError
from portfolio.services.post_list import assemble
from portfolio.services.viewport import select_viewport_config

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/api", tags=["API"])


@router.get("/posts", response_model=PostListResponse, summary="List published posts")
@limiter.limit("60/minute")
async def list_posts(
    request: Request,
    limit: Optional[int] = Query(default=None, ge=1, le=100, description="Maximum number of posts (1–100)."),
    store: ContentStore = Depends(get_store),
) -> PostListResponse:
    """Published posts, newest first."""
    posts = assemble(store)
    total = len(posts)
    if limit is not None:
        posts = posts[:limit]
    return PostListResponse(total=total, posts=posts)


@router.get("/posts/{slug}", response_model=PostDetailResponse, summary="Fetch one post")
@limiter.limit("60/minute")
async def get_post(
    request: Request,
    slug: str,
    store: ContentStore = Depends(get_store),
    site: SiteMetadata = Depends(get_site),
    settings: Settings = Depends(get_settings),
) -> PostDetailResponse:
    try:
        page = compose_post_page(store, site, slug, include_drafts=settings.include_drafts)
    except PostNotFoundError:
        logger.warning("Post not found: %s", slug)
        raise HTTPException(status_code=404, detail=f"No post with slug '{slug}'.")

    return PostDetailResponse(
        post=page.post,
        published=page.published,
        body_html=page.body_html,
        reading_time=page.reading_time,
    )


@router.get(
    "/breakpoint",
    response_model=BreakpointResponse,
    summary="Resolve a viewport width",
    description=(
        "Maps a viewport width in CSS pixels to its breakpoint class and the "
        "decorative 3D viewport configuration for that class (`null` when the "
        "model is not shown)."
    ),
)
@limiter.limit("120/minute")
async def resolve_breakpoint(
    request: Request,
    width: int = Query(..., ge=0, description="Viewport width in CSS pixels."),
    site: SiteMetadata = Depends(get_site),
) -> BreakpointResponse:
    name = resolve(width)
    return BreakpointResponse(
        width=width, breakpoint=name, viewport=select_viewport_config(name, site.asset_url)
    )


@router.get("/site", response_model=SiteMetadata, summary="Site metadata")
async def site_metadata(site: SiteMetadata = Depends(get_site)) -> SiteMetadata:
    return site
