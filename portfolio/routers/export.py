import logging
from urllib.parse import urlparse

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from portfolio.config import Settings
from portfolio.dependencies import get_settings, get_site, get_store
from portfolio.models.site import SiteMetadata
from portfolio.routers.api import limiter
from portfolio.services.content_store import ContentStore
from portfolio.services.exporter import build_archive

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/export",
    summary="Download the static site",
    description=(
        "Builds every page of the site and returns them as a ZIP archive: "
        "`index.html`, `blog/index.html`, `blog/<slug>/index.html` per post, "
        "the stylesheet and an `index.json` listing the published posts."
    ),
)
@limiter.limit("3/minute")
async def export_site(
    request: Request,
    store: ContentStore = Depends(get_store),
    site: SiteMetadata = Depends(get_site),
    settings: Settings = Depends(get_settings),
) -> StreamingResponse:
    logger.info("Export requested", extra={"documents": len(store)})
    buffer = build_archive(
        store,
        site,
        home_post_limit=settings.home_post_limit,
        include_drafts=settings.include_drafts,
    )

    domain = (urlparse(site.site_url).netloc or "site").replace(".", "-").replace(":", "-")
    filename = f"{domain}-static.zip"
    return StreamingResponse(
        buffer,
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
