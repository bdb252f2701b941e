import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from portfolio.config import configure_logging
from portfolio.dependencies import get_settings
from portfolio.routers.api import limiter, router as api_router
from portfolio.routers.export import router as export_router
from portfolio.routers.pages import router as pages_router
from portfolio.services.templates import STATIC_DIR

configure_logging(get_settings().log_level)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Portfolio",
    description="Personal portfolio and blog rendered from Markdown content files.",
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(pages_router)
app.include_router(api_router)
app.include_router(export_router)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.get("/health", summary="Health check")
async def health() -> dict:
    return {"status": "ok"}
