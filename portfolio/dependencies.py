from functools import lru_cache

from portfolio.config import Settings, load_site_metadata
from portfolio.models.site import SiteMetadata
from portfolio.services.content_store import ContentStore


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_site() -> SiteMetadata:
    return load_site_metadata(get_settings().content_dir)


@lru_cache
def get_store() -> ContentStore:
    """Content snapshot shared by every request; loaded once per process."""
    return ContentStore.from_directory(get_settings().content_dir, default_author=get_site().author)
