import logging.config
from pathlib import Path

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from portfolio.models.site import SiteMetadata

logger = logging.getLogger(__name__)

SITE_CONFIG_NAME = "site.yaml"


class Settings(BaseSettings):
    content_dir: Path = Path("content")
    output_dir: Path = Path("public")
    home_post_limit: int = 4
    include_drafts: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="PORTFOLIO_", env_file=".env", extra="ignore")


def load_site_metadata(content_dir: Path) -> SiteMetadata:
    """Read ``site.yaml`` from *content_dir*; defaults apply when it is absent."""
    path = content_dir / SITE_CONFIG_NAME
    if not path.is_file():
        logger.warning("No %s in %s, using default site metadata", SITE_CONFIG_NAME, content_dir)
        return SiteMetadata()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"{path}: invalid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: site configuration must be a mapping.")
    try:
        return SiteMetadata.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"{path}: invalid site configuration: {exc}") from exc


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                },
            },
            "root": {"level": level.upper(), "handlers": ["console"]},
        }
    )
