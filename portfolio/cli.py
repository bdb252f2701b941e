"""Command line entry point: static build and content inspection."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from portfolio.config import Settings, configure_logging, load_site_metadata
from portfolio.services.breakpoints import resolve
from portfolio.services.content_store import ContentStore
from portfolio.services.exporter import UnsafeOutputDirError, build_site
from portfolio.services.post_list import assemble
from portfolio.services.viewport import select_viewport_config

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="portfolio",
    help="Build and inspect the Markdown-sourced portfolio site.",
    no_args_is_help=True,
)

# Options shared by every command, filled in by the callback
global_config = {
    "content_dir": None,
    "log_level": "INFO",
}


@app.callback()
def main(
    content_dir: Optional[Path] = typer.Option(
        None, "--content-dir", help="Content directory (defaults to PORTFOLIO_CONTENT_DIR or ./content)"
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Log level [DEBUG|INFO|WARNING|ERROR]"),
):
    """Portfolio site tools."""
    configure_logging(log_level)
    global_config["content_dir"] = content_dir
    global_config["log_level"] = log_level


def _settings() -> Settings:
    settings = Settings()
    if global_config["content_dir"] is not None:
        settings = settings.model_copy(update={"content_dir": global_config["content_dir"]})
    return settings


def _load(settings: Settings):
    try:
        site = load_site_metadata(settings.content_dir)
        store = ContentStore.from_directory(settings.content_dir, default_author=site.author)
    except ValueError as e:
        typer.echo(f"[ERROR] {e}", err=True)
        logger.error("Content could not be loaded: %s", e)
        raise typer.Exit(1)
    return site, store


@app.command()
def build(
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Where to write the site"),
    drafts: Optional[bool] = typer.Option(
        None, "--drafts/--no-drafts", help="Also build pages for unpublished posts"
    ),
    post_limit: Optional[int] = typer.Option(
        None, "--post-limit", min=0, help="Posts shown on the home page"
    ),
):
    """Render every page into a static directory."""
    settings = _settings()
    site, store = _load(settings)
    target = output_dir or settings.output_dir

    try:
        written = build_site(
            store,
            site,
            target,
            home_post_limit=settings.home_post_limit if post_limit is None else post_limit,
            include_drafts=settings.include_drafts if drafts is None else drafts,
            content_dir=settings.content_dir,
        )
    except UnsafeOutputDirError as e:
        typer.echo(f"[ERROR] {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"[BUILD] Wrote {len(written)} files to {target}")


@app.command()
def posts(
    limit: Optional[int] = typer.Option(None, "--limit", min=0, help="Show at most this many posts"),
    format: str = typer.Option("table", "--format", help="Output format [table|json]"),
):
    """List published posts, newest first."""
    settings = _settings()
    _, store = _load(settings)
    summaries = assemble(store, limit=limit)

    if format == "json":
        typer.echo(json.dumps([s.model_dump(mode="json") for s in summaries], indent=2, ensure_ascii=False))
        return

    if not summaries:
        typer.echo("No published posts.")
        return
    for summary in summaries:
        typer.echo(f"{summary.date.isoformat()}  {summary.slug:<30}  {summary.title}")


@app.command("breakpoint")
def show_breakpoint(width: int = typer.Argument(..., min=0, help="Viewport width in CSS pixels")):
    """Show the breakpoint class and 3D viewport settings for a width."""
    name = resolve(width)
    config = select_viewport_config(name)
    if config is None:
        typer.echo(f"{width}px -> {name} (no 3D model)")
    else:
        typer.echo(f"{width}px -> {name} (field of view {config.field_of_view})")


if __name__ == "__main__":
    app()
