#!/usr/bin/env python3
"""Command-line entry point for the studio site.

Commands:
- slug:   print the slug of a display name
- route:  print the site route of a WordPress link
- page:   fetch a page from the CMS and print its view model as JSON
- routes: print every route the site can render

Usage:
    python -m src.main slug "Acme & Co."
    python -m src.main route https://100px.lk/services/
    python -m src.main page album wedding-day --config config/site.yaml
    python -m src.main routes -v
"""

import asyncio
import sys
from collections.abc import Awaitable, Callable
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
import yaml
from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, ValidationError

from src.cms.client import WordPressClient
from src.models.config import SiteConfig
from src.pages.contact import build_contact_page
from src.pages.gallery import build_album_page, build_gallery_page
from src.pages.home import build_home_page
from src.pages.services import (
    build_additional_service_page,
    build_company_gallery_page,
    build_services_page,
)
from src.pages.sitemap import enumerate_routes
from src.utils.config_loader import load_site_config
from src.utils.logging import setup_logging
from src.utils.routes import map_wordpress_url_to_route
from src.utils.slug import generate_slug

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Headless WordPress front end for the studio site.")

ConfigOption = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to site configuration file"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose logging"),
]


class PageName(str, Enum):
    """Pages the `page` command can assemble, with their required parameters."""

    home = "home"
    gallery = "gallery"
    album = "album"
    services = "services"
    additional_service = "additional-service"
    company = "company"
    contact = "contact"


PAGE_PARAM_COUNT = {
    PageName.album: 1,
    PageName.additional_service: 1,
    PageName.company: 2,
}


def _load_config(config_file: Path, verbose: bool) -> SiteConfig:
    """Load configuration (defaults when the file is absent) and configure logging."""
    try:
        if config_file.exists():
            config = load_site_config(config_file)
        else:
            config = load_site_config(None)
    except (FileNotFoundError, ValidationError, yaml.YAMLError) as e:
        typer.echo(f"❌ Failed to load configuration: {e}", err=True)
        raise typer.Exit(code=1) from e

    setup_logging(config.logging, verbose=verbose)
    if not config_file.exists():
        logger.warning(f"Config file {config_file} not found, using defaults")
    return config


def _page_builder(
    name: PageName, params: list[str], config: SiteConfig
) -> Callable[[WordPressClient], Awaitable[BaseModel | None]]:
    builders: dict[PageName, Callable[[WordPressClient], Awaitable[BaseModel | None]]] = {
        PageName.home: lambda client: build_home_page(client, config.site.name),
        PageName.gallery: build_gallery_page,
        PageName.album: lambda client: build_album_page(client, *params),
        PageName.services: build_services_page,
        PageName.additional_service: lambda client: build_additional_service_page(client, *params),
        PageName.company: lambda client: build_company_gallery_page(client, *params),
        PageName.contact: build_contact_page,
    }
    return builders[name]


async def _render(
    config: SiteConfig,
    builder: Callable[[WordPressClient], Awaitable[BaseModel | None]],
) -> BaseModel | None:
    async with WordPressClient(config.cms) as client:
        return await builder(client)


async def _list_routes(config: SiteConfig) -> list[str]:
    async with WordPressClient(config.cms) as client:
        return await enumerate_routes(client)


@app.command()
def slug(text: Annotated[str, typer.Argument(help="Display name to normalise")]) -> None:
    """Print the URL slug of a display name."""
    typer.echo(generate_slug(text))


@app.command()
def route(
    url: Annotated[str, typer.Argument(help="WordPress link (absolute or relative)")],
    config_file: ConfigOption = Path("config/site.yaml"),
    verbose: VerboseOption = False,
) -> None:
    """Print the site route a WordPress link maps to."""
    config = _load_config(config_file, verbose)
    typer.echo(map_wordpress_url_to_route(url, config.cms.cms_hosts))


@app.command()
def page(
    name: Annotated[PageName, typer.Argument(help="Page to assemble")],
    params: Annotated[
        list[str] | None,
        typer.Argument(help="Route parameters (album slug; service slug [company slug])"),
    ] = None,
    config_file: ConfigOption = Path("config/site.yaml"),
    verbose: VerboseOption = False,
) -> None:
    """Fetch a page from the CMS and print its view model as JSON."""
    params = params or []
    expected = PAGE_PARAM_COUNT.get(name, 0)
    if len(params) != expected:
        typer.echo(f"❌ Page '{name.value}' takes {expected} parameter(s), got {len(params)}", err=True)
        raise typer.Exit(code=2)

    config = _load_config(config_file, verbose)

    try:
        result = asyncio.run(_render(config, _page_builder(name, params, config)))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(130)

    if result is None:
        typer.echo(f"❌ Page not found: {name.value} {' '.join(params)}".rstrip(), err=True)
        raise typer.Exit(code=1)

    typer.echo(result.model_dump_json(indent=2))


@app.command()
def routes(
    config_file: ConfigOption = Path("config/site.yaml"),
    verbose: VerboseOption = False,
) -> None:
    """Print every route the site can render."""
    config = _load_config(config_file, verbose)

    try:
        for site_route in asyncio.run(_list_routes(config)):
            typer.echo(site_route)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    app()
