"""Enumeration of every route the site can render."""

import asyncio

from loguru import logger

from src.cms.client import WordPressClient
from src.pages.gallery import album_route, gallery_fields
from src.pages.services import additional_service_route, company_route
from src.utils.slug import find_slug_collisions

STATIC_ROUTES = ["/", "/gallery", "/services", "/contact-us"]


async def enumerate_routes(client: WordPressClient) -> list[str]:
    """
    List the fixed routes plus every album, additional service and company route.

    Slug collisions are logged: only the first of each colliding group can be
    reached through its route.

    Args:
        client: WordPress client

    Returns:
        Unique routes in discovery order
    """
    gallery_page, additional_services = await asyncio.gather(
        client.fetch_gallery_page(),
        client.fetch_additional_services(fetch_all=True),
    )

    routes = list(STATIC_ROUTES)

    fields = gallery_fields(gallery_page)
    if fields is not None:
        album_names = [album.album_name for album in fields.gallery_items]
        for slug, names in find_slug_collisions(album_names).items():
            logger.warning(f"Gallery albums share slug {slug!r}: {names}")
        routes.extend(route for route in map(album_route, album_names) if route)

    for service in additional_services:
        if not service.slug:
            continue
        routes.append(additional_service_route(service.slug))
        company = company_route(service.slug, service.acf.company_name)
        if company:
            routes.append(company)

    unique = list(dict.fromkeys(routes))
    logger.info(f"Enumerated {len(unique)} routes")
    return unique
