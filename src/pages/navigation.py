"""Header and footer navigation built from CMS menu fields."""

import asyncio
from collections.abc import Iterable

from loguru import logger

from src.cms.client import WordPressClient
from src.cms.content import to_image_ref
from src.constants import DEFAULT_CMS_HOSTS, DEFAULT_QUICK_BUTTON_TEXT, FALLBACK_ROUTE
from src.models.pages import FooterContactGroup, FooterNav, HeaderNav, NavLink, SiteChrome
from src.models.wordpress import MenuLink, WordPressFooter, WordPressHeader
from src.utils.routes import is_external_route, map_wordpress_url_to_route


def nav_link(
    label: str | None,
    link: MenuLink | None,
    cms_hosts: Iterable[str] = DEFAULT_CMS_HOSTS,
) -> NavLink:
    """
    Turn a CMS link field into a navigation entry.

    The label falls back to the link's own title.

    Args:
        label: Display text from the menu row
        link: ACF link field (may be empty)
        cms_hosts: Host markers identifying the studio's own CMS

    Returns:
        NavLink whose href is a site route, an external URL, or "#"
    """
    href = map_wordpress_url_to_route(link.url if link else None, cms_hosts)
    text = label or (link.title if link else "") or ""
    return NavLink(label=text, href=href, external=is_external_route(href))


def build_header_nav(
    header: WordPressHeader | None,
    media_origin: str | None = None,
    cms_hosts: Iterable[str] = DEFAULT_CMS_HOSTS,
) -> HeaderNav:
    """Build the header menu; a missing header yields an empty menu."""
    quick_default = NavLink(label=DEFAULT_QUICK_BUTTON_TEXT, href=FALLBACK_ROUTE)

    if header is None or header.acf is None:
        logger.warning("Header data is missing, rendering default navigation")
        return HeaderNav(quick_button=quick_default)

    acf = header.acf
    links = [nav_link(item.menu_item_name, item.menu_item_link, cms_hosts) for item in acf.menu_items]
    if not links:
        logger.warning("Header menu items are empty")

    # The quick button uses the raw CMS URL, not a mapped route
    quick_href = (acf.quick_button_link.url if acf.quick_button_link else "") or FALLBACK_ROUTE
    quick_button = NavLink(
        label=acf.quick_button_text or DEFAULT_QUICK_BUTTON_TEXT,
        href=quick_href,
        external=is_external_route(quick_href),
    )

    return HeaderNav(
        logo=to_image_ref(acf.logo, media_origin),
        links=links,
        quick_button=quick_button,
    )


def build_footer_nav(
    footer: WordPressFooter | None,
    media_origin: str | None = None,
    cms_hosts: Iterable[str] = DEFAULT_CMS_HOSTS,
) -> FooterNav:
    """Build the footer menus, contact lines and social links."""
    if footer is None or footer.acf is None:
        logger.warning("Footer data is missing, rendering empty footer")
        return FooterNav()

    acf = footer.acf
    return FooterNav(
        logo=to_image_ref(acf.logo, media_origin),
        links=[nav_link(item.menu_item_name, item.menu_item_link, cms_hosts) for item in acf.menu],
        important_links=[
            nav_link(item.important_link_text, item.important_links, cms_hosts)
            for item in acf.important_links
        ],
        contact_groups=[
            FooterContactGroup(name=group.list_name, content=group.list_content)
            for group in acf.icon_groups
            if group.list_name or group.list_content
        ],
        social_links=[
            nav_link(item.social_media_name, item.social_media_links_items, cms_hosts)
            for item in acf.social_media
        ],
    )


async def fetch_site_chrome(client: WordPressClient) -> SiteChrome:
    """Fetch header and footer concurrently and build the shared page chrome."""
    header, footer = await asyncio.gather(client.fetch_header(), client.fetch_footer())
    cms_hosts = client.config.cms_hosts
    return SiteChrome(
        header=build_header_nav(header, client.media_origin, cms_hosts),
        footer=build_footer_nav(footer, client.media_origin, cms_hosts),
    )
