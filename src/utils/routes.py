"""Mapping of WordPress menu links onto site routes."""

from collections.abc import Iterable
from urllib.parse import SplitResult, urlsplit

from loguru import logger

from src.constants import DEFAULT_CMS_HOSTS, FALLBACK_ROUTE, WORDPRESS_ROUTE_MAP


def _parse_absolute_url(url: str) -> SplitResult:
    """Parse an absolute URL, raising ValueError for anything else."""
    parts = urlsplit(url)
    if not parts.scheme:
        raise ValueError(f"Not an absolute URL: {url!r}")
    return parts


def _is_cms_host(hostname: str, cms_hosts: Iterable[str]) -> bool:
    return any(marker in hostname for marker in cms_hosts)


def _map_by_containment(url: str) -> str:
    """Best-effort mapping for links that are not absolute URLs."""
    for wp_path, route in WORDPRESS_ROUTE_MAP.items():
        if wp_path in url:
            return route
    return FALLBACK_ROUTE


def map_wordpress_url_to_route(
    url: str | None,
    cms_hosts: Iterable[str] = DEFAULT_CMS_HOSTS,
) -> str:
    """Convert a CMS-authored link into a path usable by the site router.

    Args:
        url: Absolute or relative link from a WordPress menu field
        cms_hosts: Host markers identifying the studio's own WordPress install

    Returns:
        An internal route, the external URL unchanged, or "#" when the link
        cannot be mapped

    Examples:
        >>> map_wordpress_url_to_route("https://cms.example.com/home/")
        '/'
        >>> map_wordpress_url_to_route("https://external-site.com/page")
        'https://external-site.com/page'
        >>> map_wordpress_url_to_route("/gallery")
        '/gallery'
    """
    if not url:
        return FALLBACK_ROUTE

    try:
        parts = _parse_absolute_url(url)
    except ValueError as e:
        logger.debug(f"Falling back to substring route matching: {e}")
        return _map_by_containment(url)

    clean_path = parts.path.removesuffix("/")

    if clean_path in WORDPRESS_ROUTE_MAP:
        return WORDPRESS_ROUTE_MAP[clean_path]

    hostname = parts.hostname or ""
    is_cms = bool(hostname) and _is_cms_host(hostname, cms_hosts)

    if is_cms:
        segments = [segment for segment in clean_path.split("/") if segment]
        if segments:
            slug = segments[-1]
            return WORDPRESS_ROUTE_MAP.get(f"/{slug}", f"/{slug}")

    if hostname and not is_cms:
        return url

    return clean_path or FALLBACK_ROUTE


def is_external_route(route: str) -> bool:
    """Check whether a mapped route is an outbound link rather than a site path."""
    try:
        return bool(urlsplit(route).scheme)
    except ValueError:
        return False
