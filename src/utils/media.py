"""WordPress media URL normalisation.

WordPress stores absolute media URLs using whatever host the site was set up
on. Content authored on a local install (``*.local``, ``localhost``) would
otherwise point the public site at an unreachable host.
"""

from urllib.parse import urljoin, urlsplit, urlunsplit

from loguru import logger

from src.constants import LOCAL_MEDIA_HOSTS


def get_media_origin(reference_url: str | None) -> str | None:
    """
    Derive the media origin (scheme and host) from a reference URL.

    Args:
        reference_url: Media base URL, or the API URL when none is configured

    Returns:
        Origin such as "https://cms.example.com", or None if unavailable
    """
    if not reference_url:
        return None

    parts = urlsplit(reference_url.strip())
    if not parts.scheme or not parts.netloc:
        logger.warning(f"Unable to determine WordPress media base URL from {reference_url!r}")
        return None

    return f"{parts.scheme}://{parts.netloc}"


def should_rewrite_media_host(hostname: str) -> bool:
    """Check whether a media host only resolves on a development machine."""
    normalized = hostname.lower()
    return normalized.endswith(".local") or normalized in LOCAL_MEDIA_HOSTS


def normalize_media_url(url: str | None, media_origin: str | None) -> str | None:
    """
    Point a media URL at the public media host.

    Args:
        url: Media URL from the CMS (absolute or relative)
        media_origin: Public media origin (see get_media_origin)

    Returns:
        Normalised URL, or None for blank input

    Examples:
        >>> normalize_media_url("http://studio.local/wp-content/a.jpg", "https://cms.example.com")
        'https://cms.example.com/wp-content/a.jpg'
        >>> normalize_media_url("/wp-content/a.jpg", "https://cms.example.com")
        'https://cms.example.com/wp-content/a.jpg'
    """
    if not url:
        return None

    trimmed = url.strip()
    if not trimmed:
        return None

    if media_origin:
        resolved = urljoin(f"{media_origin}/", trimmed)
    elif urlsplit(trimmed).scheme:
        resolved = trimmed
    else:
        return trimmed

    parts = urlsplit(resolved)
    if not media_origin or not should_rewrite_media_host(parts.hostname or ""):
        return resolved

    base = urlsplit(media_origin)
    return urlunsplit((base.scheme, base.netloc, parts.path, parts.query, parts.fragment))
