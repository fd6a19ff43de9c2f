"""URL slug generation and matching utilities.

Slugs are never stored: company and album pages recompute the slug from the
CMS display name on every request and compare it with the route parameter.
"""

import re
from collections.abc import Iterable
from urllib.parse import unquote

_DISALLOWED_CHARS = re.compile(r"[^\w\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")


def generate_slug(text: str | None) -> str:
    """Generate a URL-safe slug from a display name.

    Args:
        text: Company or album name as typed in the CMS (may be None)

    Returns:
        Lowercase hyphenated slug, or an empty string for empty input

    Examples:
        >>> generate_slug("Jane's Studio!!")
        'janes-studio'
        >>> generate_slug("  Multiple   Spaces -- here ")
        'multiple-spaces-here'
        >>> generate_slug(None)
        ''
    """
    if not text:
        return ""

    slug = text.lower().strip()
    # Keep word characters, whitespace and hyphens only
    slug = _DISALLOWED_CHARS.sub("", slug)
    slug = _WHITESPACE_RUN.sub("-", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.strip("-")


def slug_matches(name: str | None, route_param: str) -> bool:
    """Check whether a route parameter addresses the record with this name.

    The slug recomputed from ``name`` is compared with the percent-decoded
    parameter first and with the raw parameter second, so already-encoded
    parameters still resolve.

    Args:
        name: Stored display name
        route_param: Parameter taken from the request path

    Returns:
        True if the recomputed slug matches the parameter
    """
    slug = generate_slug(name)
    if not slug:
        return False
    return slug in (unquote(route_param), route_param)


def find_slug_collisions(names: Iterable[str | None]) -> dict[str, list[str]]:
    """
    Group display names that normalise to the same slug.

    Lookups resolve a collision to the first matching record, so every
    group returned here hides all but one of its records.

    Args:
        names: Display names from one collection

    Returns:
        Mapping of slug to the colliding names (only slugs with 2+ names)

    Examples:
        >>> find_slug_collisions(["Acme & Co.", "Acme Co", "Other"])
        {'acme-co': ['Acme & Co.', 'Acme Co']}
    """
    groups: dict[str, list[str]] = {}

    for name in names:
        slug = generate_slug(name)
        if slug:
            groups.setdefault(slug, []).append(name)

    return {slug: group for slug, group in groups.items() if len(group) > 1}
