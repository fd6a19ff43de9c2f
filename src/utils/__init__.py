"""Utility functions and helpers."""

from src.utils.config_loader import apply_env_overrides, load_site_config, load_yaml_config
from src.utils.logging import get_logger, setup_logging
from src.utils.media import get_media_origin, normalize_media_url, should_rewrite_media_host
from src.utils.routes import is_external_route, map_wordpress_url_to_route
from src.utils.slug import find_slug_collisions, generate_slug, slug_matches

__all__ = [
    "setup_logging",
    "get_logger",
    "generate_slug",
    "slug_matches",
    "find_slug_collisions",
    "map_wordpress_url_to_route",
    "is_external_route",
    "get_media_origin",
    "normalize_media_url",
    "should_rewrite_media_host",
    "load_yaml_config",
    "load_site_config",
    "apply_env_overrides",
]
