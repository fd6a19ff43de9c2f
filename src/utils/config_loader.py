"""Configuration loading utilities."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from src.utils.logging import get_logger

if TYPE_CHECKING:
    from src.models.config import SiteConfig

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

# Environment variable -> CMSConfig field
CMS_ENV_OVERRIDES = {
    "WORDPRESS_API_URL": "api_url",
    "WORDPRESS_API_KEY": "api_key",
    "WORDPRESS_MEDIA_BASE_URL": "media_base_url",
    "HERO_IMAGE_URL": "hero_image_fallback_url",
}


def load_yaml_config(file_path: Path | str, model_class: type[T]) -> T:
    """
    Load and validate YAML configuration file.

    Args:
        file_path: Path to YAML configuration file
        model_class: Pydantic model class to validate against

    Returns:
        Validated configuration instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
        yaml.YAMLError: If YAML is malformed
    """
    path = Path(file_path)

    if not path.exists():
        logger.error("Configuration file not found", path=str(path))
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with path.open("r") as f:
            raw_config = yaml.safe_load(f) or {}

        config = model_class.model_validate(raw_config)
        logger.info("Configuration loaded", path=str(path), model=model_class.__name__)
        return config

    except yaml.YAMLError as e:
        logger.error("Invalid YAML syntax", path=str(path), error=str(e))
        raise

    except ValidationError as e:
        logger.error("Configuration validation failed", path=str(path), error=str(e))
        raise


def apply_env_overrides(config: "SiteConfig", environ: Mapping[str, str] | None = None) -> "SiteConfig":
    """
    Overlay CMS settings from environment variables.

    Non-empty variables win over values from the YAML file.

    Args:
        config: Configuration loaded from file (or defaults)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        New SiteConfig with overrides applied
    """
    env = os.environ if environ is None else environ
    overrides = {field: env[var] for var, field in CMS_ENV_OVERRIDES.items() if env.get(var)}

    if not overrides:
        return config

    logger.debug("Applying environment overrides", fields=sorted(overrides))
    cms = config.cms.model_copy(update=overrides)
    return config.model_copy(update={"cms": cms})


def load_site_config(
    file_path: Path | str | None = "config/site.yaml",
    environ: Mapping[str, str] | None = None,
) -> "SiteConfig":
    """
    Load site configuration from YAML and the environment.

    Args:
        file_path: Path to site.yaml, or None to use defaults only
        environ: Environment mapping (defaults to os.environ)

    Returns:
        SiteConfig instance
    """
    from src.models.config import SiteConfig

    if file_path is None:
        config = SiteConfig()
    else:
        config = load_yaml_config(file_path, SiteConfig)

    config = apply_env_overrides(config, environ)

    if not config.cms.api_url:
        logger.warning("WORDPRESS_API_URL is not set; CMS requests will return empty content")

    return config
