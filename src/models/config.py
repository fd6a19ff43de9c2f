"""Configuration models for the site."""

from typing import Literal

from pydantic import BaseModel, Field

from src.constants import (
    DEFAULT_CMS_HOSTS,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_MAX_WAIT,
    DEFAULT_RETRY_MIN_WAIT,
    DEFAULT_TIMEOUT_SECONDS,
)


class CMSConfig(BaseModel):
    """Connection settings for the headless WordPress instance."""

    api_url: str = Field(default="", description="WordPress base URL (without /wp-json)")
    api_key: str | None = Field(default=None, description="Bearer token for the REST API")
    media_base_url: str | None = Field(
        default=None, description="Public media host; defaults to api_url"
    )
    hero_image_fallback_url: str | None = Field(
        default=None, description="Hero image used when the CMS provides none"
    )
    cms_hosts: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CMS_HOSTS),
        description="Host markers identifying links to the studio's own CMS",
    )
    timeout_seconds: int = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    retry_attempts: int = Field(default=DEFAULT_RETRY_ATTEMPTS, ge=1)
    retry_min_wait_seconds: float = Field(default=DEFAULT_RETRY_MIN_WAIT, ge=0)
    retry_max_wait_seconds: float = Field(default=DEFAULT_RETRY_MAX_WAIT, ge=0)
    user_agent: str = Field(default="studio-site/1.0")

    @property
    def media_reference_url(self) -> str | None:
        """URL the public media origin is derived from."""
        return self.media_base_url or self.api_url or None


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    serialize: bool = Field(default=False, description="Serialize file logs to JSON")
    colorize: bool = Field(default=True, description="Colorize console output")
    file_path: str | None = Field(default="logs/site.log", description="None disables file logs")
    rotation: str = Field(default="50 MB", description="Log rotation size/time")
    retention: str = Field(default="14 days", description="Log retention period")
    compression: str = Field(default="zip", description="Compression format for rotated logs")


class SiteMetadata(BaseModel):
    """Site metadata."""

    name: str = Field(default="100PX Studio")
    description: str = Field(default="Professional photography studio")
    environment: Literal["production", "development"] = Field(default="production")


class SiteConfig(BaseModel):
    """Complete site configuration."""

    site: SiteMetadata = Field(default_factory=SiteMetadata)
    cms: CMSConfig = Field(default_factory=CMSConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
