"""Mapping of the home page ACF groups onto hero and same-day service content."""

from loguru import logger
from pydantic import ValidationError

from src.cms.client import WordPressClient
from src.constants import (
    DEFAULT_HERO_BODY,
    DEFAULT_HERO_CTA_LINK,
    DEFAULT_HERO_CTA_TEXT,
    DEFAULT_HERO_HEADLINE,
    DEFAULT_HERO_IMAGE_ALT,
    DEFAULT_HERO_PRE_HEADLINE,
)
from src.models.pages import HeroContent, ImageRef, SameDayServiceContent
from src.models.wordpress import HomePageFields, WordPressPage, WPImage
from src.utils.media import normalize_media_url


def to_image_ref(image: WPImage | None, media_origin: str | None) -> ImageRef | None:
    """
    Convert an ACF image into a renderable image reference.

    Args:
        image: ACF image (None when the field is empty)
        media_origin: Public media origin used to rewrite local hosts

    Returns:
        ImageRef, or None when there is no usable URL
    """
    if image is None:
        return None

    url = normalize_media_url(image.url, media_origin)
    if not url:
        return None

    return ImageRef(url=url, alt=image.alt, width=image.width, height=image.height)


def _home_fields(page: WordPressPage | None) -> HomePageFields | None:
    if page is None or not page.acf:
        return None
    try:
        return page.fields_as(HomePageFields)
    except ValidationError as e:
        logger.error(f"Invalid home page ACF fields: {e}")
        return None


def default_hero(fallback_image: str | None = None) -> HeroContent:
    """Hero copy used when the CMS has no home page content."""
    return HeroContent(
        pre_headline=DEFAULT_HERO_PRE_HEADLINE,
        headline=DEFAULT_HERO_HEADLINE,
        body_text=DEFAULT_HERO_BODY,
        hero_image=fallback_image,
        hero_image_alt=DEFAULT_HERO_IMAGE_ALT,
        cta_text=DEFAULT_HERO_CTA_TEXT,
        cta_link=DEFAULT_HERO_CTA_LINK,
    )


def hero_from_page(
    page: WordPressPage | None,
    fallback_image: str | None = None,
    media_origin: str | None = None,
) -> HeroContent:
    """
    Build hero content from the home page; each empty field keeps its default.

    Args:
        page: The 'home' page, or None if it was not found
        fallback_image: Hero image used when the page has none
        media_origin: Public media origin

    Returns:
        HeroContent with every field populated except possibly hero_image
    """
    if page is None:
        logger.info("No home page found, using default hero content")
        return default_hero(fallback_image)

    acf = _home_fields(page)
    if acf is None:
        logger.warning(
            "ACF fields not found on the home page; enable ACF in the REST API to edit the hero"
        )
        return default_hero(fallback_image)

    defaults = default_hero(fallback_image)
    background = to_image_ref(acf.background_image, media_origin)

    return HeroContent(
        pre_headline=acf.hero_subheading or defaults.pre_headline,
        headline=acf.hero_heading or defaults.headline,
        body_text=acf.hero_description or defaults.body_text,
        hero_image=background.url if background else fallback_image,
        hero_image_alt=(background.alt if background else None) or defaults.hero_image_alt,
        cta_text=acf.hero_button_text or defaults.cta_text,
        cta_link=acf.hero_button_link or defaults.cta_link,
    )


def same_day_service_from_page(
    page: WordPressPage | None,
    media_origin: str | None = None,
) -> SameDayServiceContent:
    """Build the same-day service block; absent fields stay None."""
    acf = _home_fields(page)
    if acf is None:
        logger.info("No home page ACF fields found for same day service")
        return SameDayServiceContent()

    return SameDayServiceContent(
        service_name=acf.service_name,
        service_description=acf.service_description,
        service_image=to_image_ref(acf.service_image, media_origin),
        service_subheading=acf.service_subheading,
        service_heading=acf.service_heading,
        service_button_text=acf.service_button_text,
        service_button_link=(acf.service_button_link.url or None)
        if acf.service_button_link
        else None,
    )


async def fetch_hero_content(client: WordPressClient) -> HeroContent:
    """Fetch the home page and map its hero fields."""
    page = await client.fetch_home_page()
    return hero_from_page(page, client.config.hero_image_fallback_url, client.media_origin)


async def fetch_same_day_service_content(client: WordPressClient) -> SameDayServiceContent:
    """Fetch the home page and map its same-day service fields."""
    page = await client.fetch_home_page()
    return same_day_service_from_page(page, client.media_origin)
