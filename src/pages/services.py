"""Services, additional service and additional service company pages."""

import asyncio
from html import unescape

from loguru import logger
from pydantic import ValidationError

from src.cms.client import WordPressClient
from src.cms.content import to_image_ref
from src.constants import (
    DEFAULT_ADDITIONAL_SERVICE_BUTTON_TEXT,
    DEFAULT_SERVICES_HEADING,
    FALLBACK_ROUTE,
)
from src.models.pages import (
    AdditionalServiceCard,
    AdditionalServicePage,
    AlbumCard,
    CompanyGalleryPage,
    ImageRef,
    PageMetadata,
    ServiceCard,
    ServicesPage,
)
from src.models.wordpress import (
    ServicesPageFields,
    WordPressAdditionalService,
    WordPressService,
    WPImage,
)
from src.pages.gallery import album_route
from src.pages.navigation import fetch_site_chrome
from src.utils.slug import generate_slug, slug_matches

SERVICE_NOT_FOUND = PageMetadata(title="Service Not Found")
GALLERY_NOT_FOUND = PageMetadata(title="Gallery Not Found")


def _images(images: list[WPImage], media_origin: str | None) -> list[ImageRef]:
    refs = [to_image_ref(image, media_origin) for image in images]
    return [ref for ref in refs if ref is not None]


def service_name(service: WordPressService | WordPressAdditionalService) -> str:
    """Display name: the ACF service name, else the post title."""
    return service.acf.service_name or unescape(service.title.rendered)


def additional_service_route(slug: str) -> str:
    return f"/additional-services/{slug}"


def company_route(service_slug: str, company_name: str | None) -> str | None:
    """Route of a company gallery, or None when the company name has no usable slug."""
    company_slug = generate_slug(company_name)
    if not company_slug:
        return None
    return f"{additional_service_route(service_slug)}/{company_slug}"


def additional_service_price(service: WordPressAdditionalService) -> str | None:
    return service.acf.price or service.acf.additional_service_price


# Service cards


def build_service_card(service: WordPressService, media_origin: str | None = None) -> ServiceCard:
    acf = service.acf
    albums = []
    for album in acf.albums:
        href = album_route(album.album_name)
        if href is None:
            continue
        albums.append(
            AlbumCard(
                name=album.album_name or "",
                slug=generate_slug(album.album_name),
                href=href,
                cover=to_image_ref(album.album_cover, media_origin),
                image_count=len(album.service_gallery),
            )
        )

    return ServiceCard(
        name=service_name(service),
        slug=service.slug,
        price=acf.service_price,
        additional_charges=acf.additional_charges,
        description=acf.service_description,
        image=to_image_ref(acf.service_image, media_origin),
        gallery=_images(acf.service_gallery, media_origin),
        albums=albums,
        button_text=acf.service_button_text,
        button_link=acf.service_button_link.url if acf.service_button_link else None,
    )


def build_additional_service_card(
    service: WordPressAdditionalService, media_origin: str | None = None
) -> AdditionalServiceCard:
    return AdditionalServiceCard(
        name=service_name(service),
        slug=service.slug,
        href=additional_service_route(service.slug),
        price=additional_service_price(service),
        image=to_image_ref(service.acf.service_image, media_origin),
        company_name=service.acf.company_name,
        company_href=company_route(service.slug, service.acf.company_name),
    )


# Services page


async def build_services_page(client: WordPressClient) -> ServicesPage:
    """Assemble the services page; missing CMS content falls back to defaults."""
    chrome, page, services = await asyncio.gather(
        fetch_site_chrome(client),
        client.fetch_services_page(),
        client.fetch_services(fetch_all=True),
    )

    fields = ServicesPageFields()
    if page is not None:
        try:
            fields = page.fields_as(ServicesPageFields)
        except ValidationError as e:
            logger.error(f"Invalid services page ACF fields: {e}")

    heading = fields.heading or DEFAULT_SERVICES_HEADING
    return ServicesPage(
        metadata=PageMetadata(title="Services", description=fields.sub_heading or heading),
        chrome=chrome,
        heading=heading,
        subheading=fields.sub_heading,
        background_image=to_image_ref(fields.background_image, client.media_origin),
        services=[build_service_card(service, client.media_origin) for service in services],
    )


# Additional service page


def additional_service_metadata(service: WordPressAdditionalService | None) -> PageMetadata:
    if service is None:
        return SERVICE_NOT_FOUND
    name = service_name(service)
    return PageMetadata(
        title=name,
        description=service.acf.description or f"Professional {name} services",
    )


async def build_additional_service_page(
    client: WordPressClient, slug: str
) -> AdditionalServicePage | None:
    """
    Assemble an additional service page.

    Args:
        client: WordPress client
        slug: WordPress slug of the additional service

    Returns:
        AdditionalServicePage, or None if no such service exists
    """
    chrome, service = await asyncio.gather(
        fetch_site_chrome(client), client.fetch_additional_service(slug)
    )
    if service is None:
        logger.info(f"No additional service with slug {slug!r}")
        return None

    acf = service.acf
    return AdditionalServicePage(
        metadata=additional_service_metadata(service),
        chrome=chrome,
        name=service_name(service),
        slug=service.slug or slug,
        price=additional_service_price(service),
        description=acf.description,
        image=to_image_ref(acf.service_image, client.media_origin),
        gallery=_images(acf.gallery, client.media_origin),
        company_name=acf.company_name,
        company_logo=to_image_ref(acf.company_logo, client.media_origin),
        company_href=company_route(service.slug or slug, acf.company_name),
        button_text=acf.button_text or DEFAULT_ADDITIONAL_SERVICE_BUTTON_TEXT,
        button_link=(acf.button_link.url if acf.button_link else "") or FALLBACK_ROUTE,
    )


# Company gallery page


def company_matches(service: WordPressAdditionalService, company_param: str) -> bool:
    """Check a company route parameter against the service's recomputed company slug."""
    return slug_matches(service.acf.company_name, company_param)


def company_gallery_metadata(
    service: WordPressAdditionalService | None, company_param: str
) -> PageMetadata:
    if service is None or not company_matches(service, company_param):
        return GALLERY_NOT_FOUND

    name = service_name(service)
    company = service.acf.company_name or ""
    return PageMetadata(
        title=f"{name} - {company} Gallery",
        description=f"Gallery for {name} by {company}",
    )


async def build_company_gallery_page(
    client: WordPressClient, slug: str, company_param: str
) -> CompanyGalleryPage | None:
    """
    Assemble the gallery of one company an additional service was delivered for.

    Args:
        client: WordPress client
        slug: WordPress slug of the additional service
        company_param: Company route parameter as received (may be percent-encoded)

    Returns:
        CompanyGalleryPage, or None if the service is missing or the company
        slug does not match
    """
    chrome, service = await asyncio.gather(
        fetch_site_chrome(client), client.fetch_additional_service(slug)
    )
    if service is None:
        logger.info(f"No additional service with slug {slug!r}")
        return None

    if not company_matches(service, company_param):
        logger.info(f"Company {company_param!r} does not match additional service {slug!r}")
        return None

    acf = service.acf
    return CompanyGalleryPage(
        metadata=company_gallery_metadata(service, company_param),
        chrome=chrome,
        service_name=service_name(service),
        service_slug=service.slug or slug,
        company_name=acf.company_name or "",
        company_slug=generate_slug(acf.company_name),
        company_logo=to_image_ref(acf.company_logo, client.media_origin),
        price=additional_service_price(service),
        description=acf.description,
        gallery=_images(acf.gallery, client.media_origin),
        button_text=acf.button_text or DEFAULT_ADDITIONAL_SERVICE_BUTTON_TEXT,
        back_href=additional_service_route(service.slug or slug),
    )
