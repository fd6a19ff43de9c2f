"""Gallery page and gallery album pages.

Albums have no stored identifier: the album route is the slug of the album
name, recomputed on every request and compared with the route parameter.
"""

import asyncio

from loguru import logger
from pydantic import ValidationError

from src.cms.client import WordPressClient
from src.cms.content import to_image_ref
from src.constants import DEFAULT_ALBUM_NAME, DEFAULT_GALLERY_HEADING, DEFAULT_GALLERY_SUBHEADING
from src.models.pages import AlbumCard, AlbumPage, GalleryPage, PageMetadata
from src.models.wordpress import GalleryAlbum, GalleryPageFields, WordPressPage
from src.pages.navigation import fetch_site_chrome
from src.utils.slug import generate_slug, slug_matches

GALLERY_METADATA = PageMetadata(
    title="Gallery",
    description="Our Gallery - Some of the best shoots we have done",
)
ALBUM_NOT_FOUND = PageMetadata(title="Album Not Found")


def album_route(album_name: str | None) -> str | None:
    """Route of an album page, or None when the name has no usable slug."""
    slug = generate_slug(album_name)
    return f"/gallery/{slug}" if slug else None


def gallery_fields(page: WordPressPage | None) -> GalleryPageFields | None:
    if page is None:
        return None
    try:
        return page.fields_as(GalleryPageFields)
    except ValidationError as e:
        logger.error(f"Invalid gallery page ACF fields: {e}")
        return None


def build_album_cards(fields: GalleryPageFields, media_origin: str | None = None) -> list[AlbumCard]:
    """Album cards for the gallery grid; albums without a usable slug are skipped."""
    cards = []
    for album in fields.gallery_items:
        href = album_route(album.album_name)
        if href is None:
            logger.debug(f"Skipping gallery album without a usable name: {album.album_name!r}")
            continue
        cards.append(
            AlbumCard(
                name=album.album_name or DEFAULT_ALBUM_NAME,
                slug=generate_slug(album.album_name),
                href=href,
                cover=to_image_ref(album.album_cover_image, media_origin),
                image_count=len(album.gallery_images),
            )
        )
    return cards


def find_album(fields: GalleryPageFields, album_param: str) -> GalleryAlbum | None:
    """
    Find the album addressed by a route parameter.

    The first album whose recomputed slug matches wins; albums whose names
    collide after normalisation are unreachable.

    Args:
        fields: Gallery page ACF fields
        album_param: Raw (possibly percent-encoded) route parameter

    Returns:
        Matching album, or None
    """
    for album in fields.gallery_items:
        if slug_matches(album.album_name, album_param):
            return album
    return None


def album_metadata(album: GalleryAlbum | None) -> PageMetadata:
    name = (album.album_name if album else None) or DEFAULT_ALBUM_NAME
    return PageMetadata(title=f"{name} - Gallery", description=f"Gallery album: {name}")


async def fetch_album_metadata(client: WordPressClient, album_param: str) -> PageMetadata:
    """Page metadata for an album route, without assembling the page."""
    fields = gallery_fields(await client.fetch_gallery_page())
    if fields is None:
        return ALBUM_NOT_FOUND
    return album_metadata(find_album(fields, album_param))


async def build_gallery_page(client: WordPressClient) -> GalleryPage | None:
    """
    Assemble the gallery overview page.

    Args:
        client: WordPress client

    Returns:
        GalleryPage, or None if the CMS has no gallery page (not found)
    """
    chrome, page = await asyncio.gather(fetch_site_chrome(client), client.fetch_gallery_page())

    fields = gallery_fields(page)
    if fields is None:
        logger.warning("No gallery page found")
        return None

    return GalleryPage(
        metadata=GALLERY_METADATA,
        chrome=chrome,
        heading=fields.heading or DEFAULT_GALLERY_HEADING,
        subheading=fields.subheading or DEFAULT_GALLERY_SUBHEADING,
        background_image=to_image_ref(fields.background_image, client.media_origin),
        albums=build_album_cards(fields, client.media_origin),
    )


async def build_album_page(client: WordPressClient, album_param: str) -> AlbumPage | None:
    """
    Assemble a single gallery album page.

    Args:
        client: WordPress client
        album_param: Album route parameter as received

    Returns:
        AlbumPage, or None if the gallery page or the album is missing
    """
    chrome, page = await asyncio.gather(fetch_site_chrome(client), client.fetch_gallery_page())

    fields = gallery_fields(page)
    if fields is None:
        return None

    album = find_album(fields, album_param)
    if album is None:
        logger.info(f"No gallery album matches {album_param!r}")
        return None

    images = [to_image_ref(image, client.media_origin) for image in album.gallery_images]

    return AlbumPage(
        metadata=album_metadata(album),
        chrome=chrome,
        name=album.album_name or DEFAULT_ALBUM_NAME,
        slug=generate_slug(album.album_name),
        images=[image for image in images if image is not None],
    )
