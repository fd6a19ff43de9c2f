"""Async client for the WordPress REST API.

Every public fetch degrades instead of raising: a missing API URL, an HTTP
error, a transport failure or an invalid payload is logged and the call
returns ``None`` (single record) or ``[]`` (collection), so a page can still
render with its defaults.
"""

import asyncio
from collections.abc import Mapping
from typing import Any, TypeVar

import aiohttp
from loguru import logger
from pydantic import BaseModel, ValidationError
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from src.constants import (
    DEFAULT_FAQ_SLUG,
    DEFAULT_PER_PAGE,
    DEFAULT_WHY_US_SLUG,
    WP_API_PREFIX,
    WP_TOTAL_PAGES_HEADER,
)
from src.models.config import CMSConfig
from src.models.wordpress import (
    WordPressAdditionalService,
    WordPressFAQ,
    WordPressFooter,
    WordPressHeader,
    WordPressMedia,
    WordPressPage,
    WordPressPost,
    WordPressService,
    WordPressTestimonial,
    WordPressWhyUs,
    WPImage,
)
from src.utils.media import get_media_origin, normalize_media_url

T = TypeVar("T", bound=BaseModel)

TRANSIENT_ERRORS = (aiohttp.ClientConnectionError, asyncio.TimeoutError)
FETCH_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)


class CMSRequestError(Exception):
    """The WordPress API answered with an error status."""

    def __init__(self, message: str, endpoint: str, status: int | None = None):
        self.endpoint = endpoint
        self.status = status
        super().__init__(message)


class WordPressClient:
    """Fetches and validates content from a headless WordPress instance.

    Use as an async context manager to share one HTTP session across calls::

        async with WordPressClient(config) as client:
            page = await client.fetch_gallery_page()

    Outside a context each request opens a short-lived session.
    """

    def __init__(self, config: CMSConfig, session: aiohttp.ClientSession | None = None) -> None:
        self.config = config
        self._session = session
        self._owns_session = False
        self.media_origin = get_media_origin(config.media_reference_url)

    async def __aenter__(self) -> "WordPressClient":
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self._timeout())
            self._owns_session = True
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
            self._owns_session = False

    # ------------------------------------------------------------------
    # HTTP plumbing
    # ------------------------------------------------------------------

    def _timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self.config.timeout_seconds)

    def _url(self, endpoint: str) -> str:
        return f"{self.config.api_url.rstrip('/')}{WP_API_PREFIX}/{endpoint}"

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.config.user_agent,
        }
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    def _is_configured(self) -> bool:
        if not self.config.api_url:
            logger.error("WORDPRESS_API_URL is not set; skipping CMS request")
            return False
        return True

    async def _get(
        self,
        session: aiohttp.ClientSession,
        endpoint: str,
        params: Mapping[str, str] | None,
    ) -> tuple[Any, Mapping[str, str]]:
        url = self._url(endpoint)
        logger.debug(f"Fetching WordPress {endpoint} from {url} params={dict(params or {})}")

        async with session.get(url, params=params, headers=self._headers()) as response:
            if response.status >= 400:
                error_text = await response.text()
                logger.error(
                    f"WordPress API error ({response.status}) on {endpoint}: "
                    f"{response.reason} {error_text[:200]}"
                )
                raise CMSRequestError(
                    f"WordPress API error: {response.status} {response.reason}",
                    endpoint=endpoint,
                    status=response.status,
                )
            try:
                data = await response.json(content_type=None)
            except ValueError as e:
                # Maintenance and proxy error pages arrive as 200 HTML
                content_type = response.headers.get("Content-Type", "")
                logger.error(f"Non-JSON response ({content_type}) on {endpoint}: {e}")
                raise CMSRequestError(
                    f"WordPress API returned non-JSON content: {content_type}",
                    endpoint=endpoint,
                    status=response.status,
                ) from e
            return data, response.headers

    async def _request(
        self,
        endpoint: str,
        params: Mapping[str, str] | None = None,
    ) -> tuple[Any, Mapping[str, str]]:
        """GET an endpoint, retrying transient transport failures.

        Raises:
            CMSRequestError: For HTTP error statuses or non-JSON bodies (not retried)
            aiohttp.ClientError: When retries are exhausted
            asyncio.TimeoutError: When retries are exhausted
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.config.retry_attempts),
            wait=wait_exponential(
                min=self.config.retry_min_wait_seconds,
                max=self.config.retry_max_wait_seconds,
            ),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            reraise=True,
        )

        result: tuple[Any, Mapping[str, str]] = (None, {})
        async for attempt in retrying:
            with attempt:
                if self._session is not None:
                    result = await self._get(self._session, endpoint, params)
                else:
                    async with aiohttp.ClientSession(timeout=self._timeout()) as session:
                        result = await self._get(session, endpoint, params)
        return result

    # ------------------------------------------------------------------
    # Generic fetch helpers
    # ------------------------------------------------------------------

    def _validate_many(self, data: Any, model_class: type[T], label: str) -> list[T]:
        if not isinstance(data, list):
            logger.error(f"Unexpected {label} payload type: {type(data).__name__}")
            return []

        records = []
        for item in data:
            try:
                records.append(model_class.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid {label} record: {e}")
        return records

    async def _fetch_first(
        self,
        endpoint: str,
        model_class: type[T],
        params: Mapping[str, str],
        label: str,
    ) -> T | None:
        """Fetch a slug-filtered collection and return its first record."""
        if not self._is_configured():
            return None

        try:
            data, _ = await self._request(endpoint, params)
        except (CMSRequestError, *FETCH_ERRORS) as e:
            logger.error(f"Error fetching WordPress {label}: {e!r}")
            return None

        if not data:
            logger.info(f"No {label} found for {dict(params)}")
            return None

        records = self._validate_many(data, model_class, label)
        return records[0] if records else None

    async def _fetch_collection(
        self,
        endpoint: str,
        model_class: type[T],
        label: str,
        per_page: int | None = None,
        page: int | None = None,
        fetch_all: bool = False,
        extra_params: Mapping[str, str] | None = None,
    ) -> list[T]:
        """Fetch one page of a collection, or every page when fetch_all is set."""
        if not self._is_configured():
            return []

        if fetch_all:
            return await self._fetch_all_pages(
                endpoint, model_class, label, per_page or DEFAULT_PER_PAGE, extra_params
            )

        params = dict(extra_params or {})
        if per_page:
            params["per_page"] = str(per_page)
        if page:
            params["page"] = str(page)

        try:
            data, _ = await self._request(endpoint, params)
        except (CMSRequestError, *FETCH_ERRORS) as e:
            logger.error(f"Error fetching WordPress {label}: {e!r}")
            return []

        records = self._validate_many(data, model_class, label)
        logger.info(f"Fetched {len(records)} {label} from WordPress")
        return records

    async def _fetch_all_pages(
        self,
        endpoint: str,
        model_class: type[T],
        label: str,
        per_page: int,
        extra_params: Mapping[str, str] | None,
    ) -> list[T]:
        records: list[T] = []
        page = 1

        while True:
            params = {**(extra_params or {}), "per_page": str(per_page), "page": str(page)}
            try:
                data, headers = await self._request(endpoint, params)
            except (CMSRequestError, *FETCH_ERRORS) as e:
                # Keep what was collected so far
                logger.error(f"Stopped paging WordPress {label} at page {page}: {e!r}")
                break

            if not isinstance(data, list):
                logger.error(f"Stopped paging WordPress {label}: unexpected payload at page {page}")
                break

            records.extend(self._validate_many(data, model_class, label))

            try:
                total_pages = int(headers.get(WP_TOTAL_PAGES_HEADER, "1"))
            except ValueError:
                total_pages = 1

            if not data or page >= total_pages or len(data) < per_page:
                break
            page += 1

        logger.info(f"Fetched {len(records)} {label} from WordPress (all pages)")
        return records

    def _normalize_image(self, image: WPImage | None) -> WPImage | None:
        if image is None:
            return None
        url = normalize_media_url(image.url, self.media_origin) or image.url
        return image.model_copy(update={"url": url})

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    async def fetch_page(self, slug: str) -> WordPressPage | None:
        """Fetch a page by slug."""
        return await self._fetch_first("pages", WordPressPage, {"slug": slug}, f"page '{slug}'")

    async def fetch_home_page(self) -> WordPressPage | None:
        return await self.fetch_page("home")

    async def fetch_gallery_page(self) -> WordPressPage | None:
        return await self.fetch_page("gallery")

    async def fetch_services_page(self) -> WordPressPage | None:
        return await self.fetch_page("services")

    async def fetch_contact_page(self) -> WordPressPage | None:
        return await self.fetch_page("contact-us")

    # ------------------------------------------------------------------
    # Site chrome
    # ------------------------------------------------------------------

    async def fetch_header(self) -> WordPressHeader | None:
        """Fetch the header record with its logo pointed at the public media host."""
        header = await self._fetch_first("header", WordPressHeader, {"slug": "header"}, "header")
        if header is None or header.acf is None:
            return header

        logger.debug(
            f"Parsed header id={header.id} menu_items={len(header.acf.menu_items)} "
            f"has_logo={header.acf.logo is not None}"
        )
        acf = header.acf.model_copy(update={"logo": self._normalize_image(header.acf.logo)})
        return header.model_copy(update={"acf": acf})

    async def fetch_footer(self) -> WordPressFooter | None:
        """Fetch the footer record with its logo pointed at the public media host."""
        footer = await self._fetch_first("footer", WordPressFooter, {"slug": "footer"}, "footer")
        if footer is None or footer.acf is None:
            return footer

        logger.debug(
            f"Parsed footer id={footer.id} menu_items={len(footer.acf.menu)} "
            f"social_media={len(footer.acf.social_media)}"
        )
        acf = footer.acf.model_copy(update={"logo": self._normalize_image(footer.acf.logo)})
        return footer.model_copy(update={"acf": acf})

    # ------------------------------------------------------------------
    # Posts and media
    # ------------------------------------------------------------------

    async def fetch_posts(
        self,
        per_page: int | None = None,
        page: int | None = None,
        categories: list[int] | None = None,
        search: str | None = None,
    ) -> list[WordPressPost]:
        """Fetch posts with embedded featured media, terms and author."""
        params = {"_embed": "true"}
        if categories:
            params["categories"] = ",".join(str(c) for c in categories)
        if search:
            params["search"] = search
        return await self._fetch_collection(
            "posts", WordPressPost, "posts", per_page=per_page, page=page, extra_params=params
        )

    async def fetch_post(self, slug: str) -> WordPressPost | None:
        return await self._fetch_first(
            "posts", WordPressPost, {"slug": slug, "_embed": "true"}, f"post '{slug}'"
        )

    async def fetch_media(self, media_id: int) -> WordPressMedia | None:
        """Fetch a single media library item by ID."""
        if not self._is_configured():
            return None

        try:
            data, _ = await self._request(f"media/{media_id}")
            return WordPressMedia.model_validate(data)
        except (CMSRequestError, ValidationError, *FETCH_ERRORS) as e:
            logger.error(f"Error fetching WordPress media {media_id}: {e!r}")
            return None

    # ------------------------------------------------------------------
    # Custom post types
    # ------------------------------------------------------------------

    async def fetch_services(
        self, per_page: int | None = None, page: int | None = None, fetch_all: bool = False
    ) -> list[WordPressService]:
        return await self._fetch_collection(
            "service", WordPressService, "services", per_page, page, fetch_all
        )

    async def fetch_service(self, slug: str) -> WordPressService | None:
        return await self._fetch_first(
            "service", WordPressService, {"slug": slug}, f"service '{slug}'"
        )

    async def fetch_additional_services(
        self, per_page: int | None = None, page: int | None = None, fetch_all: bool = False
    ) -> list[WordPressAdditionalService]:
        return await self._fetch_collection(
            "additional-service",
            WordPressAdditionalService,
            "additional services",
            per_page,
            page,
            fetch_all,
        )

    async def fetch_additional_service(self, slug: str) -> WordPressAdditionalService | None:
        return await self._fetch_first(
            "additional-service",
            WordPressAdditionalService,
            {"slug": slug},
            f"additional service '{slug}'",
        )

    async def fetch_testimonials(
        self, per_page: int | None = None, page: int | None = None, fetch_all: bool = False
    ) -> list[WordPressTestimonial]:
        return await self._fetch_collection(
            "testimonial", WordPressTestimonial, "testimonials", per_page, page, fetch_all
        )

    async def fetch_why_us(self, slug: str | None = None) -> WordPressWhyUs | None:
        target = slug or DEFAULT_WHY_US_SLUG
        return await self._fetch_first("why-us", WordPressWhyUs, {"slug": target}, "why-us")

    async def fetch_faq(self, slug: str | None = None) -> WordPressFAQ | None:
        target = slug or DEFAULT_FAQ_SLUG
        return await self._fetch_first("faq", WordPressFAQ, {"slug": target}, "FAQ")
