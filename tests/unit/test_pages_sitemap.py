"""Unit tests for route enumeration."""

from typing import Any

import pytest
from aioresponses import aioresponses

from src.cms.client import WordPressClient
from src.models.config import CMSConfig
from src.pages.sitemap import STATIC_ROUTES, enumerate_routes

API = "https://cms.test/wp-json/wp/v2"


class TestEnumerateRoutes:
    """Test enumerate_routes function."""

    @pytest.mark.asyncio
    async def test_all_routes(
        self,
        cms_config: CMSConfig,
        gallery_payload: list[dict[str, Any]],
        additional_service_payload: list[dict[str, Any]],
    ) -> None:
        """Test album, service and company routes are listed once each."""
        services = [
            *additional_service_payload,
            {"id": 31, "slug": "prints", "acf": {"company_name": ""}},
        ]

        with aioresponses() as m:
            m.get(f"{API}/pages?slug=gallery", payload=gallery_payload)
            m.get(f"{API}/additional-service?per_page=100&page=1", payload=services)

            async with WordPressClient(cms_config) as client:
                routes = await enumerate_routes(client)

        assert routes == [
            *STATIC_ROUTES,
            "/gallery/wedding-day",
            "/gallery/café-portraits",
            "/additional-services/corporate-events",
            "/additional-services/corporate-events/acme-co",
            "/additional-services/prints",
        ]

    @pytest.mark.asyncio
    async def test_cms_unavailable(self, cms_config: CMSConfig) -> None:
        """Test only fixed routes are listed when the CMS is down."""
        with aioresponses() as m:
            m.get(f"{API}/pages?slug=gallery", status=500, body="error")
            m.get(f"{API}/additional-service?per_page=100&page=1", status=500, body="error")

            async with WordPressClient(cms_config) as client:
                routes = await enumerate_routes(client)

        assert routes == STATIC_ROUTES
