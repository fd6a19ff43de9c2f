"""Unit tests for header and footer navigation."""

from typing import Any

import pytest
from aioresponses import aioresponses

from src.cms.client import WordPressClient
from src.models.config import CMSConfig
from src.models.wordpress import MenuLink, WordPressFooter, WordPressHeader
from src.pages.navigation import build_footer_nav, build_header_nav, fetch_site_chrome, nav_link

API = "https://cms.test/wp-json/wp/v2"


class TestNavLink:
    """Test nav_link function."""

    def test_cms_link_mapped(self) -> None:
        """Test a studio CMS link becomes a site route."""
        link = nav_link("Home", MenuLink(url="https://100px.lk/home/"))
        assert link.href == "/"
        assert link.external is False

    def test_external_link(self) -> None:
        """Test external links are flagged."""
        link = nav_link("Instagram", MenuLink(url="https://instagram.com/100px"))
        assert link.href == "https://instagram.com/100px"
        assert link.external is True

    def test_empty_link(self) -> None:
        """Test an empty link field maps to the fallback anchor."""
        link = nav_link("Soon", None)
        assert link.href == "#"
        assert link.label == "Soon"

    def test_label_falls_back_to_link_title(self) -> None:
        """Test the link title is used when the row has no label."""
        assert nav_link("", MenuLink(title="Gallery", url="/gallery")).label == "Gallery"


class TestBuildHeaderNav:
    """Test build_header_nav function."""

    def test_missing_header(self) -> None:
        """Test a missing header renders an empty menu with the default button."""
        nav = build_header_nav(None)
        assert nav.links == []
        assert nav.logo is None
        assert nav.quick_button.label == "Book Your Session"
        assert nav.quick_button.href == "#"

    def test_header_links(self, header_payload: list[dict[str, Any]]) -> None:
        """Test menu rows and the quick button."""
        header = WordPressHeader.model_validate(header_payload[0])
        nav = build_header_nav(header, "https://cms.test")

        assert [(link.label, link.href) for link in nav.links] == [
            ("Home", "/"),
            ("Gallery", "/gallery"),
            ("Blog", "https://blog.example.com/latest"),
        ]
        assert nav.links[2].external is True
        assert nav.logo is not None
        assert nav.logo.url == "https://cms.test/wp-content/uploads/logo.png"
        # Quick button keeps the raw CMS URL
        assert nav.quick_button.label == "Book Now"
        assert nav.quick_button.href == "https://100px.lk/contact-us/"

    def test_header_without_quick_button(self) -> None:
        """Test empty quick button fields fall back."""
        header = WordPressHeader.model_validate(
            {"id": 1, "acf": {"menu_items": False, "quick_button_text": "", "quick_button_link": False}}
        )
        nav = build_header_nav(header)
        assert nav.quick_button.label == "Book Your Session"
        assert nav.quick_button.href == "#"


class TestBuildFooterNav:
    """Test build_footer_nav function."""

    def test_missing_footer(self) -> None:
        """Test a missing footer renders empty."""
        nav = build_footer_nav(None)
        assert nav.links == []
        assert nav.social_links == []

    def test_footer_sections(self, footer_payload: list[dict[str, Any]]) -> None:
        """Test footer menus, contact lines and social links."""
        footer = WordPressFooter.model_validate(footer_payload[0])
        nav = build_footer_nav(footer)

        assert [link.href for link in nav.links] == ["/services"]
        assert [link.href for link in nav.important_links] == ["/contact-us"]
        assert [group.name for group in nav.contact_groups] == ["Phone"]
        assert nav.social_links[0].external is True
        assert nav.logo is None


class TestFetchSiteChrome:
    """Test fetch_site_chrome function."""

    @pytest.mark.asyncio
    async def test_fetch_site_chrome(
        self,
        cms_config: CMSConfig,
        header_payload: list[dict[str, Any]],
        footer_payload: list[dict[str, Any]],
    ) -> None:
        """Test header and footer are fetched and built together."""
        with aioresponses() as m:
            m.get(f"{API}/header?slug=header", payload=header_payload)
            m.get(f"{API}/footer?slug=footer", payload=footer_payload)

            async with WordPressClient(cms_config) as client:
                chrome = await fetch_site_chrome(client)

        assert len(chrome.header.links) == 3
        assert chrome.footer.contact_groups[0].content == "+94 77 000 0000"

    @pytest.mark.asyncio
    async def test_fetch_site_chrome_cms_down(self, cms_config: CMSConfig) -> None:
        """Test chrome still renders when both fetches fail."""
        with aioresponses() as m:
            m.get(f"{API}/header?slug=header", status=500, body="error")
            m.get(f"{API}/footer?slug=footer", status=500, body="error")

            async with WordPressClient(cms_config) as client:
                chrome = await fetch_site_chrome(client)

        assert chrome.header.links == []
        assert chrome.header.quick_button.href == "#"
        assert chrome.footer.links == []
