"""Unit tests for home page assembly."""

from typing import Any

import pytest
from aioresponses import aioresponses

from src.cms.client import WordPressClient
from src.constants import DEFAULT_HERO_HEADLINE
from src.models.config import CMSConfig
from src.models.wordpress import WordPressFAQ, WordPressTestimonial, WordPressWhyUs
from src.pages.home import (
    build_faq_section,
    build_home_page,
    build_testimonial_card,
    build_why_us_section,
)

API = "https://cms.test/wp-json/wp/v2"


class TestSectionBuilders:
    """Test home page section builders."""

    def test_testimonial_falls_back_to_title(self) -> None:
        """Test the post title is used when no client name is set."""
        testimonial = WordPressTestimonial.model_validate(
            {"id": 1, "title": {"rendered": "Kamala"}, "acf": {"testimonial": "Lovely photos"}}
        )
        card = build_testimonial_card(testimonial)
        assert card.client_name == "Kamala"
        assert card.text == "Lovely photos"
        assert card.picture is None

    def test_why_us_section(self) -> None:
        """Test why-us points are mapped in order."""
        why_us = WordPressWhyUs.model_validate(
            {
                "id": 2,
                "acf": {
                    "heading": "Why Choose Us",
                    "why_us_": [
                        {"number": "01", "why_us_heading": "Experience", "description": "10 years"},
                        {"number": "02", "why_us_heading": "Speed"},
                    ],
                },
            }
        )
        section = build_why_us_section(why_us)
        assert section is not None
        assert [point.heading for point in section.points] == ["Experience", "Speed"]

    def test_faq_section_skips_blank_questions(self) -> None:
        """Test FAQ rows without a question are dropped."""
        faq = WordPressFAQ.model_validate(
            {
                "id": 3,
                "acf": {
                    "heading": "FAQ",
                    "faq": [{"question": "How long?", "answer": "A week"}, {"question": ""}],
                },
            }
        )
        section = build_faq_section(faq)
        assert section is not None
        assert [(e.question, e.answer) for e in section.entries] == [("How long?", "A week")]

    def test_missing_sections(self) -> None:
        """Test missing records produce no section."""
        assert build_why_us_section(None) is None
        assert build_faq_section(None) is None


class TestBuildHomePage:
    """Test build_home_page function."""

    @pytest.mark.asyncio
    async def test_home_page(
        self, cms_config: CMSConfig, additional_service_payload: list[dict[str, Any]]
    ) -> None:
        """Test the home page combines every source."""
        with aioresponses() as m:
            m.get(
                f"{API}/pages?slug=home",
                payload=[{"id": 1, "slug": "home", "acf": {"hero_heading": "Moments"}}],
            )
            m.get(
                f"{API}/service?per_page=100&page=1",
                payload=[{"id": 5, "slug": "weddings", "title": {"rendered": "Weddings"}}],
            )
            m.get(
                f"{API}/additional-service?per_page=100&page=1",
                payload=additional_service_payload,
            )
            m.get(
                f"{API}/testimonial?per_page=100&page=1",
                payload=[{"id": 6, "acf": {"client_name": "Kamala"}}],
            )
            m.get(f"{API}/why-us?slug=why-choose", payload=[{"id": 7, "acf": {"heading": "Why"}}])
            m.get(f"{API}/faq?slug=faq", payload=[])

            async with WordPressClient(cms_config) as client:
                page = await build_home_page(client, "100PX Studio")

        assert page.metadata.title == "100PX Studio"
        assert page.hero.headline == "Moments"
        assert [s.name for s in page.services] == ["Weddings"]
        assert page.additional_services[0].company_href == (
            "/additional-services/corporate-events/acme-co"
        )
        assert page.testimonials[0].client_name == "Kamala"
        assert page.why_us is not None
        assert page.why_us.heading == "Why"
        assert page.faq is None

    @pytest.mark.asyncio
    async def test_home_page_cms_down(self) -> None:
        """Test the home page still renders without a CMS."""
        async with WordPressClient(CMSConfig()) as client:
            page = await build_home_page(client)

        assert page.hero.headline == DEFAULT_HERO_HEADLINE
        assert page.metadata.title == DEFAULT_HERO_HEADLINE
        assert page.services == []
        assert page.chrome.header.links == []
