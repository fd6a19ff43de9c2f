"""Home page assembly."""

import asyncio

from src.cms.client import WordPressClient
from src.cms.content import hero_from_page, same_day_service_from_page, to_image_ref
from src.models.pages import (
    FAQEntry,
    FAQSection,
    HomePage,
    PageMetadata,
    TestimonialCard,
    WhyUsPoint,
    WhyUsSection,
)
from src.models.wordpress import WordPressFAQ, WordPressTestimonial, WordPressWhyUs
from src.pages.navigation import fetch_site_chrome
from src.pages.services import build_additional_service_card, build_service_card


def build_testimonial_card(
    testimonial: WordPressTestimonial, media_origin: str | None = None
) -> TestimonialCard:
    acf = testimonial.acf
    return TestimonialCard(
        client_name=acf.client_name or testimonial.title.rendered,
        designation=acf.designation,
        picture=to_image_ref(acf.profile_picture, media_origin),
        heading=acf.testimonial_heading,
        text=acf.testimonial,
    )


def build_why_us_section(why_us: WordPressWhyUs | None) -> WhyUsSection | None:
    if why_us is None:
        return None
    acf = why_us.acf
    return WhyUsSection(
        heading=acf.heading,
        sub_heading=acf.sub_heading,
        description=acf.description,
        points=[
            WhyUsPoint(number=item.number, heading=item.why_us_heading, description=item.description)
            for item in acf.items
        ],
    )


def build_faq_section(faq: WordPressFAQ | None) -> FAQSection | None:
    if faq is None:
        return None
    acf = faq.acf
    return FAQSection(
        heading=acf.heading,
        sub_heading=acf.sub_heading,
        entries=[
            FAQEntry(question=item.question, answer=item.answer or "")
            for item in acf.items
            if item.question
        ],
    )


async def build_home_page(client: WordPressClient, site_name: str = "") -> HomePage:
    """
    Assemble the home page from every CMS source it draws on.

    All sources are fetched concurrently; each one that fails degrades to its
    default (hero copy) or to an empty section.

    Args:
        client: WordPress client
        site_name: Site name used for the page title

    Returns:
        HomePage view model
    """
    (
        chrome,
        home,
        services,
        additional_services,
        testimonials,
        why_us,
        faq,
    ) = await asyncio.gather(
        fetch_site_chrome(client),
        client.fetch_home_page(),
        client.fetch_services(fetch_all=True),
        client.fetch_additional_services(fetch_all=True),
        client.fetch_testimonials(fetch_all=True),
        client.fetch_why_us(),
        client.fetch_faq(),
    )

    hero = hero_from_page(home, client.config.hero_image_fallback_url, client.media_origin)
    origin = client.media_origin

    return HomePage(
        metadata=PageMetadata(title=site_name or hero.headline or "", description=hero.body_text or ""),
        chrome=chrome,
        hero=hero,
        same_day_service=same_day_service_from_page(home, origin),
        services=[build_service_card(service, origin) for service in services],
        additional_services=[
            build_additional_service_card(service, origin) for service in additional_services
        ],
        testimonials=[build_testimonial_card(item, origin) for item in testimonials],
        why_us=build_why_us_section(why_us),
        faq=build_faq_section(faq),
    )
