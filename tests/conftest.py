"""Shared pytest fixtures and configuration."""

from typing import Any

import pytest

from src.models.config import CMSConfig

API_URL = "https://cms.test"
API_BASE = f"{API_URL}/wp-json/wp/v2"


def image_payload(url: str, alt: str = "", image_id: int = 1) -> dict[str, Any]:
    """ACF image field as returned by the REST API."""
    return {"ID": image_id, "url": url, "alt": alt, "width": 1200, "height": 800, "sizes": {}}


def link_payload(url: str, title: str = "") -> dict[str, Any]:
    """ACF link field as returned by the REST API."""
    return {"title": title, "url": url, "target": ""}


@pytest.fixture
def cms_config() -> CMSConfig:
    """CMS configuration pointing at a fake host, with retries disabled."""
    return CMSConfig(
        api_url=API_URL,
        retry_attempts=1,
        retry_min_wait_seconds=0,
        retry_max_wait_seconds=0,
    )


@pytest.fixture
def header_payload() -> list[dict[str, Any]]:
    """Header post with a logo, a menu and a quick button."""
    return [
        {
            "id": 10,
            "slug": "header",
            "title": {"rendered": "Header"},
            "acf": {
                "logo": image_payload("http://100px.local/wp-content/uploads/logo.png", "100PX"),
                "menu_items": [
                    {
                        "acf_fc_layout": "menu_item",
                        "menu_item_name": "Home",
                        "menu_item_link": link_payload("https://100px.lk/home/", "Home"),
                    },
                    {
                        "acf_fc_layout": "menu_item",
                        "menu_item_name": "Gallery",
                        "menu_item_link": link_payload("https://100px.lk/gallery/", "Gallery"),
                    },
                    {
                        "acf_fc_layout": "menu_item",
                        "menu_item_name": "Blog",
                        "menu_item_link": link_payload("https://blog.example.com/latest"),
                    },
                ],
                "quick_button_text": "Book Now",
                "quick_button_link": link_payload("https://100px.lk/contact-us/"),
            },
        }
    ]


@pytest.fixture
def footer_payload() -> list[dict[str, Any]]:
    """Footer post with menus, contact lines and social links."""
    return [
        {
            "id": 11,
            "slug": "footer",
            "title": {"rendered": "Footer"},
            "acf": {
                "logo": False,
                "menu": [
                    {
                        "acf_fc_layout": "menu_item",
                        "menu_item_name": "Services",
                        "menu_item_link": link_payload("https://100px.lk/services/"),
                    }
                ],
                "important_links": [
                    {
                        "acf_fc_layout": "important_link",
                        "important_link_text": "Contact",
                        "important_links": link_payload("/contact-us"),
                    }
                ],
                "icon_groups": [
                    {"acf_fc_layout": "group", "list_name": "Phone", "list_content": "+94 77 000 0000"},
                    {"acf_fc_layout": "group", "list_name": "", "list_content": ""},
                ],
                "social_media": [
                    {
                        "acf_fc_layout": "social",
                        "social_media_name": "Instagram",
                        "social_media_links_items": link_payload("https://instagram.com/100px"),
                    }
                ],
            },
        }
    ]


@pytest.fixture
def gallery_payload() -> list[dict[str, Any]]:
    """Gallery page with three albums, two of which collide on slug."""
    return [
        {
            "id": 20,
            "slug": "gallery",
            "title": {"rendered": "Gallery"},
            "acf": {
                "heading": "Our Work",
                "subheading": "",
                "background_image": False,
                "gallery_items": [
                    {
                        "acf_fc_layout": "album",
                        "album_name": "Wedding Day",
                        "album_cover_image": image_payload("/wp-content/uploads/wedding.jpg"),
                        "gallery_images": [
                            image_payload("http://100px.local/wp-content/uploads/w1.jpg", image_id=2),
                            image_payload("http://100px.local/wp-content/uploads/w2.jpg", image_id=3),
                        ],
                    },
                    {
                        "acf_fc_layout": "album",
                        "album_name": "Wedding-Day!",
                        "album_cover_image": False,
                        "gallery_images": False,
                    },
                    {
                        "acf_fc_layout": "album",
                        "album_name": "Café Portraits",
                        "album_cover_image": False,
                        "gallery_images": "",
                    },
                ],
            },
        }
    ]


@pytest.fixture
def additional_service_payload() -> list[dict[str, Any]]:
    """One additional service delivered for a company."""
    return [
        {
            "id": 30,
            "slug": "corporate-events",
            "title": {"rendered": "Corporate Events &amp; Launches"},
            "acf": {
                "service_name": "",
                "price": "",
                "additional_service_price": "LKR 50,000",
                "service_image": image_payload("https://cms.test/wp-content/uploads/event.jpg"),
                "description": "Event coverage",
                "gallery": [image_payload("https://cms.test/wp-content/uploads/e1.jpg")],
                "company_logo": False,
                "company_name": "Acme & Co.",
                "button_text": "",
                "button_link": False,
            },
        }
    ]
