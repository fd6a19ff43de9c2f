"""Application-wide constants.

Contains the fixed route table, CMS defaults and fallback copy used across the
codebase to avoid magic strings and keep pages consistent.
"""

# Routing
FALLBACK_ROUTE = "#"  # Non-navigating anchor for unmappable links
WORDPRESS_ROUTE_MAP: dict[str, str] = {
    "/home": "/",
    "/services": "/services",
    "/gallery": "/gallery",
    "/contact-us": "/contact-us",
}
DEFAULT_CMS_HOSTS = ("100px.lk", "100px.local")  # Host markers of the studio's own CMS

# Media
LOCAL_MEDIA_HOSTS = ("localhost", "127.0.0.1")  # Also rewritten: any host ending in ".local"

# WordPress REST API
WP_API_PREFIX = "/wp-json/wp/v2"
WP_TOTAL_PAGES_HEADER = "X-WP-TotalPages"
DEFAULT_PER_PAGE = 100  # Page size when walking every page of a collection
DEFAULT_WHY_US_SLUG = "why-choose"
DEFAULT_FAQ_SLUG = "faq"

# HTTP
DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_RETRY_ATTEMPTS = 3
DEFAULT_RETRY_MIN_WAIT = 2  # Minimum wait time between retries (seconds)
DEFAULT_RETRY_MAX_WAIT = 10  # Maximum wait time between retries (seconds)

# Hero defaults
DEFAULT_HERO_PRE_HEADLINE = "Capturing Life's Precious Moments with Artistic Excellence"
DEFAULT_HERO_HEADLINE = "Your Story, Our Lens"
DEFAULT_HERO_BODY = (
    "From stunning portraits to timeless family memories, corporate headshots to vibrant "
    "fashion shoots, every image tells your unique story. Discover professional "
    "photography services in Colombo, designed to beautifully preserve your most "
    "cherished moments."
)
DEFAULT_HERO_IMAGE_ALT = "Hero background"
DEFAULT_HERO_CTA_TEXT = "BOOK YOUR SESSION"
DEFAULT_HERO_CTA_LINK = "/contact"

# Page defaults
DEFAULT_QUICK_BUTTON_TEXT = "Book Your Session"
DEFAULT_GALLERY_HEADING = "Our Gallery"
DEFAULT_GALLERY_SUBHEADING = "some of the best shoots we have done"
DEFAULT_SERVICES_HEADING = "Our Services"
DEFAULT_CONTACT_HEADING = "Contact Us"
DEFAULT_CONTACT_SUBHEADING = "Feel Free to contact us for inquiries"
DEFAULT_CONTACT_DESCRIPTION = (
    "Send us a message using our contact form or send us messages on any social media."
)
DEFAULT_ALBUM_NAME = "Album"
DEFAULT_ADDITIONAL_SERVICE_BUTTON_TEXT = "Contact Us For The Price"
