"""Pydantic data models for the site."""

from src.models.config import CMSConfig, LoggingConfig, SiteConfig, SiteMetadata
from src.models.pages import (
    AdditionalServiceCard,
    AdditionalServicePage,
    AlbumCard,
    AlbumPage,
    CompanyGalleryPage,
    ContactFormResult,
    ContactGroup,
    ContactPage,
    ContactSubmission,
    FAQEntry,
    FAQSection,
    FooterContactGroup,
    FooterNav,
    GalleryPage,
    HeaderNav,
    HeroContent,
    HomePage,
    ImageRef,
    NavLink,
    PageMetadata,
    SameDayServiceContent,
    ServiceCard,
    ServicesPage,
    SiteChrome,
    TestimonialCard,
    WhyUsPoint,
    WhyUsSection,
)
from src.models.wordpress import (
    AdditionalServiceFields,
    ContactPageFields,
    FAQFields,
    FooterFields,
    GalleryAlbum,
    GalleryPageFields,
    HeaderFields,
    HomePageFields,
    MenuItem,
    MenuLink,
    ServiceFields,
    ServicesPageFields,
    TestimonialFields,
    WhyUsFields,
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

__all__ = [
    # Config
    "CMSConfig",
    "LoggingConfig",
    "SiteMetadata",
    "SiteConfig",
    # WordPress records
    "WordPressPage",
    "WordPressHeader",
    "WordPressFooter",
    "WordPressService",
    "WordPressAdditionalService",
    "WordPressTestimonial",
    "WordPressWhyUs",
    "WordPressFAQ",
    "WordPressPost",
    "WordPressMedia",
    # ACF field groups
    "WPImage",
    "MenuLink",
    "MenuItem",
    "HeaderFields",
    "FooterFields",
    "HomePageFields",
    "ContactPageFields",
    "GalleryAlbum",
    "GalleryPageFields",
    "ServicesPageFields",
    "ServiceFields",
    "AdditionalServiceFields",
    "TestimonialFields",
    "WhyUsFields",
    "FAQFields",
    # Page view models
    "ImageRef",
    "NavLink",
    "PageMetadata",
    "HeaderNav",
    "FooterContactGroup",
    "FooterNav",
    "SiteChrome",
    "HeroContent",
    "SameDayServiceContent",
    "AlbumCard",
    "ServiceCard",
    "AdditionalServiceCard",
    "TestimonialCard",
    "WhyUsPoint",
    "WhyUsSection",
    "FAQEntry",
    "FAQSection",
    "HomePage",
    "GalleryPage",
    "AlbumPage",
    "ServicesPage",
    "AdditionalServicePage",
    "CompanyGalleryPage",
    "ContactGroup",
    "ContactPage",
    "ContactSubmission",
    "ContactFormResult",
]
