"""Page view models handed to the presentation layer."""

from pydantic import BaseModel, Field


class ImageRef(BaseModel):
    """An image ready to render (URL already normalised)."""

    url: str = Field(description="Public image URL")
    alt: str = Field(default="")
    width: int | None = Field(default=None)
    height: int | None = Field(default=None)


class NavLink(BaseModel):
    """A navigation entry derived from a CMS menu link."""

    label: str = Field(description="Link text")
    href: str = Field(description="Site route, external URL, or '#'")
    external: bool = Field(default=False, description="Render as an outbound link")


class PageMetadata(BaseModel):
    title: str
    description: str = Field(default="")


# Site chrome


class HeaderNav(BaseModel):
    logo: ImageRef | None = Field(default=None)
    links: list[NavLink] = Field(default_factory=list)
    quick_button: NavLink


class FooterContactGroup(BaseModel):
    name: str
    content: str = Field(default="")


class FooterNav(BaseModel):
    logo: ImageRef | None = Field(default=None)
    links: list[NavLink] = Field(default_factory=list)
    important_links: list[NavLink] = Field(default_factory=list)
    contact_groups: list[FooterContactGroup] = Field(default_factory=list)
    social_links: list[NavLink] = Field(default_factory=list)


class SiteChrome(BaseModel):
    """Header and footer shared by every page."""

    header: HeaderNav
    footer: FooterNav = Field(default_factory=FooterNav)


# Home page content


class HeroContent(BaseModel):
    """Hero block of the home page."""

    pre_headline: str | None = Field(default=None)
    headline: str | None = Field(default=None)
    body_text: str | None = Field(default=None)
    hero_image: str | None = Field(default=None)
    hero_image_alt: str | None = Field(default=None)
    cta_text: str | None = Field(default=None)
    cta_link: str | None = Field(default=None)


class SameDayServiceContent(BaseModel):
    """Same-day service block of the home page; every field optional."""

    service_name: str | None = Field(default=None)
    service_description: str | None = Field(default=None)
    service_image: ImageRef | None = Field(default=None)
    service_subheading: str | None = Field(default=None)
    service_heading: str | None = Field(default=None)
    service_button_text: str | None = Field(default=None)
    service_button_link: str | None = Field(default=None)


class AlbumCard(BaseModel):
    name: str
    slug: str
    href: str = Field(description="Route of the album page")
    cover: ImageRef | None = Field(default=None)
    image_count: int = Field(default=0, ge=0)


class ServiceCard(BaseModel):
    name: str
    slug: str
    price: str | None = Field(default=None)
    additional_charges: str | None = Field(default=None)
    description: str | None = Field(default=None)
    image: ImageRef | None = Field(default=None)
    gallery: list[ImageRef] = Field(default_factory=list)
    albums: list[AlbumCard] = Field(default_factory=list)
    button_text: str | None = Field(default=None)
    button_link: str | None = Field(default=None)


class AdditionalServiceCard(BaseModel):
    name: str
    slug: str
    href: str = Field(description="Route of the additional service page")
    price: str | None = Field(default=None)
    image: ImageRef | None = Field(default=None)
    company_name: str | None = Field(default=None)
    company_href: str | None = Field(default=None, description="Route of the company gallery")


class TestimonialCard(BaseModel):
    __test__ = False  # keep pytest from collecting it

    client_name: str
    designation: str | None = Field(default=None)
    picture: ImageRef | None = Field(default=None)
    heading: str | None = Field(default=None)
    text: str | None = Field(default=None)


class WhyUsPoint(BaseModel):
    number: str | None = Field(default=None)
    heading: str | None = Field(default=None)
    description: str | None = Field(default=None)


class WhyUsSection(BaseModel):
    heading: str | None = Field(default=None)
    sub_heading: str | None = Field(default=None)
    description: str | None = Field(default=None)
    points: list[WhyUsPoint] = Field(default_factory=list)


class FAQEntry(BaseModel):
    question: str
    answer: str = Field(default="")


class FAQSection(BaseModel):
    heading: str | None = Field(default=None)
    sub_heading: str | None = Field(default=None)
    entries: list[FAQEntry] = Field(default_factory=list)


# Pages


class HomePage(BaseModel):
    metadata: PageMetadata
    chrome: SiteChrome
    hero: HeroContent
    same_day_service: SameDayServiceContent
    services: list[ServiceCard] = Field(default_factory=list)
    additional_services: list[AdditionalServiceCard] = Field(default_factory=list)
    testimonials: list[TestimonialCard] = Field(default_factory=list)
    why_us: WhyUsSection | None = Field(default=None)
    faq: FAQSection | None = Field(default=None)


class GalleryPage(BaseModel):
    metadata: PageMetadata
    chrome: SiteChrome
    heading: str
    subheading: str
    background_image: ImageRef | None = Field(default=None)
    albums: list[AlbumCard] = Field(default_factory=list)


class AlbumPage(BaseModel):
    metadata: PageMetadata
    chrome: SiteChrome
    name: str
    slug: str
    images: list[ImageRef] = Field(default_factory=list)
    back_href: str = Field(default="/gallery")


class ServicesPage(BaseModel):
    metadata: PageMetadata
    chrome: SiteChrome
    heading: str
    subheading: str | None = Field(default=None)
    background_image: ImageRef | None = Field(default=None)
    services: list[ServiceCard] = Field(default_factory=list)


class AdditionalServicePage(BaseModel):
    metadata: PageMetadata
    chrome: SiteChrome
    name: str
    slug: str
    price: str | None = Field(default=None)
    description: str | None = Field(default=None)
    image: ImageRef | None = Field(default=None)
    gallery: list[ImageRef] = Field(default_factory=list)
    company_name: str | None = Field(default=None)
    company_logo: ImageRef | None = Field(default=None)
    company_href: str | None = Field(default=None)
    button_text: str
    button_link: str = Field(default="#")


class CompanyGalleryPage(BaseModel):
    metadata: PageMetadata
    chrome: SiteChrome
    service_name: str
    service_slug: str
    company_name: str
    company_slug: str
    company_logo: ImageRef | None = Field(default=None)
    price: str | None = Field(default=None)
    description: str | None = Field(default=None)
    gallery: list[ImageRef] = Field(default_factory=list)
    button_text: str
    back_href: str


class ContactGroup(BaseModel):
    name: str | None = Field(default=None)
    description: str | None = Field(default=None)
    link: str | None = Field(default=None)


class ContactPage(BaseModel):
    metadata: PageMetadata
    chrome: SiteChrome
    header_image: ImageRef | None = Field(default=None)
    heading: str
    subheading: str | None = Field(default=None)
    description: str | None = Field(default=None)
    contact_groups: list[ContactGroup] = Field(default_factory=list)
    map_link: str | None = Field(default=None)


# Contact form


class ContactSubmission(BaseModel):
    """Contact form payload as typed by the visitor."""

    name: str = Field(default="")
    email: str = Field(default="")
    phone: str = Field(default="")
    subject: str = Field(default="")
    message: str = Field(default="")


class ContactFormResult(BaseModel):
    success: bool
    errors: dict[str, str] = Field(default_factory=dict)
