"""Pydantic models for WordPress REST API and ACF payloads.

Every field is optional with a default: editors leave fields empty, and ACF
serialises an empty image/group as ``false`` and an empty repeater as
``false`` or ``""``. Those shapes are normalised here so page code only ever
sees ``None`` or an empty list.
"""

from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _empty_to_none(value: Any) -> Any:
    if value is False or value == "" or value == []:
        return None
    return value


def _to_text(value: Any) -> Any:
    # ACF number fields arrive as JSON numbers
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return _empty_to_none(value)


def _empty_to_list(value: Any) -> Any:
    if value is None or value is False or value == "":
        return []
    return value


def _link_to_url(value: Any) -> Any:
    # ACF link fields return either a bare URL or {"title", "url", "target"}
    if isinstance(value, dict):
        return value.get("url") or None
    return _empty_to_none(value)


def _empty_to_dict(value: Any) -> Any:
    if not value:
        return {}
    return value


OptionalText = Annotated[str | None, BeforeValidator(_to_text)]
LinkUrl = Annotated[str | None, BeforeValidator(_link_to_url)]

T = TypeVar("T", bound="ACFModel")


class ACFModel(BaseModel):
    """Base for ACF field groups."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Rendered(BaseModel):
    """WordPress rendered text field (title, content, excerpt)."""

    rendered: str = Field(default="")
    protected: bool = Field(default=False)


class WPImage(ACFModel):
    """ACF image field."""

    id: int | None = Field(default=None, alias="ID")
    url: str = Field(default="", description="Full-size image URL")
    alt: str = Field(default="")
    width: int | None = Field(default=None)
    height: int | None = Field(default=None)
    sizes: Annotated[dict[str, Any], BeforeValidator(_empty_to_dict)] = Field(
        default_factory=dict, description="Resized variants keyed by size name"
    )


OptionalImage = Annotated[WPImage | None, BeforeValidator(_empty_to_none)]
ImageList = Annotated[list[WPImage], BeforeValidator(_empty_to_list)]


class MenuLink(ACFModel):
    """ACF link field."""

    title: str = Field(default="")
    url: str = Field(default="")
    target: str = Field(default="")


OptionalLink = Annotated[MenuLink | None, BeforeValidator(_empty_to_none)]


# Header / footer


class MenuItem(ACFModel):
    """Flexible-content menu row used by header and footer."""

    acf_fc_layout: str = Field(default="")
    menu_item_name: str = Field(default="")
    menu_item_link: OptionalLink = Field(default=None)


class HeaderFields(ACFModel):
    """ACF fields of the 'header' post type."""

    logo: OptionalImage = Field(default=None)
    menu_items: Annotated[list[MenuItem], BeforeValidator(_empty_to_list)] = Field(
        default_factory=list
    )
    quick_button_text: OptionalText = Field(default=None)
    quick_button_link: OptionalLink = Field(default=None)


class FooterImportantLink(ACFModel):
    acf_fc_layout: str = Field(default="")
    important_link_text: str = Field(default="")
    important_links: OptionalLink = Field(default=None)


class FooterIconGroup(ACFModel):
    acf_fc_layout: str = Field(default="")
    list_name: str = Field(default="")
    list_content: str = Field(default="")


class FooterSocialMedia(ACFModel):
    acf_fc_layout: str = Field(default="")
    social_media_name: str = Field(default="")
    social_media_links_items: OptionalLink = Field(default=None)


class FooterFields(ACFModel):
    """ACF fields of the 'footer' post type."""

    logo: OptionalImage = Field(default=None)
    menu: Annotated[list[MenuItem], BeforeValidator(_empty_to_list)] = Field(default_factory=list)
    important_links: Annotated[list[FooterImportantLink], BeforeValidator(_empty_to_list)] = (
        Field(default_factory=list)
    )
    icon_groups: Annotated[list[FooterIconGroup], BeforeValidator(_empty_to_list)] = Field(
        default_factory=list
    )
    social_media: Annotated[list[FooterSocialMedia], BeforeValidator(_empty_to_list)] = Field(
        default_factory=list
    )


# Page field groups


class HomePageFields(ACFModel):
    """ACF fields of the 'home' page: hero plus same-day service block."""

    background_image: OptionalImage = Field(default=None)
    hero_subheading: OptionalText = Field(default=None)
    hero_heading: OptionalText = Field(default=None)
    hero_description: OptionalText = Field(default=None)
    hero_button_text: OptionalText = Field(default=None)
    hero_button_link: LinkUrl = Field(default=None)
    service_name: OptionalText = Field(default=None)
    service_description: OptionalText = Field(default=None)
    service_image: OptionalImage = Field(default=None)
    service_subheading: OptionalText = Field(default=None)
    service_heading: OptionalText = Field(default=None)
    service_button_text: OptionalText = Field(default=None)
    service_button_link: OptionalLink = Field(default=None)


class ContactIconGroup(ACFModel):
    acf_fc_layout: str = Field(default="")
    name: OptionalText = Field(default=None)
    description: OptionalText = Field(default=None)
    link: LinkUrl = Field(default=None)


class ContactPageFields(ACFModel):
    """ACF fields of the 'contact-us' page."""

    header_image: OptionalImage = Field(default=None)
    heading: OptionalText = Field(default=None)
    subheading: OptionalText = Field(default=None)
    description: OptionalText = Field(default=None)
    icon_groups: Annotated[list[ContactIconGroup], BeforeValidator(_empty_to_list)] = Field(
        default_factory=list
    )
    map_link: LinkUrl = Field(default=None)


class GalleryAlbum(ACFModel):
    """One album row of the gallery page."""

    acf_fc_layout: str = Field(default="")
    album_cover_image: OptionalImage = Field(default=None)
    album_name: OptionalText = Field(default=None)
    gallery_images: ImageList = Field(default_factory=list)


class GalleryPageFields(ACFModel):
    """ACF fields of the 'gallery' page."""

    heading: OptionalText = Field(default=None)
    subheading: OptionalText = Field(default=None)
    background_image: OptionalImage = Field(default=None)
    gallery_items: Annotated[list[GalleryAlbum], BeforeValidator(_empty_to_list)] = Field(
        default_factory=list
    )


class ServicesPageFields(ACFModel):
    """ACF fields of the 'services' page."""

    heading: OptionalText = Field(default=None)
    sub_heading: OptionalText = Field(default=None)
    background_image: OptionalImage = Field(default=None)


# Custom post type field groups


class ServiceAlbum(ACFModel):
    album_name: OptionalText = Field(default=None)
    album_cover: OptionalImage = Field(default=None)
    service_gallery: ImageList = Field(default_factory=list)


class ServiceFields(ACFModel):
    """ACF fields of the 'service' post type."""

    service_name: OptionalText = Field(default=None)
    service_price: OptionalText = Field(default=None)
    additional_charges: OptionalText = Field(default=None)
    service_description: OptionalText = Field(default=None)
    service_image: OptionalImage = Field(default=None)
    service_gallery: ImageList = Field(default_factory=list)
    albums: Annotated[list[ServiceAlbum], BeforeValidator(_empty_to_list)] = Field(
        default_factory=list
    )
    service_button_text: OptionalText = Field(default=None)
    service_button_link: OptionalLink = Field(default=None)


class AdditionalServiceFields(ACFModel):
    """ACF fields of the 'additional-service' post type."""

    service_name: OptionalText = Field(default=None)
    price: OptionalText = Field(default=None)
    additional_service_price: OptionalText = Field(default=None)
    service_image: OptionalImage = Field(default=None)
    description: OptionalText = Field(default=None)
    gallery: ImageList = Field(default_factory=list)
    company_logo: OptionalImage = Field(default=None)
    company_name: OptionalText = Field(default=None)
    button_text: OptionalText = Field(default=None)
    button_link: OptionalLink = Field(default=None)


class TestimonialFields(ACFModel):
    """ACF fields of the 'testimonial' post type."""

    __test__ = False  # keep pytest from collecting it

    client_name: OptionalText = Field(default=None)
    designation: OptionalText = Field(default=None)
    profile_picture: OptionalImage = Field(default=None)
    testimonial_heading: OptionalText = Field(default=None)
    testimonial: OptionalText = Field(default=None)


class WhyUsItem(ACFModel):
    acf_fc_layout: str = Field(default="")
    number: OptionalText = Field(default=None)
    why_us_heading: OptionalText = Field(default=None)
    description: OptionalText = Field(default=None)


class WhyUsFields(ACFModel):
    """ACF fields of the 'why-us' post type."""

    heading: OptionalText = Field(default=None)
    sub_heading: OptionalText = Field(default=None)
    description: OptionalText = Field(default=None)
    items: Annotated[list[WhyUsItem], BeforeValidator(_empty_to_list)] = Field(
        default_factory=list, alias="why_us_"
    )


class FAQItem(ACFModel):
    acf_fc_layout: str = Field(default="")
    question: OptionalText = Field(default=None)
    answer: OptionalText = Field(default=None)


class FAQFields(ACFModel):
    """ACF fields of the 'faq' post type."""

    heading: OptionalText = Field(default=None)
    sub_heading: OptionalText = Field(default=None)
    items: Annotated[list[FAQItem], BeforeValidator(_empty_to_list)] = Field(
        default_factory=list, alias="faq"
    )


# Records


class WordPressRecord(BaseModel):
    """Fields shared by every WordPress REST object."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int = Field(default=0)
    date: str = Field(default="")
    modified: str = Field(default="")
    slug: str = Field(default="")
    status: str = Field(default="")
    type: str = Field(default="")
    link: str = Field(default="")
    title: Rendered = Field(default_factory=Rendered)
    content: Rendered = Field(default_factory=Rendered)
    featured_media: int = Field(default=0)


class WordPressPage(WordPressRecord):
    """A WordPress page.

    Pages share one endpoint but carry different ACF groups, so ``acf`` stays
    raw and is validated per page with ``fields_as``.
    """

    acf: Annotated[dict[str, Any], BeforeValidator(_empty_to_dict)] = Field(default_factory=dict)

    def fields_as(self, model_class: type[T]) -> T:
        """Validate the raw ACF group as a specific page field model."""
        return model_class.model_validate(self.acf)


class WordPressHeader(WordPressRecord):
    acf: Annotated[HeaderFields | None, BeforeValidator(_empty_to_none)] = Field(default=None)


class WordPressFooter(WordPressRecord):
    acf: Annotated[FooterFields | None, BeforeValidator(_empty_to_none)] = Field(default=None)


class WordPressService(WordPressRecord):
    acf: Annotated[ServiceFields, BeforeValidator(_empty_to_dict)] = Field(
        default_factory=ServiceFields
    )


class WordPressAdditionalService(WordPressRecord):
    acf: Annotated[AdditionalServiceFields, BeforeValidator(_empty_to_dict)] = Field(
        default_factory=AdditionalServiceFields
    )


class WordPressTestimonial(WordPressRecord):
    acf: Annotated[TestimonialFields, BeforeValidator(_empty_to_dict)] = Field(
        default_factory=TestimonialFields
    )


class WordPressWhyUs(WordPressRecord):
    acf: Annotated[WhyUsFields, BeforeValidator(_empty_to_dict)] = Field(
        default_factory=WhyUsFields
    )


class WordPressFAQ(WordPressRecord):
    acf: Annotated[FAQFields, BeforeValidator(_empty_to_dict)] = Field(default_factory=FAQFields)


class WordPressPost(WordPressRecord):
    """A blog post, optionally with embedded media/terms/author (``_embed``)."""

    excerpt: Rendered = Field(default_factory=Rendered)
    categories: list[int] = Field(default_factory=list)
    tags: list[int] = Field(default_factory=list)
    author: int = Field(default=0)
    embedded: dict[str, Any] = Field(default_factory=dict, alias="_embedded")

    @property
    def featured_media_item(self) -> dict[str, Any] | None:
        media = self.embedded.get("wp:featuredmedia") or []
        return media[0] if media else None

    def featured_image_url(self) -> str | None:
        """URL of the embedded featured image, if any."""
        media = self.featured_media_item
        return (media or {}).get("source_url") or None

    def image_alt(self) -> str:
        """Alt text of the featured image, falling back to the post title."""
        media = self.featured_media_item
        return (media or {}).get("alt_text") or self.title.rendered


class WordPressMedia(BaseModel):
    """A media library item."""

    id: int = Field(default=0)
    source_url: str = Field(default="")
    alt_text: str = Field(default="")
    media_details: dict[str, Any] = Field(default_factory=dict)
