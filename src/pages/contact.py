"""Contact page and contact form handling.

Submissions are validated and logged only; there is no delivery backend.
"""

import asyncio
import re
from collections.abc import Mapping

from loguru import logger
from pydantic import ValidationError

from src.cms.client import WordPressClient
from src.cms.content import to_image_ref
from src.constants import (
    DEFAULT_CONTACT_DESCRIPTION,
    DEFAULT_CONTACT_HEADING,
    DEFAULT_CONTACT_SUBHEADING,
)
from src.models.pages import (
    ContactFormResult,
    ContactGroup,
    ContactPage,
    ContactSubmission,
    PageMetadata,
)
from src.models.wordpress import ContactPageFields
from src.pages.navigation import fetch_site_chrome

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


async def build_contact_page(client: WordPressClient) -> ContactPage:
    """Assemble the contact page; missing CMS content falls back to defaults."""
    chrome, page = await asyncio.gather(fetch_site_chrome(client), client.fetch_contact_page())

    fields = ContactPageFields()
    if page is None:
        logger.info("No contact page found, using defaults")
    else:
        try:
            fields = page.fields_as(ContactPageFields)
        except ValidationError as e:
            logger.error(f"Invalid contact page ACF fields: {e}")

    heading = fields.heading or DEFAULT_CONTACT_HEADING
    subheading = fields.subheading or DEFAULT_CONTACT_SUBHEADING
    return ContactPage(
        metadata=PageMetadata(title=heading, description=subheading),
        chrome=chrome,
        header_image=to_image_ref(fields.header_image, client.media_origin),
        heading=heading,
        subheading=subheading,
        description=fields.description or DEFAULT_CONTACT_DESCRIPTION,
        contact_groups=[
            ContactGroup(name=group.name, description=group.description, link=group.link)
            for group in fields.icon_groups
        ],
        map_link=fields.map_link,
    )


def validate_contact_form(data: ContactSubmission) -> dict[str, str]:
    """
    Validate a contact form submission.

    Args:
        data: Submitted form fields

    Returns:
        Error message per invalid field (empty when the submission is valid)
    """
    errors: dict[str, str] = {}

    if not data.name.strip():
        errors["name"] = "Name is required"

    if not data.email.strip():
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.match(data.email):
        errors["email"] = "Please enter a valid email address"

    if not data.message.strip():
        errors["message"] = "Message is required"

    return errors


def submit_contact_form(data: ContactSubmission | Mapping[str, str]) -> ContactFormResult:
    """
    Validate and accept a contact form submission.

    Args:
        data: Submission model or raw form mapping

    Returns:
        ContactFormResult with per-field errors when validation fails
    """
    submission = data if isinstance(data, ContactSubmission) else ContactSubmission.model_validate(data)

    errors = validate_contact_form(submission)
    if errors:
        logger.debug(f"Contact form rejected: {sorted(errors)}")
        return ContactFormResult(success=False, errors=errors)

    logger.info(
        "Contact form submitted",
        sender=submission.name,
        email=submission.email,
        subject=submission.subject,
    )
    return ContactFormResult(success=True)
