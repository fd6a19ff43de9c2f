"""BDD step definitions for slug-based routing."""

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from src.models.wordpress import WordPressAdditionalService
from src.pages.services import company_matches
from src.utils.routes import map_wordpress_url_to_route
from src.utils.slug import generate_slug

# Load scenarios from feature file
scenarios("features/slug_routing.feature")


@pytest.fixture
def context() -> dict:
    """Storage shared between steps."""
    return {}


# Given steps


@given(parsers.parse('the display name "{name}"'))
def display_name(context: dict, name: str) -> None:
    """Store the display name."""
    context["name"] = name


@given(parsers.parse('an additional service "{slug}" delivered for company "{company}"'))
def additional_service(context: dict, slug: str, company: str) -> None:
    """Create an additional service record."""
    context["service"] = WordPressAdditionalService.model_validate(
        {"id": 1, "slug": slug, "acf": {"company_name": company}}
    )


@given(parsers.parse('the WordPress link "{link}"'))
def wordpress_link(context: dict, link: str) -> None:
    """Store the WordPress link."""
    context["link"] = link


# When steps


@when("the slug is generated")
def generate(context: dict) -> None:
    """Generate the slug."""
    context["slug"] = generate_slug(context["name"])


@when(parsers.parse('the company route parameter "{param}" is requested'))
def request_company(context: dict, param: str) -> None:
    """Match the route parameter against the service's company."""
    context["found"] = company_matches(context["service"], param)


@when("the link is mapped")
def map_link(context: dict) -> None:
    """Map the link onto a site route."""
    context["route"] = map_wordpress_url_to_route(context["link"])


# Then steps


@then(parsers.parse('the slug is "{slug}"'))
def slug_is(context: dict, slug: str) -> None:
    """Verify the generated slug."""
    assert context["slug"] == slug


@then("the company gallery is found")
def company_found(context: dict) -> None:
    """Verify the company matched."""
    assert context["found"] is True


@then("the company gallery is not found")
def company_not_found(context: dict) -> None:
    """Verify the company did not match."""
    assert context["found"] is False


@then(parsers.parse('the route is "{route}"'))
def route_is(context: dict, route: str) -> None:
    """Verify the mapped route."""
    assert context["route"] == route
